from linekeys.edit_mode import PromptEditMode
from linekeys.emacs import Emacs, default_emacs_keybindings
from linekeys.enums import EditCommand, ReedlineEvent
from linekeys.keybindings import Keybindings
from linekeys.keys import (
    FocusEvent,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    ResizeEvent,
    convert_raw_event,
)


def _key(code, modifiers=KeyModifiers.NONE):
    return convert_raw_event(KeyEvent(code, modifiers))


def test_ctrl_l_leads_to_clear_screen_event():
    emacs = Emacs()
    result = emacs.parse_event(_key(KeyCode.char("l"), KeyModifiers.CONTROL))
    assert result == ReedlineEvent.CLEAR_SCREEN


def test_overriding_default_keybindings_works():
    keybindings = default_emacs_keybindings()
    keybindings.add_binding(
        KeyModifiers.CONTROL, KeyCode.char("l"), ReedlineEvent.HISTORY_HINT_COMPLETE
    )
    emacs = Emacs(keybindings)
    result = emacs.parse_event(_key(KeyCode.char("l"), KeyModifiers.CONTROL))
    assert result == ReedlineEvent.HISTORY_HINT_COMPLETE


def test_inserting_character_works():
    result = Emacs().parse_event(_key(KeyCode.char("l")))
    assert result == ReedlineEvent.edit([EditCommand.insert_char("l")])


def test_inserting_capital_character_works():
    result = Emacs().parse_event(_key(KeyCode.char("l"), KeyModifiers.SHIFT))
    assert result == ReedlineEvent.edit([EditCommand.insert_char("L")])


def test_return_none_reedline_event_when_keybinding_is_not_found():
    emacs = Emacs(Keybindings())
    result = emacs.parse_event(_key(KeyCode.char("l"), KeyModifiers.CONTROL))
    assert result == ReedlineEvent.NONE


def test_inserting_capital_character_for_non_ascii_remains_as_is():
    result = Emacs().parse_event(_key(KeyCode.char("😀"), KeyModifiers.SHIFT))
    assert result == ReedlineEvent.edit([EditCommand.insert_char("😀")])


def test_uppercase_char_with_control_is_lowered_for_lookup():
    result = Emacs().parse_event(_key(KeyCode.char("L"), KeyModifiers.CONTROL))
    assert result == ReedlineEvent.CLEAR_SCREEN


def test_alt_gr_combination_types_the_character():
    mods = KeyModifiers.CONTROL | KeyModifiers.ALT
    result = Emacs().parse_event(_key(KeyCode.char("q"), mods))
    assert result == ReedlineEvent.edit([EditCommand.insert_char("q")])


def test_enter_and_unbound_named_key():
    emacs = Emacs()
    assert emacs.parse_event(_key(KeyCode.ENTER)) == ReedlineEvent.ENTER
    assert emacs.parse_event(_key(KeyCode.function(5))) == ReedlineEvent.NONE


def test_non_key_events():
    emacs = Emacs()
    assert emacs.parse_event(convert_raw_event(MouseEvent())) == ReedlineEvent.MOUSE
    assert emacs.parse_event(convert_raw_event(ResizeEvent(80, 24))) == ReedlineEvent.resize(80, 24)
    assert emacs.parse_event(convert_raw_event(FocusEvent(True))) == ReedlineEvent.NONE


def test_paste_normalises_line_endings():
    result = Emacs().parse_event(convert_raw_event(PasteEvent("a\r\nb\rc")))
    assert result == ReedlineEvent.edit([EditCommand.insert_string("a\nb\nc")])


def test_edit_mode_is_emacs():
    assert Emacs().edit_mode() is PromptEditMode.EMACS