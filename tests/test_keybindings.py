import pytest

from linekeys.enums import EditCommand, ReedlineEvent
from linekeys.keybindings import (
    KeyCombination,
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    edit_bind,
)
from linekeys.keys import KeyCode, KeyModifiers

CTRL = KeyModifiers.CONTROL
NONE = KeyModifiers.NONE


def test_new_keybindings_are_empty():
    kb = Keybindings()
    assert len(kb) == 0
    assert kb.find_binding(CTRL, KeyCode.char("c")) is None


def test_add_then_find():
    kb = Keybindings()
    kb.add_binding(CTRL, KeyCode.char("x"), ReedlineEvent.SUBMIT)
    assert kb.find_binding(CTRL, KeyCode.char("x")) == ReedlineEvent.SUBMIT
    assert kb.find_binding(NONE, KeyCode.char("x")) is None
    assert kb.bindings[KeyCombination(CTRL, KeyCode.char("x"))] == ReedlineEvent.SUBMIT


def test_add_replaces_existing_binding():
    kb = Keybindings()
    kb.add_binding(NONE, KeyCode.TAB, ReedlineEvent.MENU_NEXT)
    kb.add_binding(NONE, KeyCode.TAB, ReedlineEvent.MENU_PREVIOUS)
    assert len(kb) == 1
    assert kb.find_binding(NONE, KeyCode.TAB) == ReedlineEvent.MENU_PREVIOUS


def test_remove_binding_returns_previous_event():
    kb = Keybindings()
    kb.add_binding(NONE, KeyCode.TAB, ReedlineEvent.MENU_NEXT)
    assert kb.remove_binding(NONE, KeyCode.TAB) == ReedlineEvent.MENU_NEXT
    assert kb.find_binding(NONE, KeyCode.TAB) is None
    assert kb.remove_binding(NONE, KeyCode.TAB) is None


def test_empty_until_found_is_rejected():
    kb = Keybindings()
    with pytest.raises(ValueError):
        kb.add_binding(NONE, KeyCode.TAB, ReedlineEvent.until_found([]))
    assert len(kb) == 0


def test_edit_bind_wraps_single_command():
    event = edit_bind(EditCommand.UNDO)
    assert event == ReedlineEvent.edit([EditCommand.UNDO])
    assert event.args[0] == (EditCommand.UNDO,)


def test_common_control_bindings():
    kb = Keybindings()
    add_common_control_bindings(kb)
    assert kb.find_binding(NONE, KeyCode.ESC) == ReedlineEvent.ESC
    assert kb.find_binding(CTRL, KeyCode.char("c")) == ReedlineEvent.CTRL_C
    assert kb.find_binding(CTRL, KeyCode.char("d")) == ReedlineEvent.CTRL_D
    assert kb.find_binding(CTRL, KeyCode.char("l")) == ReedlineEvent.CLEAR_SCREEN
    assert kb.find_binding(CTRL, KeyCode.char("r")) == ReedlineEvent.SEARCH_HISTORY
    assert kb.find_binding(CTRL, KeyCode.char("o")) == ReedlineEvent.OPEN_EDITOR


def test_common_navigation_bindings():
    kb = Keybindings()
    add_common_navigation_bindings(kb)
    up = ReedlineEvent.until_found([ReedlineEvent.MENU_UP, ReedlineEvent.UP])
    assert kb.find_binding(NONE, KeyCode.UP) == up
    assert kb.find_binding(CTRL, KeyCode.char("p")) == up
    assert kb.find_binding(NONE, KeyCode.HOME) == edit_bind(EditCommand.MOVE_TO_LINE_START)
    assert kb.find_binding(CTRL, KeyCode.END) == edit_bind(EditCommand.MOVE_TO_END)
    assert kb.find_binding(NONE, KeyCode.END) == kb.find_binding(CTRL, KeyCode.char("e"))


def test_common_edit_bindings():
    kb = Keybindings()
    add_common_edit_bindings(kb)
    assert kb.find_binding(NONE, KeyCode.BACKSPACE) == edit_bind(EditCommand.BACKSPACE)
    assert kb.find_binding(CTRL, KeyCode.char("h")) == edit_bind(EditCommand.BACKSPACE)
    assert kb.find_binding(CTRL, KeyCode.char("w")) == edit_bind(EditCommand.BACKSPACE_WORD)
    assert kb.find_binding(CTRL, KeyCode.DELETE) == edit_bind(EditCommand.DELETE_WORD)