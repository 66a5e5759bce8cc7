"""Emacs-style parsing of terminal input."""

from __future__ import annotations

from linekeys.edit_mode import EditMode, PromptEditMode
from linekeys.enums import EditCommand, ReedlineEvent
from linekeys.keybindings import (
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    edit_bind,
)
from linekeys.keys import (
    FocusEvent,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    ReedlineRawEvent,
    ResizeEvent,
)

_TYPING_MODIFIERS = (
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    # AltGr on non-US keyboards arrives as Control+Alt.
    KeyModifiers.CONTROL | KeyModifiers.ALT,
    KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
)


def _ascii_lower(char: str) -> str:
    return char.lower() if char.isascii() else char


def _ascii_upper(char: str) -> str:
    return char.upper() if char.isascii() else char


def default_emacs_keybindings() -> Keybindings:
    """The default Emacs key bindings."""
    ctrl, alt = KeyModifiers.CONTROL, KeyModifiers.ALT
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)

    kb.add_binding(KeyModifiers.NONE, KeyCode.ENTER, ReedlineEvent.ENTER)

    word_right = ReedlineEvent.until_found(
        [ReedlineEvent.HISTORY_HINT_WORD_COMPLETE, edit_bind(EditCommand.MOVE_WORD_RIGHT)]
    )

    # Ctrl: moves
    kb.add_binding(
        ctrl,
        KeyCode.char("b"),
        ReedlineEvent.until_found([ReedlineEvent.MENU_LEFT, ReedlineEvent.LEFT]),
    )
    kb.add_binding(
        ctrl,
        KeyCode.char("f"),
        ReedlineEvent.until_found(
            [ReedlineEvent.HISTORY_HINT_COMPLETE, ReedlineEvent.MENU_RIGHT, ReedlineEvent.RIGHT]
        ),
    )
    # Ctrl: undo/redo
    kb.add_binding(ctrl, KeyCode.char("g"), edit_bind(EditCommand.REDO))
    kb.add_binding(ctrl, KeyCode.char("z"), edit_bind(EditCommand.UNDO))
    # Ctrl: cutting
    kb.add_binding(ctrl, KeyCode.char("y"), edit_bind(EditCommand.PASTE_CUT_BUFFER_BEFORE))
    kb.add_binding(ctrl, KeyCode.char("w"), edit_bind(EditCommand.CUT_WORD_LEFT))
    kb.add_binding(ctrl, KeyCode.char("k"), edit_bind(EditCommand.CUT_TO_END))
    kb.add_binding(ctrl, KeyCode.char("u"), edit_bind(EditCommand.CUT_FROM_START))
    # Ctrl: edits
    kb.add_binding(ctrl, KeyCode.char("t"), edit_bind(EditCommand.SWAP_GRAPHEMES))

    # Alt: moves
    kb.add_binding(alt, KeyCode.LEFT, edit_bind(EditCommand.MOVE_WORD_LEFT))
    kb.add_binding(alt, KeyCode.RIGHT, word_right)
    kb.add_binding(alt, KeyCode.char("b"), edit_bind(EditCommand.MOVE_WORD_LEFT))
    kb.add_binding(alt, KeyCode.char("f"), word_right)
    # Alt: edits
    kb.add_binding(alt, KeyCode.DELETE, edit_bind(EditCommand.DELETE_WORD))
    kb.add_binding(alt, KeyCode.BACKSPACE, edit_bind(EditCommand.BACKSPACE_WORD))
    kb.add_binding(alt, KeyCode.char("m"), edit_bind(EditCommand.BACKSPACE_WORD))
    # Alt: cutting
    kb.add_binding(alt, KeyCode.char("d"), edit_bind(EditCommand.CUT_WORD_RIGHT))
    # Alt: case changes
    kb.add_binding(alt, KeyCode.char("u"), edit_bind(EditCommand.UPPERCASE_WORD))
    kb.add_binding(alt, KeyCode.char("l"), edit_bind(EditCommand.LOWERCASE_WORD))
    kb.add_binding(alt, KeyCode.char("c"), edit_bind(EditCommand.CAPITALIZE_CHAR))

    return kb


class Emacs(EditMode):
    """Parses input events the way an Emacs-style editor does."""

    def __init__(self, keybindings: Keybindings | None = None) -> None:
        self.keybindings = keybindings if keybindings is not None else default_emacs_keybindings()

    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        inner = event.event
        if isinstance(inner, KeyEvent):
            return self._parse_key(inner.modifiers, inner.code)
        if isinstance(inner, MouseEvent):
            return ReedlineEvent.MOUSE
        if isinstance(inner, ResizeEvent):
            return ReedlineEvent.resize(inner.width, inner.height)
        if isinstance(inner, FocusEvent):
            return ReedlineEvent.NONE
        if isinstance(inner, PasteEvent):
            text = inner.text.replace("\r\n", "\n").replace("\r", "\n")
            return ReedlineEvent.edit([EditCommand.insert_string(text)])
        raise TypeError(f"not a terminal event: {inner!r}")

    def _parse_key(self, modifier: KeyModifiers, code: KeyCode) -> ReedlineEvent:
        if not code.is_char:
            found = self.keybindings.find_binding(modifier, code)
            return found if found is not None else ReedlineEvent.NONE

        char = code.value if modifier == KeyModifiers.NONE else _ascii_lower(code.value)
        found = self.keybindings.find_binding(modifier, KeyCode.char(char))
        if found is not None:
            return found
        if modifier in _TYPING_MODIFIERS:
            if modifier == KeyModifiers.SHIFT:
                char = _ascii_upper(char)
            return ReedlineEvent.edit([EditCommand.insert_char(char)])
        return ReedlineEvent.NONE

    def edit_mode(self) -> PromptEditMode:
        return PromptEditMode.EMACS