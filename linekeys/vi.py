"""Vi-style parsing of terminal input, with separate normal and insert modes."""

from __future__ import annotations

import enum

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
from linekeys.vi_motion import ViCharSearch
from linekeys.vi_parser import parse

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


def default_vi_normal_keybindings() -> Keybindings:
    """The default key bindings of Vi normal mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    # As in vi, Backspace only moves left in normal mode.
    kb.add_binding(KeyModifiers.NONE, KeyCode.BACKSPACE, edit_bind(EditCommand.MOVE_LEFT))
    kb.add_binding(KeyModifiers.NONE, KeyCode.DELETE, edit_bind(EditCommand.DELETE))
    return kb


def default_vi_insert_keybindings() -> Keybindings:
    """The default key bindings of Vi insert mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    return kb


class ViMode(enum.Enum):
    NORMAL = "normal"
    INSERT = "insert"


class Vi(EditMode):
    """Parses input events the way a Vi-style editor does."""

    def __init__(
        self,
        insert_keybindings: Keybindings | None = None,
        normal_keybindings: Keybindings | None = None,
        mode: ViMode = ViMode.INSERT,
    ) -> None:
        self.insert_keybindings = (
            insert_keybindings
            if insert_keybindings is not None
            else default_vi_insert_keybindings()
        )
        self.normal_keybindings = (
            normal_keybindings
            if normal_keybindings is not None
            else default_vi_normal_keybindings()
        )
        self.mode = mode
        self.cache: list[str] = []
        self.previous: ReedlineEvent | None = None
        # The last f, F, t or T search, replayed by ';' and ','.
        self.last_char_search: ViCharSearch | None = None

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
        if code.is_char:
            if self.mode is ViMode.NORMAL:
                return self._parse_normal_char(modifier, code.value)
            return self._parse_insert_char(modifier, code.value)

        if modifier == KeyModifiers.NONE and code == KeyCode.ESC:
            self.cache.clear()
            self.mode = ViMode.NORMAL
            return ReedlineEvent.multiple([ReedlineEvent.ESC, ReedlineEvent.REPAINT])
        if modifier == KeyModifiers.NONE and code == KeyCode.ENTER:
            self.mode = ViMode.INSERT
            return ReedlineEvent.ENTER

        bindings = (
            self.normal_keybindings if self.mode is ViMode.NORMAL else self.insert_keybindings
        )
        found = bindings.find_binding(modifier, code)
        return found if found is not None else ReedlineEvent.NONE

    def _parse_normal_char(self, modifier: KeyModifiers, char: str) -> ReedlineEvent:
        char = _ascii_lower(char)
        found = self.normal_keybindings.find_binding(modifier, KeyCode.char(char))
        if found is not None:
            return found
        if modifier not in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return ReedlineEvent.NONE

        self.cache.append(_ascii_upper(char) if modifier == KeyModifiers.SHIFT else char)
        sequence = parse(self.cache)
        if not sequence.is_valid():
            self.cache.clear()
            return ReedlineEvent.NONE
        if not sequence.is_complete():
            return ReedlineEvent.NONE
        if sequence.enters_insert_mode():
            self.mode = ViMode.INSERT
        result = sequence.to_reedline_event(self)
        self.cache.clear()
        return result

    def _parse_insert_char(self, modifier: KeyModifiers, char: str) -> ReedlineEvent:
        if modifier != KeyModifiers.NONE:
            char = _ascii_lower(char)
        found = self.insert_keybindings.find_binding(modifier, KeyCode.char(char))
        if found is not None:
            return found
        if modifier in _TYPING_MODIFIERS:
            if modifier == KeyModifiers.SHIFT:
                char = _ascii_upper(char)
            return ReedlineEvent.edit([EditCommand.insert_char(char)])
        return ReedlineEvent.NONE

    def edit_mode(self) -> PromptEditMode:
        if self.mode is ViMode.NORMAL:
            return PromptEditMode.VI_NORMAL
        return PromptEditMode.VI_INSERT