"""Terminal input events and their normalisation before key parsing."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import ClassVar, Union

_NAMED_KEYS = frozenset(
    {
        "Backspace",
        "Enter",
        "Left",
        "Right",
        "Up",
        "Down",
        "Home",
        "End",
        "PageUp",
        "PageDown",
        "Tab",
        "BackTab",
        "Delete",
        "Insert",
        "Null",
        "Esc",
    }
)


@dataclass(frozen=True)
class KeyCode:
    """A key: a named key, a character key (``Char``) or a function key (``F``)."""

    name: str
    value: str | int | None = None

    BACKSPACE: ClassVar[KeyCode]
    ENTER: ClassVar[KeyCode]
    LEFT: ClassVar[KeyCode]
    RIGHT: ClassVar[KeyCode]
    UP: ClassVar[KeyCode]
    DOWN: ClassVar[KeyCode]
    HOME: ClassVar[KeyCode]
    END: ClassVar[KeyCode]
    PAGE_UP: ClassVar[KeyCode]
    PAGE_DOWN: ClassVar[KeyCode]
    TAB: ClassVar[KeyCode]
    BACK_TAB: ClassVar[KeyCode]
    DELETE: ClassVar[KeyCode]
    INSERT: ClassVar[KeyCode]
    NULL: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]

    def __post_init__(self) -> None:
        if self.name == "Char":
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError("a character key needs exactly one character")
        elif self.name == "F":
            if (
                not isinstance(self.value, int)
                or isinstance(self.value, bool)
                or not 0 <= self.value <= 255
            ):
                raise ValueError("a function key needs a number from 0 to 255")
        elif self.name in _NAMED_KEYS:
            if self.value is not None:
                raise ValueError(f"key {self.name!r} takes no value")
        else:
            raise ValueError(f"unknown key {self.name!r}")

    @classmethod
    def char(cls, character: str) -> KeyCode:
        """Key that types ``character``."""
        return cls("Char", character)

    @classmethod
    def function(cls, number: int) -> KeyCode:
        """Function key F<number>."""
        return cls("F", number)

    @property
    def is_char(self) -> bool:
        return self.name == "Char"

    def __str__(self) -> str:
        if self.name == "Char":
            return f"Char({self.value!r})"
        if self.name == "F":
            return f"F{self.value}"
        return self.name


KeyCode.BACKSPACE = KeyCode("Backspace")
KeyCode.ENTER = KeyCode("Enter")
KeyCode.LEFT = KeyCode("Left")
KeyCode.RIGHT = KeyCode("Right")
KeyCode.UP = KeyCode("Up")
KeyCode.DOWN = KeyCode("Down")
KeyCode.HOME = KeyCode("Home")
KeyCode.END = KeyCode("End")
KeyCode.PAGE_UP = KeyCode("PageUp")
KeyCode.PAGE_DOWN = KeyCode("PageDown")
KeyCode.TAB = KeyCode("Tab")
KeyCode.BACK_TAB = KeyCode("BackTab")
KeyCode.DELETE = KeyCode("Delete")
KeyCode.INSERT = KeyCode("Insert")
KeyCode.NULL = KeyCode("Null")
KeyCode.ESC = KeyCode("Esc")


class KeyModifiers(enum.Flag):
    """Modifier keys held down with a key press; combine with ``|``."""

    NONE = 0
    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000


class KeyEventKind(enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


def _check_u16(value: int, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 0xFFFF:
        raise ValueError(f"{what} must be an integer from 0 to 65535")


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class MouseEvent:
    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int

    def __post_init__(self) -> None:
        _check_u16(self.width, "width")
        _check_u16(self.height, "height")


@dataclass(frozen=True)
class FocusEvent:
    gained: bool


@dataclass(frozen=True)
class PasteEvent:
    text: str


Event = Union[KeyEvent, MouseEvent, ResizeEvent, FocusEvent, PasteEvent]
_EVENT_TYPES = (KeyEvent, MouseEvent, ResizeEvent, FocusEvent, PasteEvent)


@dataclass(frozen=True)
class ReedlineRawEvent:
    """A terminal event that is never a key release; repeats become presses."""

    event: Event

    def __post_init__(self) -> None:
        if not isinstance(self.event, _EVENT_TYPES):
            raise TypeError(f"not a terminal event: {self.event!r}")
        if isinstance(self.event, KeyEvent):
            if self.event.kind is KeyEventKind.RELEASE:
                raise ValueError("key release events are not accepted")
            if self.event.kind is KeyEventKind.REPEAT:
                pressed = dataclasses.replace(self.event, kind=KeyEventKind.PRESS)
                object.__setattr__(self, "event", pressed)


def convert_raw_event(event: Event) -> ReedlineRawEvent | None:
    """Wrap ``event``, or return None when it is a key release."""
    if isinstance(event, KeyEvent) and event.kind is KeyEventKind.RELEASE:
        return None
    return ReedlineRawEvent(event)