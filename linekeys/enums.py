"""Editing commands, editor events, undo grouping and read results.

Each type is a tagged value: ``name`` is the variant and ``args`` its payload.
Variants without payload are class constants (``EditCommand.MOVE_LEFT``);
variants with payload are built by factories (``EditCommand.insert_char("a")``).
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable

# Characters with the Unicode White_Space property.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _is_whitespace(char: str) -> bool:
    return char in _WHITESPACE


def _snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class EditType(enum.Enum):
    """How an edit command takes part in undo grouping."""

    MOVE_CURSOR = "move_cursor"
    UNDO_REDO = "undo_redo"
    EDIT_TEXT = "edit_text"


@dataclass(frozen=True)
class _Spec:
    params: tuple[str, ...] = ()
    label: str | None = None
    edit_type: EditType | None = None


def _check_char(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a character, got {value!r}")
    if len(value) != 1:
        raise ValueError(f"expected exactly one character, got {value!r}")
    return value


def _check_arg(kind: str, value: Any) -> Any:
    if kind == "char":
        return _check_char(value)
    if kind == "optchar":
        return None if value is None else _check_char(value)
    if kind in ("int", "u16"):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"expected an integer, got {value!r}")
        upper = 0xFFFF if kind == "u16" else None
        if value < 0 or (upper is not None and value > upper):
            raise ValueError(f"integer out of range: {value}")
        return value
    if kind == "str":
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {value!r}")
        return value
    if kind in ("commands", "events"):
        item_type = EditCommand if kind == "commands" else ReedlineEvent
        if isinstance(value, (str, bytes)):
            raise TypeError(f"expected a sequence of {item_type.__name__}")
        items = tuple(value)
        for item in items:
            if not isinstance(item, item_type):
                raise TypeError(f"expected {item_type.__name__}, got {item!r}")
        return items
    raise AssertionError(f"unknown parameter kind {kind}")


@dataclass(frozen=True, repr=False)
class _Variant:
    name: str
    args: tuple = ()

    _SPECS: ClassVar[dict[str, _Spec]] = {}

    def __post_init__(self) -> None:
        spec = self._SPECS.get(self.name)
        if spec is None:
            raise ValueError(f"unknown {type(self).__name__} variant {self.name!r}")
        args = tuple(self.args)
        if len(args) != len(spec.params):
            raise TypeError(
                f"{self.name} takes {len(spec.params)} argument(s), got {len(args)}"
            )
        checked = tuple(_check_arg(kind, value) for kind, value in zip(spec.params, args))
        object.__setattr__(self, "args", checked)

    def __str__(self) -> str:
        return self._SPECS[self.name].label or self.name

    def __repr__(self) -> str:
        head = f"{type(self).__name__}.{self.name}"
        if not self.args:
            return head
        return f"{head}({', '.join(repr(arg) for arg in self.args)})"


def _factory(cls: type, name: str, spec: _Spec) -> Callable[..., Any]:
    def build(*args: Any) -> Any:
        missing = spec.params[len(args):]
        if missing and all(kind == "optchar" for kind in missing):
            args = args + (None,) * len(missing)
        return cls(name, args)

    build.__name__ = _snake_case(name)
    build.__qualname__ = f"{cls.__name__}.{build.__name__}"
    build.__doc__ = f"Build the {name} variant."
    return build


def _install_variants(cls: type) -> None:
    for name, spec in cls._SPECS.items():
        attribute = _snake_case(name)
        if spec.params:
            setattr(cls, attribute, staticmethod(_factory(cls, name, spec)))
        else:
            setattr(cls, attribute.upper(), cls(name))


class Signal(_Variant):
    """How reading a line ended: ``success(text)``, ``CTRL_C`` or ``CTRL_D``."""

    _SPECS = {
        "Success": _Spec(("str",)),
        "CtrlC": _Spec(),
        "CtrlD": _Spec(),
    }


def _edit_type_of(name: str) -> EditType:
    if name.startswith("Move"):
        return EditType.MOVE_CURSOR
    if name in ("Undo", "Redo"):
        return EditType.UNDO_REDO
    return EditType.EDIT_TEXT


_EDIT_COMMAND_TABLE: tuple[tuple[str, tuple[str, ...], str | None], ...] = (
    ("MoveToStart", (), None),
    ("MoveToLineStart", (), None),
    ("MoveToEnd", (), None),
    ("MoveToLineEnd", (), None),
    ("MoveLeft", (), None),
    ("MoveRight", (), None),
    ("MoveWordLeft", (), None),
    ("MoveBigWordLeft", (), None),
    ("MoveWordRight", (), None),
    ("MoveWordRightStart", (), None),
    ("MoveBigWordRightStart", (), None),
    ("MoveWordRightEnd", (), None),
    ("MoveBigWordRightEnd", (), None),
    ("MoveToPosition", ("int",), "MoveToPosition  Value: <int>"),
    ("InsertChar", ("char",), "InsertChar  Value: <char>"),
    ("InsertString", ("str",), "InsertString Value: <string>"),
    ("InsertNewline", (), None),
    ("ReplaceChar", ("char",), "ReplaceChar <char>"),
    ("ReplaceChars", ("int", "str"), "ReplaceChars <int> <string>"),
    ("Backspace", (), None),
    ("Delete", (), None),
    ("CutChar", (), None),
    ("BackspaceWord", (), None),
    ("DeleteWord", (), None),
    ("Clear", (), None),
    ("ClearToLineEnd", (), None),
    ("Complete", (), None),
    ("CutCurrentLine", (), None),
    ("CutFromStart", (), None),
    ("CutFromLineStart", (), None),
    ("CutToEnd", (), None),
    ("CutToLineEnd", (), None),
    ("CutWordLeft", (), None),
    ("CutBigWordLeft", (), None),
    ("CutWordRight", (), None),
    ("CutBigWordRight", (), None),
    ("CutWordRightToNext", (), None),
    ("CutBigWordRightToNext", (), None),
    ("PasteCutBufferBefore", (), None),
    ("PasteCutBufferAfter", (), None),
    ("UppercaseWord", (), None),
    ("LowercaseWord", (), None),
    ("CapitalizeChar", (), None),
    ("SwitchcaseChar", (), None),
    ("SwapWords", (), None),
    ("SwapGraphemes", (), None),
    ("Undo", (), None),
    ("Redo", (), None),
    ("CutRightUntil", ("char",), "CutRightUntil Value: <char>"),
    ("CutRightBefore", ("char",), "CutRightBefore Value: <char>"),
    ("MoveRightUntil", ("char",), "MoveRightUntil Value: <char>"),
    ("MoveRightBefore", ("char",), "MoveRightBefore Value: <char>"),
    ("CutLeftUntil", ("char",), "CutLeftUntil Value: <char>"),
    ("CutLeftBefore", ("char",), "CutLeftBefore Value: <char>"),
    ("MoveLeftUntil", ("char",), "MoveLeftUntil Value: <char>"),
    ("MoveLeftBefore", ("char",), "MoveLeftBefore Value: <char>"),
)

_EDIT_COMMAND_SPECS = {
    name: _Spec(params, label, _edit_type_of(name))
    for name, params, label in _EDIT_COMMAND_TABLE
}

EDIT_COMMAND_NAMES: tuple[str, ...] = tuple(_EDIT_COMMAND_SPECS)


class EditCommand(_Variant):
    """An editing action that can be bound to a key."""

    _SPECS = _EDIT_COMMAND_SPECS

    def edit_type(self) -> EditType:
        """Whether this command moves the cursor, edits text or undoes/redoes."""
        return self._SPECS[self.name].edit_type


class UndoBehavior(_Variant):
    """Tag on every line change that decides how it lands on the undo stack."""

    _SPECS = {
        "InsertCharacter": _Spec(("char",)),
        "Backspace": _Spec(("optchar",)),
        "Delete": _Spec(("optchar",)),
        "MoveCursor": _Spec(),
        "HistoryNavigation": _Spec(),
        "CreateUndoPoint": _Spec(),
        "UndoRedo": _Spec(),
    }

    def create_undo_point_after(self, previous: UndoBehavior) -> bool:
        """True if this change starts a new undo set after ``previous``."""
        if self.name == "MoveCursor":
            return False
        if previous.name != self.name:
            return True
        if self.name == "HistoryNavigation":
            return False
        if self.name == "InsertCharacter":
            prev_char, new_char = previous.args[0], self.args[0]
            return prev_char in "\n\r" or (
                not _is_whitespace(prev_char) and _is_whitespace(new_char)
            )
        if self.name in ("Backspace", "Delete"):
            prev_char, new_char = previous.args[0], self.args[0]
            if prev_char is None or new_char is None:
                return False
            return new_char in "\n\r" or (
                _is_whitespace(prev_char) and not _is_whitespace(new_char)
            )
        return True


_REEDLINE_EVENT_TABLE: tuple[tuple[str, tuple[str, ...], str | None], ...] = (
    ("None", (), None),
    ("HistoryHintComplete", (), None),
    ("HistoryHintWordComplete", (), None),
    ("CtrlD", (), None),
    ("CtrlC", (), None),
    ("ClearScreen", (), None),
    ("ClearScrollback", (), None),
    ("Enter", (), None),
    ("Submit", (), None),
    ("SubmitOrNewline", (), None),
    ("Esc", (), None),
    ("Mouse", (), None),
    ("Resize", ("u16", "u16"), "Resize <int> <int>"),
    ("Edit", ("commands",), "Edit: <EditCommand> or Edit: <EditCommand> value: <string>"),
    ("Repaint", (), None),
    ("PreviousHistory", (), None),
    ("Up", (), None),
    ("Down", (), None),
    ("Right", (), None),
    ("Left", (), None),
    ("NextHistory", (), None),
    ("SearchHistory", (), None),
    ("Multiple", ("events",), "Multiple[ { ReedLineEvents, } ]"),
    ("UntilFound", ("events",), "UntilFound [ { ReedLineEvents, } ]"),
    ("Menu", ("str",), "Menu Name: <string>"),
    ("MenuNext", (), None),
    ("MenuPrevious", (), None),
    ("MenuUp", (), None),
    ("MenuDown", (), None),
    ("MenuLeft", (), None),
    ("MenuRight", (), None),
    ("MenuPageNext", (), None),
    ("MenuPagePrevious", (), None),
    ("ExecuteHostCommand", ("str",), "ExecuteHostCommand"),
    ("OpenEditor", (), None),
)

_REEDLINE_EVENT_SPECS = {
    name: _Spec(params, label) for name, params, label in _REEDLINE_EVENT_TABLE
}

REEDLINE_EVENT_NAMES: tuple[str, ...] = tuple(_REEDLINE_EVENT_SPECS)


class ReedlineEvent(_Variant):
    """An action of the line editor that a key binding produces."""

    _SPECS = _REEDLINE_EVENT_SPECS


for _cls in (Signal, EditCommand, UndoBehavior, ReedlineEvent):
    _install_variants(_cls)
del _cls


def _commands(items: Iterable[EditCommand]) -> tuple[EditCommand, ...]:
    return tuple(items)