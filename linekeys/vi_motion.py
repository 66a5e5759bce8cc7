"""Vi motions: parsing them from typed keys and turning them into editor actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Iterable, Protocol, TypeVar

from linekeys.enums import EditCommand, ReedlineEvent

T = TypeVar("T")


class ViState(Protocol):
    """The part of the Vi edit mode that motions and commands read and update."""

    previous: ReedlineEvent | None
    last_char_search: ViCharSearch | None


class CharStream:
    """An iterator over characters that can look one character ahead."""

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars = iter(chars)
        self._lookahead: list[str] = []

    def peek(self) -> str | None:
        """The next character without consuming it, or None at the end."""
        if not self._lookahead:
            try:
                self._lookahead.append(next(self._chars))
            except StopIteration:
                return None
        return self._lookahead[0]

    def next(self) -> str | None:
        """Consume and return the next character, or None at the end."""
        if self._lookahead:
            return self._lookahead.pop()
        return next(self._chars, None)


class ParseStatus(enum.Enum):
    VALID = "valid"
    INCOMPLETE = "incomplete"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing part of a Vi key sequence."""

    status: ParseStatus
    value: T | None = None

    INCOMPLETE: ClassVar[ParseResult[Any]]
    INVALID: ClassVar[ParseResult[Any]]

    def __post_init__(self) -> None:
        if (self.status is ParseStatus.VALID) != (self.value is not None):
            raise ValueError("only a valid result carries a value")

    @classmethod
    def valid(cls, value: T) -> ParseResult[T]:
        return cls(ParseStatus.VALID, value)

    def is_invalid(self) -> bool:
        return self.status is ParseStatus.INVALID


ParseResult.INCOMPLETE = ParseResult(ParseStatus.INCOMPLETE)
ParseResult.INVALID = ParseResult(ParseStatus.INVALID)


class OptionKind(enum.Enum):
    EVENT = "event"
    EDIT = "edit"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class ReedlineOption:
    """One step produced by a Vi sequence: an event, an edit, or a gap to fill."""

    kind: OptionKind
    payload: ReedlineEvent | EditCommand | None = None

    INCOMPLETE: ClassVar[ReedlineOption]

    def __post_init__(self) -> None:
        expected = {
            OptionKind.EVENT: ReedlineEvent,
            OptionKind.EDIT: EditCommand,
            OptionKind.INCOMPLETE: type(None),
        }[self.kind]
        if not isinstance(self.payload, expected):
            raise TypeError(f"{self.kind.name} option cannot carry {self.payload!r}")

    @classmethod
    def event(cls, event: ReedlineEvent) -> ReedlineOption:
        return cls(OptionKind.EVENT, event)

    @classmethod
    def edit(cls, command: EditCommand) -> ReedlineOption:
        return cls(OptionKind.EDIT, command)

    def into_reedline_event(self) -> ReedlineEvent | None:
        """The editor event for this step; None when it is incomplete."""
        if self.kind is OptionKind.EVENT:
            return self.payload
        if self.kind is OptionKind.EDIT:
            return ReedlineEvent.edit([self.payload])
        return None


ReedlineOption.INCOMPLETE = ReedlineOption(OptionKind.INCOMPLETE)


class SearchKind(enum.Enum):
    TO_RIGHT = "f"
    TO_LEFT = "F"
    TILL_RIGHT = "t"
    TILL_LEFT = "T"


_REVERSED_SEARCH = {
    SearchKind.TO_RIGHT: SearchKind.TO_LEFT,
    SearchKind.TO_LEFT: SearchKind.TO_RIGHT,
    SearchKind.TILL_RIGHT: SearchKind.TILL_LEFT,
    SearchKind.TILL_LEFT: SearchKind.TILL_RIGHT,
}

_MOVE_FOR_SEARCH = {
    SearchKind.TO_RIGHT: EditCommand.move_right_until,
    SearchKind.TO_LEFT: EditCommand.move_left_until,
    SearchKind.TILL_RIGHT: EditCommand.move_right_before,
    SearchKind.TILL_LEFT: EditCommand.move_left_before,
}

_CUT_FOR_SEARCH = {
    SearchKind.TO_RIGHT: EditCommand.cut_right_until,
    SearchKind.TO_LEFT: EditCommand.cut_left_until,
    SearchKind.TILL_RIGHT: EditCommand.cut_right_before,
    SearchKind.TILL_LEFT: EditCommand.cut_left_before,
}


def _check_char(char: Any) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected exactly one character, got {char!r}")


@dataclass(frozen=True)
class ViCharSearch:
    """A left or right motion to (f/F) or till (t/T) a character."""

    kind: SearchKind
    char: str

    def __post_init__(self) -> None:
        _check_char(self.char)

    def reverse(self) -> ViCharSearch:
        """The same search in the other direction, as ',' uses it."""
        return ViCharSearch(_REVERSED_SEARCH[self.kind], self.char)

    def to_move(self) -> EditCommand:
        """The edit command that moves the cursor by this search."""
        return _MOVE_FOR_SEARCH[self.kind](self.char)

    def to_cut(self) -> EditCommand:
        """The edit command that cuts the text this search spans."""
        return _CUT_FOR_SEARCH[self.kind](self.char)


class MotionKind(enum.Enum):
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    NEXT_WORD = "NextWord"
    NEXT_BIG_WORD = "NextBigWord"
    NEXT_WORD_END = "NextWordEnd"
    NEXT_BIG_WORD_END = "NextBigWordEnd"
    PREVIOUS_WORD = "PreviousWord"
    PREVIOUS_BIG_WORD = "PreviousBigWord"
    LINE = "Line"
    START = "Start"
    END = "End"
    RIGHT_UNTIL = "RightUntil"
    RIGHT_BEFORE = "RightBefore"
    LEFT_UNTIL = "LeftUntil"
    LEFT_BEFORE = "LeftBefore"
    REPLAY_CHAR_SEARCH = "ReplayCharSearch"
    REVERSE_CHAR_SEARCH = "ReverseCharSearch"


SEARCH_FOR_MOTION = {
    MotionKind.RIGHT_UNTIL: SearchKind.TO_RIGHT,
    MotionKind.RIGHT_BEFORE: SearchKind.TILL_RIGHT,
    MotionKind.LEFT_UNTIL: SearchKind.TO_LEFT,
    MotionKind.LEFT_BEFORE: SearchKind.TILL_LEFT,
}


@dataclass(frozen=True)
class Motion:
    """A Vi cursor motion; the character searches carry their target."""

    kind: MotionKind
    char: str | None = None

    LEFT: ClassVar[Motion]
    RIGHT: ClassVar[Motion]
    UP: ClassVar[Motion]
    DOWN: ClassVar[Motion]
    NEXT_WORD: ClassVar[Motion]
    NEXT_BIG_WORD: ClassVar[Motion]
    NEXT_WORD_END: ClassVar[Motion]
    NEXT_BIG_WORD_END: ClassVar[Motion]
    PREVIOUS_WORD: ClassVar[Motion]
    PREVIOUS_BIG_WORD: ClassVar[Motion]
    LINE: ClassVar[Motion]
    START: ClassVar[Motion]
    END: ClassVar[Motion]
    REPLAY_CHAR_SEARCH: ClassVar[Motion]
    REVERSE_CHAR_SEARCH: ClassVar[Motion]

    def __post_init__(self) -> None:
        if self.kind in SEARCH_FOR_MOTION:
            _check_char(self.char)
        elif self.char is not None:
            raise ValueError(f"motion {self.kind.value} takes no character")

    @classmethod
    def right_until(cls, char: str) -> Motion:
        return cls(MotionKind.RIGHT_UNTIL, char)

    @classmethod
    def right_before(cls, char: str) -> Motion:
        return cls(MotionKind.RIGHT_BEFORE, char)

    @classmethod
    def left_until(cls, char: str) -> Motion:
        return cls(MotionKind.LEFT_UNTIL, char)

    @classmethod
    def left_before(cls, char: str) -> Motion:
        return cls(MotionKind.LEFT_BEFORE, char)

    def to_reedline(self, vi_state: ViState) -> list[ReedlineOption]:
        """The steps that perform this motion on its own (without a command)."""
        if self.kind in SEARCH_FOR_MOTION:
            search = ViCharSearch(SEARCH_FOR_MOTION[self.kind], self.char)
            vi_state.last_char_search = search
            return [ReedlineOption.edit(search.to_move())]
        if self.kind is MotionKind.REPLAY_CHAR_SEARCH:
            last = vi_state.last_char_search
            return [] if last is None else [ReedlineOption.edit(last.to_move())]
        if self.kind is MotionKind.REVERSE_CHAR_SEARCH:
            last = vi_state.last_char_search
            return [] if last is None else [ReedlineOption.edit(last.reverse().to_move())]
        if self.kind is MotionKind.LINE:
            # Only meaningful after a command such as "dd".
            return []
        if self.kind in _EVENT_FOR_MOTION:
            return [ReedlineOption.event(_EVENT_FOR_MOTION[self.kind])]
        return [ReedlineOption.edit(_EDIT_FOR_MOTION[self.kind])]


for _kind in MotionKind:
    if _kind not in SEARCH_FOR_MOTION:
        setattr(Motion, _kind.name, Motion(_kind))
del _kind

_EVENT_FOR_MOTION = {
    MotionKind.LEFT: ReedlineEvent.until_found([ReedlineEvent.MENU_LEFT, ReedlineEvent.LEFT]),
    MotionKind.RIGHT: ReedlineEvent.until_found(
        [ReedlineEvent.HISTORY_HINT_COMPLETE, ReedlineEvent.MENU_RIGHT, ReedlineEvent.RIGHT]
    ),
    MotionKind.UP: ReedlineEvent.until_found([ReedlineEvent.MENU_UP, ReedlineEvent.UP]),
    MotionKind.DOWN: ReedlineEvent.until_found([ReedlineEvent.MENU_DOWN, ReedlineEvent.DOWN]),
}

_EDIT_FOR_MOTION = {
    MotionKind.NEXT_WORD: EditCommand.MOVE_WORD_RIGHT_START,
    MotionKind.NEXT_BIG_WORD: EditCommand.MOVE_BIG_WORD_RIGHT_START,
    MotionKind.NEXT_WORD_END: EditCommand.MOVE_WORD_RIGHT_END,
    MotionKind.NEXT_BIG_WORD_END: EditCommand.MOVE_BIG_WORD_RIGHT_END,
    MotionKind.PREVIOUS_WORD: EditCommand.MOVE_WORD_LEFT,
    MotionKind.PREVIOUS_BIG_WORD: EditCommand.MOVE_BIG_WORD_LEFT,
    MotionKind.START: EditCommand.MOVE_TO_LINE_START,
    MotionKind.END: EditCommand.MOVE_TO_LINE_END,
}

_MOTION_KEYS = {
    "h": Motion.LEFT,
    "l": Motion.RIGHT,
    "j": Motion.DOWN,
    "k": Motion.UP,
    "b": Motion.PREVIOUS_WORD,
    "B": Motion.PREVIOUS_BIG_WORD,
    "w": Motion.NEXT_WORD,
    "W": Motion.NEXT_BIG_WORD,
    "e": Motion.NEXT_WORD_END,
    "E": Motion.NEXT_BIG_WORD_END,
    "0": Motion.START,
    "^": Motion.START,
    "$": Motion.END,
    ";": Motion.REPLAY_CHAR_SEARCH,
    ",": Motion.REVERSE_CHAR_SEARCH,
}

_SEARCH_KEYS = {
    "f": MotionKind.RIGHT_UNTIL,
    "t": MotionKind.RIGHT_BEFORE,
    "F": MotionKind.LEFT_UNTIL,
    "T": MotionKind.LEFT_BEFORE,
}


def parse_motion(stream: CharStream, command_char: str | None = None) -> ParseResult[Motion]:
    """Parse a motion; repeating ``command_char`` (as in "dd") means the whole line."""
    head = stream.peek()
    if head is None:
        return ParseResult.INCOMPLETE
    if head in _MOTION_KEYS:
        stream.next()
        return ParseResult.valid(_MOTION_KEYS[head])
    if head in _SEARCH_KEYS:
        stream.next()
        target = stream.next()
        if target is None:
            return ParseResult.INCOMPLETE
        return ParseResult.valid(Motion(_SEARCH_KEYS[head], target))
    if command_char is not None and head == command_char:
        stream.next()
        return ParseResult.valid(Motion.LINE)
    return ParseResult.INVALID