"""Parsing of complete Vi normal-mode key sequences into editor events."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain, repeat
from typing import Iterable

from linekeys.enums import ReedlineEvent
from linekeys.vi_command import Command, CommandKind, parse_command
from linekeys.vi_motion import (
    CharStream,
    Motion,
    ParseResult,
    ParseStatus,
    ReedlineOption,
    ViState,
    parse_motion,
)

_DIGITS = "0123456789"

_INSERTING_COMMANDS = frozenset(
    {
        CommandKind.ENTER_VI_INSERT,
        CommandKind.ENTER_VI_APPEND,
        CommandKind.CHANGE_TO_LINE_END,
        CommandKind.APPEND_TO_END,
        CommandKind.PREPEND_TO_START,
        CommandKind.REWRITE_CURRENT_LINE,
        CommandKind.SUBSTITUTE_CHAR_WITH_INSERT,
        CommandKind.HISTORY_SEARCH,
    }
)


@dataclass(frozen=True)
class ParsedViSequence:
    """A Vi key sequence: ``[multiplier] [command] [count] [motion]``."""

    multiplier: int | None
    command: Command | None
    count: int | None
    motion: ParseResult[Motion]

    def is_valid(self) -> bool:
        """False once the keys can no longer form a sequence."""
        return not self.motion.is_invalid()

    def is_complete(self) -> bool:
        """True when the sequence can be executed as it stands."""
        status = self.motion.status
        if self.command is None:
            return status is ParseStatus.VALID
        if self.command.kind is CommandKind.INCOMPLETE:
            return False
        if status is ParseStatus.VALID:
            return True
        if status is ParseStatus.INCOMPLETE:
            return not self.command.requires_motion()
        return False

    def _total_multiplier(self) -> int:
        # Vim multiplies a leading count with the count before the motion.
        multiplier = 1 if self.multiplier is None else self.multiplier
        count = 1 if self.count is None else self.count
        return multiplier * count

    def _apply_multiplier(self, raw: list[ReedlineOption] | None) -> ReedlineEvent:
        if raw is None:
            return ReedlineEvent.NONE
        options = chain.from_iterable(repeat(raw, self._total_multiplier()))
        events = [
            event
            for event in (option.into_reedline_event() for option in options)
            if event is not None
        ]
        if not events or ReedlineEvent.NONE in events:
            return ReedlineEvent.NONE
        return ReedlineEvent.multiple(events)

    def enters_insert_mode(self) -> bool:
        """True if executing this sequence switches Vi into insert mode."""
        if self.command is None:
            return False
        status = self.motion.status
        if status is ParseStatus.INCOMPLETE:
            return self.command.kind in _INSERTING_COMMANDS
        if status is ParseStatus.VALID:
            return self.command.kind is CommandKind.CHANGE
        return False

    def to_reedline_event(self, vi_state: ViState) -> ReedlineEvent:
        """The editor event for this sequence; commands are remembered for '.'."""
        status = self.motion.status
        if self.command is not None:
            if self.count is None and status is ParseStatus.INCOMPLETE:
                event = self._apply_multiplier(self.command.to_reedline(vi_state))
            elif status is ParseStatus.VALID:
                event = self._apply_multiplier(
                    self.command.to_reedline_with_motion(self.motion.value, vi_state)
                )
            else:
                return ReedlineEvent.NONE
            if event != ReedlineEvent.NONE:
                vi_state.previous = event
            return event
        if status is ParseStatus.VALID:
            return self._apply_multiplier(self.motion.value.to_reedline(vi_state))
        return ReedlineEvent.NONE


def parse_number(stream: CharStream) -> int | None:
    """Consume a decimal count; a leading '0' is not a count (it is a motion)."""
    head = stream.peek()
    if head is None or head not in _DIGITS or head == "0":
        return None
    count = 0
    while (char := stream.peek()) is not None and char in _DIGITS:
        stream.next()
        count = count * 10 + int(char)
    return count


def parse(chars: Iterable[str] | CharStream) -> ParsedViSequence:
    """Parse typed Vi normal-mode keys into a sequence."""
    stream = chars if isinstance(chars, CharStream) else CharStream(chars)
    multiplier = parse_number(stream)
    command = parse_command(stream)
    count = parse_number(stream)
    motion = parse_motion(stream, command.whole_line_char() if command is not None else None)
    return ParsedViSequence(multiplier, command, count, motion)