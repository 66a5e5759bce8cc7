"""Vi commands: parsing them from typed keys and turning them into editor actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar

from linekeys.enums import EditCommand, ReedlineEvent
from linekeys.vi_motion import (
    SEARCH_FOR_MOTION,
    CharStream,
    Motion,
    MotionKind,
    ReedlineOption,
    ViCharSearch,
    ViState,
)


class CommandKind(enum.Enum):
    INCOMPLETE = "Incomplete"
    DELETE = "Delete"
    DELETE_CHAR = "DeleteChar"
    REPLACE_CHAR = "ReplaceChar"
    SUBSTITUTE_CHAR_WITH_INSERT = "SubstituteCharWithInsert"
    PASTE_AFTER = "PasteAfter"
    PASTE_BEFORE = "PasteBefore"
    ENTER_VI_APPEND = "EnterViAppend"
    ENTER_VI_INSERT = "EnterViInsert"
    UNDO = "Undo"
    CHANGE_TO_LINE_END = "ChangeToLineEnd"
    DELETE_TO_END = "DeleteToEnd"
    APPEND_TO_END = "AppendToEnd"
    PREPEND_TO_START = "PrependToStart"
    REWRITE_CURRENT_LINE = "RewriteCurrentLine"
    CHANGE = "Change"
    HISTORY_SEARCH = "HistorySearch"
    SWITCHCASE = "Switchcase"
    REPEAT_LAST_ACTION = "RepeatLastAction"


@dataclass(frozen=True)
class Command:
    """A Vi normal-mode command; ``REPLACE_CHAR`` carries its replacement."""

    kind: CommandKind
    char: str | None = None

    INCOMPLETE: ClassVar[Command]
    DELETE: ClassVar[Command]
    DELETE_CHAR: ClassVar[Command]
    SUBSTITUTE_CHAR_WITH_INSERT: ClassVar[Command]
    PASTE_AFTER: ClassVar[Command]
    PASTE_BEFORE: ClassVar[Command]
    ENTER_VI_APPEND: ClassVar[Command]
    ENTER_VI_INSERT: ClassVar[Command]
    UNDO: ClassVar[Command]
    CHANGE_TO_LINE_END: ClassVar[Command]
    DELETE_TO_END: ClassVar[Command]
    APPEND_TO_END: ClassVar[Command]
    PREPEND_TO_START: ClassVar[Command]
    REWRITE_CURRENT_LINE: ClassVar[Command]
    CHANGE: ClassVar[Command]
    HISTORY_SEARCH: ClassVar[Command]
    SWITCHCASE: ClassVar[Command]
    REPEAT_LAST_ACTION: ClassVar[Command]

    def __post_init__(self) -> None:
        if self.kind is CommandKind.REPLACE_CHAR:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError(f"expected exactly one character, got {self.char!r}")
        elif self.char is not None:
            raise ValueError(f"command {self.kind.value} takes no character")

    @classmethod
    def replace_char(cls, char: str) -> Command:
        return cls(CommandKind.REPLACE_CHAR, char)

    def whole_line_char(self) -> str | None:
        """The key that, typed again, applies this command to the whole line."""
        return _WHOLE_LINE_CHARS.get(self.kind)

    def requires_motion(self) -> bool:
        return self.kind in (CommandKind.DELETE, CommandKind.CHANGE)

    def to_reedline(self, vi_state: ViState) -> list[ReedlineOption]:
        """The steps for this command when no motion follows it."""
        if self.kind in _EDIT_FOR_COMMAND:
            return [ReedlineOption.edit(_EDIT_FOR_COMMAND[self.kind])]
        if self.kind in _EVENT_FOR_COMMAND:
            return [ReedlineOption.event(_EVENT_FOR_COMMAND[self.kind])]
        if self.kind is CommandKind.REPLACE_CHAR:
            return [ReedlineOption.edit(EditCommand.replace_char(self.char))]
        if self.kind is CommandKind.REPEAT_LAST_ACTION:
            previous = vi_state.previous
            return [] if previous is None else [ReedlineOption.event(previous)]
        # Delete, Change and Incomplete need a motion to finish.
        return [ReedlineOption.INCOMPLETE]

    def to_reedline_with_motion(
        self, motion: Motion, vi_state: ViState
    ) -> list[ReedlineOption] | None:
        """The steps for this command applied over ``motion``, or None if they do not combine."""
        if self.kind is CommandKind.DELETE:
            return self._cut_over(motion, vi_state)
        if self.kind is CommandKind.CHANGE:
            options = self._cut_over(motion, vi_state)
            if options is None:
                return None
            # Repaint so that the switch to insert mode shows.
            return options + [ReedlineOption.event(ReedlineEvent.REPAINT)]
        return None

    def _cut_over(self, motion: Motion, vi_state: ViState) -> list[ReedlineOption] | None:
        change = self.kind is CommandKind.CHANGE
        kind = motion.kind
        if kind is MotionKind.END:
            command = EditCommand.CLEAR_TO_LINE_END if change else EditCommand.CUT_TO_LINE_END
            return [ReedlineOption.edit(command)]
        if kind is MotionKind.LINE:
            if change:
                return [
                    ReedlineOption.edit(EditCommand.MOVE_TO_START),
                    ReedlineOption.edit(EditCommand.CLEAR_TO_LINE_END),
                ]
            return [ReedlineOption.edit(EditCommand.CUT_CURRENT_LINE)]
        if kind in _CUT_FOR_MOTION:
            return [ReedlineOption.edit(_CUT_FOR_MOTION[kind])]
        if kind in SEARCH_FOR_MOTION:
            search = ViCharSearch(SEARCH_FOR_MOTION[kind], motion.char)
            vi_state.last_char_search = search
            return [ReedlineOption.edit(search.to_cut())]
        if kind is MotionKind.REPLAY_CHAR_SEARCH:
            last = vi_state.last_char_search
            return None if last is None else [ReedlineOption.edit(last.to_cut())]
        if kind is MotionKind.REVERSE_CHAR_SEARCH:
            last = vi_state.last_char_search
            return None if last is None else [ReedlineOption.edit(last.reverse().to_cut())]
        # Up and Down do not combine with a cut.
        return None


for _kind in CommandKind:
    if _kind is not CommandKind.REPLACE_CHAR:
        setattr(Command, _kind.name, Command(_kind))
del _kind

_WHOLE_LINE_CHARS = {CommandKind.DELETE: "d", CommandKind.CHANGE: "c"}

_EDIT_FOR_COMMAND = {
    CommandKind.ENTER_VI_APPEND: EditCommand.MOVE_RIGHT,
    CommandKind.PASTE_AFTER: EditCommand.PASTE_CUT_BUFFER_AFTER,
    CommandKind.PASTE_BEFORE: EditCommand.PASTE_CUT_BUFFER_BEFORE,
    CommandKind.UNDO: EditCommand.UNDO,
    CommandKind.CHANGE_TO_LINE_END: EditCommand.CLEAR_TO_LINE_END,
    CommandKind.DELETE_TO_END: EditCommand.CUT_TO_LINE_END,
    CommandKind.APPEND_TO_END: EditCommand.MOVE_TO_LINE_END,
    CommandKind.PREPEND_TO_START: EditCommand.MOVE_TO_LINE_START,
    CommandKind.REWRITE_CURRENT_LINE: EditCommand.CUT_CURRENT_LINE,
    CommandKind.DELETE_CHAR: EditCommand.CUT_CHAR,
    CommandKind.SUBSTITUTE_CHAR_WITH_INSERT: EditCommand.CUT_CHAR,
    CommandKind.SWITCHCASE: EditCommand.SWITCHCASE_CHAR,
}

_EVENT_FOR_COMMAND = {
    CommandKind.ENTER_VI_INSERT: ReedlineEvent.REPAINT,
    CommandKind.HISTORY_SEARCH: ReedlineEvent.SEARCH_HISTORY,
}

_CUT_FOR_MOTION = {
    MotionKind.NEXT_WORD: EditCommand.CUT_WORD_RIGHT_TO_NEXT,
    MotionKind.NEXT_BIG_WORD: EditCommand.CUT_BIG_WORD_RIGHT_TO_NEXT,
    MotionKind.NEXT_WORD_END: EditCommand.CUT_WORD_RIGHT,
    MotionKind.NEXT_BIG_WORD_END: EditCommand.CUT_BIG_WORD_RIGHT,
    MotionKind.PREVIOUS_WORD: EditCommand.CUT_WORD_LEFT,
    MotionKind.PREVIOUS_BIG_WORD: EditCommand.CUT_BIG_WORD_LEFT,
    MotionKind.START: EditCommand.CUT_FROM_LINE_START,
    MotionKind.LEFT: EditCommand.BACKSPACE,
    MotionKind.RIGHT: EditCommand.DELETE,
}

_COMMAND_KEYS = {
    "d": Command.DELETE,
    "p": Command.PASTE_AFTER,
    "P": Command.PASTE_BEFORE,
    "i": Command.ENTER_VI_INSERT,
    "a": Command.ENTER_VI_APPEND,
    "u": Command.UNDO,
    "c": Command.CHANGE,
    "x": Command.DELETE_CHAR,
    "s": Command.SUBSTITUTE_CHAR_WITH_INSERT,
    "?": Command.HISTORY_SEARCH,
    "C": Command.CHANGE_TO_LINE_END,
    "D": Command.DELETE_TO_END,
    "I": Command.PREPEND_TO_START,
    "A": Command.APPEND_TO_END,
    "S": Command.REWRITE_CURRENT_LINE,
    "~": Command.SWITCHCASE,
    ".": Command.REPEAT_LAST_ACTION,
}


def parse_command(stream: CharStream) -> Command | None:
    """Parse a command at the head of ``stream``; None (nothing consumed) if there is none."""
    head = stream.peek()
    if head == "r":
        stream.next()
        target = stream.next()
        return Command.INCOMPLETE if target is None else Command.replace_char(target)
    command = _COMMAND_KEYS.get(head) if head is not None else None
    if command is not None:
        stream.next()
    return command