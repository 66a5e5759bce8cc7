"""The interface every edit mode implements, and per-mode cursor shapes."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass

from linekeys.enums import ReedlineEvent
from linekeys.keys import ReedlineRawEvent


class PromptEditMode(enum.Enum):
    """The editing mode shown by the prompt indicator."""

    EMACS = "emacs"
    VI_NORMAL = "vi_normal"
    VI_INSERT = "vi_insert"


class CursorStyle(enum.Enum):
    """Terminal cursor shapes; the value is the escape sequence that selects it."""

    DEFAULT_USER_SHAPE = "\x1b[0 q"
    BLINKING_BLOCK = "\x1b[1 q"
    STEADY_BLOCK = "\x1b[2 q"
    BLINKING_UNDERSCORE = "\x1b[3 q"
    STEADY_UNDERSCORE = "\x1b[4 q"
    BLINKING_BAR = "\x1b[5 q"
    STEADY_BAR = "\x1b[6 q"

    @property
    def escape(self) -> str:
        return self.value


@dataclass
class CursorConfig:
    """Cursor shape for each edit mode; None leaves the cursor unchanged."""

    vi_insert: CursorStyle | None = None
    vi_normal: CursorStyle | None = None
    emacs: CursorStyle | None = None

    def style_for(self, mode: PromptEditMode) -> CursorStyle | None:
        """The cursor shape configured for ``mode``."""
        if mode is PromptEditMode.EMACS:
            return self.emacs
        if mode is PromptEditMode.VI_NORMAL:
            return self.vi_normal
        if mode is PromptEditMode.VI_INSERT:
            return self.vi_insert
        raise ValueError(f"unknown edit mode: {mode!r}")


class EditMode(ABC):
    """Turns terminal input into editor events, in the style of some editor."""

    @abstractmethod
    def parse_event(self, event: ReedlineRawEvent) -> ReedlineEvent:
        """Translate a terminal event into an editor event."""

    @abstractmethod
    def edit_mode(self) -> PromptEditMode:
        """The mode to show in the prompt indicator."""