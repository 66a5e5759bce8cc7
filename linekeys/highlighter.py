"""Syntax highlighters that split a line into styled segments."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass

DEFAULT_BUFFER_MATCH_COLOR = "green"
DEFAULT_BUFFER_NEUTRAL_COLOR = "white"
DEFAULT_BUFFER_NOTMATCH_COLOR = "red"

_COLOR_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "purple": 35,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "dark_gray": 90,
    "light_red": 91,
    "light_green": 92,
    "light_yellow": 93,
    "light_blue": 94,
    "light_purple": 95,
    "light_magenta": 95,
    "light_cyan": 96,
    "light_gray": 97,
}


@dataclass(frozen=True)
class Style:
    """Text style: an optional foreground colour name plus bold and italic."""

    foreground: str | None = None
    bold: bool = False
    italic: bool = False

    def __post_init__(self) -> None:
        if self.foreground is not None and self.foreground not in _COLOR_CODES:
            raise ValueError(f"unknown colour {self.foreground!r}")

    def fg(self, color: str) -> Style:
        return dataclasses.replace(self, foreground=color)

    def with_bold(self) -> Style:
        return dataclasses.replace(self, bold=True)

    def with_italic(self) -> Style:
        return dataclasses.replace(self, italic=True)

    def paint(self, text: str) -> str:
        """``text`` wrapped in the ANSI codes for this style."""
        codes = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.foreground is not None:
            codes.append(str(_COLOR_CODES[self.foreground]))
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


StyledText = list[tuple[Style, str]]


class Highlighter(ABC):
    """Turns the current line into styled segments that join back to the line."""

    @abstractmethod
    def highlight(self, line: str, cursor: int) -> StyledText:
        """Style ``line``; ``cursor`` is the insertion point."""


class ExampleHighlighter(Highlighter):
    """Highlights the longest known command found in the line."""

    def __init__(self, external_commands: list[str] | None = None) -> None:
        self.external_commands = list(external_commands or [])
        self.match_color = DEFAULT_BUFFER_MATCH_COLOR
        self.notmatch_color = DEFAULT_BUFFER_NOTMATCH_COLOR
        self.neutral_color = DEFAULT_BUFFER_NEUTRAL_COLOR

    def highlight(self, line: str, cursor: int) -> StyledText:
        matches = [command for command in self.external_commands if command in line]
        if matches:
            longest = ""
            for item in matches:
                if len(item.encode("utf-8")) > len(longest.encode("utf-8")):
                    longest = item
            if longest:
                before, after = line.split(longest, 1)
            else:
                before, after = "", line
            return [
                (Style(self.neutral_color), before),
                (Style(self.match_color), longest),
                (Style(self.neutral_color, bold=True), after),
            ]
        if not self.external_commands:
            return [(Style(self.neutral_color), line)]
        return [(Style(self.notmatch_color), line)]

    def change_colors(self, match_color: str, notmatch_color: str, neutral_color: str) -> None:
        """Use other colours for matches, non-matching lines and neutral text."""
        for color in (match_color, notmatch_color, neutral_color):
            Style(color)
        self.match_color = match_color
        self.notmatch_color = notmatch_color
        self.neutral_color = neutral_color


@dataclass(frozen=True)
class SimpleMatchHighlighter(Highlighter):
    """Styles every exact, non-overlapping occurrence of ``query``."""

    query: str = ""
    neutral_style: Style = Style()
    match_style: Style = Style("green")

    def highlight(self, line: str, cursor: int) -> StyledText:
        if not self.query:
            return [(self.neutral_style, line)]
        segments: StyledText = []
        next_idx = 0
        idx = line.find(self.query)
        while idx != -1:
            if idx != next_idx:
                segments.append((self.neutral_style, line[next_idx:idx]))
            segments.append((self.match_style, self.query))
            next_idx = idx + len(self.query)
            idx = line.find(self.query, next_idx)
        if next_idx != len(line):
            segments.append((self.neutral_style, line[next_idx:]))
        return segments

    def with_query(self, query: str) -> SimpleMatchHighlighter:
        return dataclasses.replace(self, query=query)

    def with_match_style(self, match_style: Style) -> SimpleMatchHighlighter:
        return dataclasses.replace(self, match_style=match_style)

    def with_neutral_style(self, neutral_style: Style) -> SimpleMatchHighlighter:
        return dataclasses.replace(self, neutral_style=neutral_style)