"""Terminal text styling, display width and fixed-width cells."""

from __future__ import annotations

import re
from dataclasses import dataclass

from wcwidth import wcwidth

from llmquota.colors import (
    MOCHA_BASE,
    MOCHA_BLUE,
    MOCHA_SUBTEXT0,
    MOCHA_TEXT,
    MOCHA_YELLOW,
)

DEFAULT_WIDTH = 50
SHELL_HORIZONTAL_PADDING = 4
SHELL_PADDING_X = SHELL_HORIZONTAL_PADDING // 2
WIDE_THRESHOLD = 68  # inner width at/above which the wide tier renders

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_RESET = "\x1b[0m"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences."""
    return _ANSI_RE.sub("", text)


def _line_width(line: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in line)


def display_width(text: str) -> int:
    """Display columns of the widest line, ignoring escape sequences."""
    return max((_line_width(line) for line in strip_ansi(text).split("\n")), default=0)


def _pad_right(line: str, width: int) -> str:
    missing = width - display_width(line)
    return line + " " * missing if missing > 0 else line


def _rgb_params(hex_value: str) -> str:
    return ";".join(str(int(hex_value[i : i + 2], 16)) for i in (1, 3, 5))


@dataclass(frozen=True)
class Style:
    """Foreground/background colour, bold, padding and minimum width."""

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    padding: tuple[int, int] = (0, 0)  # (vertical, horizontal)
    width: int = 0

    def _sgr(self) -> str:
        params = []
        if self.bold:
            params.append("1")
        if self.foreground:
            params.append("38;2;" + _rgb_params(self.foreground))
        if self.background:
            params.append("48;2;" + _rgb_params(self.background))
        return ";".join(params)

    def render(self, text: str) -> str:
        """Apply the style; every line comes out as wide as the widest."""
        vertical, horizontal = self.padding
        lines = text.split("\n")
        if self.width > 0:
            content_width = max(self.width - 2 * horizontal, 0)
            lines = [_pad_right(line, content_width) for line in lines]
        if horizontal > 0:
            pad = " " * horizontal
            lines = [pad + line + pad for line in lines]
        if vertical > 0:
            blank = [""] * vertical
            lines = blank + lines + blank
        widest = max(display_width(line) for line in lines)
        lines = [_pad_right(line, widest) for line in lines]
        sgr = self._sgr()
        if sgr:
            lines = [f"\x1b[{sgr}m{line}{_RESET}" if line else line for line in lines]
        return "\n".join(lines)


def format_cell(value: str, width: int, align_right: bool) -> str:
    """Truncate or pad ``value`` to exactly ``width`` display columns."""
    if width <= 0:
        return ""
    while value and display_width(value) > width:
        value = value[:-1]
    padding = width - display_width(value)
    if padding <= 0:
        return value
    if align_right:
        return " " * padding + value
    return value + " " * padding


SHELL_STYLE = Style(
    background=MOCHA_BASE, foreground=MOCHA_TEXT, padding=(1, SHELL_PADDING_X)
)
TITLE_STYLE = Style(foreground=MOCHA_BLUE, bold=True)
LABEL_STYLE = Style(foreground=MOCHA_TEXT, bold=True)
MISSING_STYLE = Style(foreground=MOCHA_YELLOW)
HINT_STYLE = Style(foreground=MOCHA_SUBTEXT0)
FOOTER_STYLE = Style(foreground=MOCHA_SUBTEXT0)