"""Terminal output: clearing, cursor placement, redrawing and centred text."""

from __future__ import annotations

import os
import sys
from typing import IO, Iterable

from chronolink.editing import Position, cursor_position

DEFAULT_WIDTH = 80
HIGHLIGHT = 36

_CLEAR = "\033[2J\033[H"
_CLEAR_LINE = "\033[2K\r"
_RESET = "\033[0m"


def change_color(color: int, text: str) -> str:
    """Wrap ``text`` in an ANSI colour code and a reset."""
    return f"\033[{color}m{text}{_RESET}"


def center(text: str, width: int) -> str:
    """Pad ``text`` on the left so that it sits in the middle of ``width`` columns."""
    padding = max((width - len(text)) // 2, 0)
    return " " * padding + text


def _joined(chars: Iterable[str]) -> str:
    return "".join(chars)


class Console:
    """A terminal to draw on, with a fixed width or the width of the real terminal."""

    def __init__(self, stream: IO[str] | None = None, width: int | None = None) -> None:
        self.stream = sys.stdout if stream is None else stream
        self._width = width

    def width(self) -> int:
        """Number of columns; falls back to 80 when the terminal cannot be asked."""
        if self._width is not None:
            return self._width
        try:
            return os.get_terminal_size(self.stream.fileno()).columns
        except (AttributeError, OSError, ValueError):
            return DEFAULT_WIDTH

    def write(self, text: str) -> None:
        """Write ``text`` and flush it straight away."""
        self.stream.write(text)
        self.stream.flush()

    def clear_screen(self) -> None:
        """Erase everything and put the cursor at the top left."""
        self.write(_CLEAR)

    def move_cursor(self, pos: tuple[int, int]) -> None:
        """Place the cursor at the zero-based column and row ``pos``."""
        x, y = pos
        self.write(f"\033[{y + 1};{x + 1}H")

    def _cursor_for(self, left: Iterable[str]) -> Position:
        return cursor_position(len(_joined(left)), self.width())

    def redraw_past_cursor(self, left: Iterable[str], right: Iterable[str]) -> None:
        """Rewrite the text after the cursor, plus one blank, then return the cursor."""
        pos = self._cursor_for(left)
        self.move_cursor(pos)
        self.write(_joined(right) + " ")
        self.move_cursor(pos)

    def redraw_screen(self, left: Iterable[str], right: Iterable[str]) -> None:
        """Clear the screen, print the whole text and put the cursor back."""
        before = _joined(left)
        pos = cursor_position(len(before), self.width())
        self.clear_screen()
        self.write(before + _joined(right))
        self.move_cursor(pos)

    def redraw_line(self, left: Iterable[str]) -> None:
        """Rewrite the row the cursor is on, up to the cursor."""
        before = _joined(left)
        if not before:
            return
        pos = cursor_position(len(before), self.width())
        start = len(before) - pos.x
        self.write(_CLEAR_LINE + before[start:])
        self.move_cursor(pos)

    def center_text(self, text: str) -> None:
        """Print ``text`` centred on the terminal."""
        self.write(center(text, self.width()))

    def print_colored(self, text: str) -> None:
        """Print ``text`` centred and highlighted."""
        self.write(f"\033[{HIGHLIGHT}m")
        self.center_text(text)
        self.write(_RESET)