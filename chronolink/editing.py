"""The text being edited, split at the cursor."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple

TAB_WIDTH = 8
WORD_STOPS = " .!?"


class Position(NamedTuple):
    """A zero-based column and row on the terminal."""

    x: int
    y: int


def cursor_position(length: int, width: int) -> Position:
    """Where the cursor sits after ``length`` characters on a terminal ``width`` wide."""
    if width <= 0:
        raise ValueError(f"terminal width must be positive, got {width}")
    y, x = divmod(length, width)
    return Position(x, y)


class TextBuffer:
    """Text split into what lies before the cursor and what lies after it."""

    def __init__(self, text: str = "") -> None:
        self.left: deque[str] = deque(text)
        self.right: deque[str] = deque()

    def text(self) -> str:
        """The whole text, before and after the cursor."""
        return "".join(self.left) + "".join(self.right)

    def insert(self, ch: str) -> str:
        """Insert ``ch`` before the cursor and return what should be echoed.

        A tab is stored and echoed as eight spaces.
        """
        if ch == "\t":
            self.left.extend(" " * TAB_WIDTH)
            return " " * TAB_WIDTH
        self.left.append(ch)
        return ch

    def backspace(self) -> bool:
        """Delete the character before the cursor; False if there was none."""
        if not self.left:
            return False
        self.left.pop()
        return True

    def erase_word(self) -> int:
        """Delete back to the previous space or sentence mark; return how many characters went."""
        before = len(self.left)
        while self.left and self.left[-1] in WORD_STOPS:
            self.left.pop()
        while self.left and self.left[-1] not in WORD_STOPS:
            self.left.pop()
        return before - len(self.left)

    def move_left(self) -> bool:
        """Move the cursor one character left; False at the start of the text."""
        if not self.left:
            return False
        self.right.appendleft(self.left.pop())
        return True

    def move_right(self) -> bool:
        """Move the cursor one character right; False at the end of the text."""
        if not self.right:
            return False
        self.left.append(self.right.popleft())
        return True

    def move_to(self, pos: tuple[int, int], width: int) -> None:
        """Move the cursor to screen position ``pos``, stopping at either end of the text."""
        x, y = pos
        wanted = width * y + x
        while len(self.left) < wanted and self.right:
            self.left.append(self.right.popleft())
        while len(self.left) > wanted and self.left:
            self.right.appendleft(self.left.pop())

    def cursor(self, width: int) -> Position:
        """Screen position of the cursor on a terminal ``width`` wide."""
        return cursor_position(len(self.left), width)