"""Reading single keypresses from a terminal."""

from __future__ import annotations

import codecs
import contextlib
import os
import select
import sys
from dataclasses import dataclass
from enum import Enum
from typing import IO, Iterator

try:
    import termios
    import tty
except ImportError:  # platforms without POSIX terminals
    termios = None
    tty = None

ESC = "\x1b"
_ESC_TIMEOUT = 0.05


class SpecialKey(Enum):
    """Keys that the editor and the menus react to."""

    NONE = 0
    BACKSPACE = 1
    ENTER = 2
    LEFT = 3
    RIGHT = 4
    UP = 5
    DOWN = 6
    DEL = 7
    ESC = 8


@dataclass(frozen=True)
class KeyPress:
    """One key pressed, with its modifiers.

    ``char`` is empty for keys that produce no character. ``is_special`` is set
    for anything that is not a plain character to be typed.
    """

    char: str = ""
    special: SpecialKey = SpecialKey.NONE
    ctrl: bool = False
    alt: bool = False
    is_special: bool = False


_FINAL_KEYS = {
    "A": SpecialKey.UP,
    "B": SpecialKey.DOWN,
    "C": SpecialKey.RIGHT,
    "D": SpecialKey.LEFT,
}
_TILDE_KEYS = {"3": SpecialKey.DEL}


def _parse_char(ch: str) -> KeyPress:
    if ch == ESC:
        return KeyPress(char=ESC, special=SpecialKey.ESC, is_special=True)
    if ch in ("\r", "\n"):
        return KeyPress(special=SpecialKey.ENTER, is_special=True)
    if ch == "\x7f":
        return KeyPress(special=SpecialKey.BACKSPACE, is_special=True)
    if ch == "\x08":
        return KeyPress(special=SpecialKey.BACKSPACE, ctrl=True, is_special=True)
    if ch == "\x00":
        return KeyPress(is_special=True)
    if ch == "\t":
        return KeyPress(char=ch)
    if ord(ch) < 0x20:
        return KeyPress(char=ch, ctrl=True, is_special=True)
    return KeyPress(char=ch)


def _modifier_bits(field: str) -> int:
    if not field.isdigit():
        return 0
    return max(int(field) - 1, 0)


def _parse_escape(body: str) -> KeyPress:
    introducer = body[0]
    if introducer in "[O" and len(body) >= 2:
        params, final = body[1:-1], body[-1]
        fields = params.split(";") if params else []
        modifiers = _modifier_bits(fields[1] if len(fields) > 1 else "")
        if introducer == "O" and len(body) == 2 and final in _FINAL_KEYS:
            special = _FINAL_KEYS[final]
        elif final in _FINAL_KEYS:
            special = _FINAL_KEYS[final]
        elif final == "~" and fields:
            special = _TILDE_KEYS.get(fields[0], SpecialKey.NONE)
        else:
            special = SpecialKey.NONE
        return KeyPress(
            special=special,
            ctrl=bool(modifiers & 4),
            alt=bool(modifiers & 2),
            is_special=True,
        )
    if len(body) == 1:
        inner = _parse_char(body)
        return KeyPress(
            char=inner.char,
            special=inner.special,
            ctrl=inner.ctrl,
            alt=True,
            is_special=True,
        )
    raise ValueError(f"unrecognised escape sequence: {ESC + body!r}")


def parse_key(data: str) -> KeyPress:
    """Turn the characters a terminal sends for one key into a KeyPress."""
    if not data:
        raise ValueError("empty key sequence")
    if data.startswith(ESC) and len(data) > 1:
        return _parse_escape(data[1:])
    if len(data) != 1:
        raise ValueError(f"not a single key: {data!r}")
    return _parse_char(data)


class Keyboard:
    """Reads keypresses one at a time from a text stream or terminal."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = sys.stdin if stream is None else stream
        self._pending: list[str] = []
        self._decoder = codecs.getincrementaldecoder("utf-8")("replace")

    def _terminal_fd(self) -> int | None:
        if termios is None:
            return None
        try:
            fd = self.stream.fileno()
        except (AttributeError, OSError, ValueError):
            return None
        return fd if os.isatty(fd) else None

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator["Keyboard"]:
        """Turn off line buffering and echo for the duration of the block."""
        fd = self._terminal_fd()
        if fd is None:
            yield self
            return
        saved = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            yield self
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    def _read_char(self, timeout: float | None = None) -> str:
        if self._pending:
            return self._pending.pop()
        fd = self._terminal_fd()
        if fd is None:
            return self.stream.read(1)
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return ""
        while True:
            byte = os.read(fd, 1)
            if not byte:
                return ""
            text = self._decoder.decode(byte)
            if text:
                return text

    def _read_sequence_tail(self, introducer: str) -> str:
        if introducer == "O":
            return self._read_char(_ESC_TIMEOUT)
        tail = ""
        while True:
            ch = self._read_char(_ESC_TIMEOUT)
            if not ch:
                return tail
            tail += ch
            if "\x40" <= ch <= "\x7e":
                return tail

    def get_keypress(self) -> KeyPress:
        """Block until a key is pressed and return it; EOFError when input ends."""
        ch = self._read_char()
        if not ch:
            raise EOFError("input stream closed")
        if ch != ESC:
            return parse_key(ch)

        following = self._read_char(_ESC_TIMEOUT)
        if not following:
            return parse_key(ESC)
        if following in ("[", "O"):
            return parse_key(ESC + following + self._read_sequence_tail(following))
        if self._terminal_fd() is None:
            self._pending.append(following)
            return parse_key(ESC)
        return parse_key(ESC + following)