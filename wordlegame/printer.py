"""A character-grid screen that draws itself with ANSI escape sequences."""

from __future__ import annotations

import shutil
import sys
from typing import TextIO

_BLANK = " "


def terminal_size() -> tuple[int, int]:
    """The current terminal's (width, height) in characters."""
    size = shutil.get_terminal_size()
    return size.columns, size.lines


class Printer:
    """Writes text into an off-screen grid and redraws only rows that changed."""

    def __init__(
        self,
        width: int,
        height: int,
        output: TextIO | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"width and height must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.x = 0
        self.y = 0
        self.output = output if output is not None else sys.stdout
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.input_buffer = "\0" * (width + 1)
        self.last_input_len = -1
        self.buffer = self._blank_grid()
        self._old = self._blank_grid()
        self._old_unset = True
        self._changed = False

    def _blank_grid(self) -> list[list[str]]:
        return [[_BLANK] * self.width for _ in range(self.height)]

    def _put(self, ch: str) -> None:
        # Characters that fall outside the grid are dropped.
        if 0 <= self.y < self.height and 0 <= self.x < self.width:
            self.buffer[self.y][self.x] = ch

    def _first_difference(self, row: int) -> int | None:
        for index, (old, new) in enumerate(zip(self._old[row], self.buffer[row])):
            if old != new:
                return index
        return None

    def move_cursor(self, y: int, x: int | None = None) -> None:
        """Move to row ``y`` and, if given, column ``x``."""
        self.y = y
        if x is not None:
            self.x = x

    def next_line(self) -> None:
        self.move_cursor(self.y + 1, 0)

    def begin_line(self) -> None:
        self.move_cursor(self.y, 0)

    def prev_line(self) -> None:
        self.move_cursor(self.y - 1, 0)

    def print(self, text: str) -> None:
        """Write ``text`` at the cursor, wrapping at the right edge."""
        for ch in text:
            if self.x >= self.width:
                self.next_line()
            self._put(ch)
            self.x += 1
        if self.x >= self.width:
            self.next_line()
        self._changed = True

    def println(self, text: str) -> None:
        """Write ``text``, blank the rest of the row and move to the next one."""
        self.print(text)
        while self.x < self.width:
            self._put(_BLANK)
            self.x += 1
        self.next_line()

    def clear_line(self, y: int) -> None:
        self.buffer[y] = [_BLANK] * self.width
        self._changed = True

    def clear(self) -> None:
        """Blank the whole grid and force a full screen clear on the next render."""
        self.buffer = self._blank_grid()
        self._changed = True
        self._old_unset = True

    def _read_char(self, consumed: bool) -> str:
        ch = self.input_stream.read(1)
        if ch == "" and not consumed:
            raise EOFError("input ended")
        return ch

    def get_input(self, length: int, read_space: bool = False, do_flush: bool = True) -> str:
        """Read up to ``length`` characters of one line and return them.

        Reading stops at a newline, or at a space unless ``read_space`` is set.
        With ``do_flush`` the rest of an unfinished line is discarded.
        """
        read: list[str] = []
        stopped = False
        consumed = False
        for _ in range(length):
            ch = self._read_char(consumed)
            if ch == "":
                stopped = True
                break
            consumed = True
            if ch == "\n":
                stopped = True
                break
            if not read_space and ch == " ":
                break
            read.append(ch)
        if not stopped and do_flush:
            while True:
                ch = self._read_char(consumed)
                consumed = True
                if ch in ("", "\n"):
                    break
        text = "".join(read)
        self.input_buffer = text + self.input_buffer[len(text):]
        self.last_input_len = len(text)
        return text

    def render(self, insert_endl: bool = True) -> None:
        """Send the rows that differ from the last drawn state to the output."""
        out: list[str] = []
        if self._old_unset:
            out.append("\x1b[2J")
        if not self._changed:
            self._write(out)
            return
        for row, (new, old) in enumerate(zip(self.buffer, self._old)):
            start = self._first_difference(row)
            if start is None:
                continue
            out.append(f"\x1b[{row + 1};{start + 1}H")
            out.append("".join(new[start:]))
            if not self._old_unset:
                old[start:] = new[start:]
        if insert_endl:
            out.append("\x1b[E")
        else:
            out.append(f"\x1b[{self.y + 1};{self.x + 1}H")
        self._changed = False
        self._old_unset = False
        self._write(out)

    def _write(self, parts: list[str]) -> None:
        if parts:
            self.output.write("".join(parts))
            self.output.flush()