"""A screenful of text with a trailing prompt, shown through a Printer."""

from __future__ import annotations

from .printer import Printer


class Scene:
    """Text to show, a prompt below it, and how much input to wait for.

    ``wait_len`` is the number of characters to read after drawing; a
    negative value means the scene reads no input at all.
    """

    def __init__(self, initial: str = "", print_newline: bool = True, wait_len: int = -1) -> None:
        self.text = initial
        self.temp = ""
        self.print_newline = print_newline
        self.wait_len = wait_len

    def add_line(self, text: str) -> None:
        """Append ``text`` on a new line."""
        self.text += "\n" + text

    def add(self, text: str) -> None:
        """Append ``text`` to the current last line."""
        self.text += text

    def set_direct(self, pos: int, char: str) -> None:
        """Replace the single character at ``pos``."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if not 0 <= pos < len(self.text):
            raise IndexError(f"position {pos} is outside the scene text")
        self.text = self.text[:pos] + char + self.text[pos + 1:]

    def show(self, printer: Printer) -> str | None:
        """Draw the scene on ``printer`` and read input if the scene asks for it.

        Returns the text read, or None when the scene reads no input.
        """
        printer.clear()
        printer.move_cursor(0, 0)

        *lines, last = (self.text + "\n" + self.temp).split("\n")
        for line in lines:
            printer.println(line)
        if last:
            printer.print(last)

        printer.render(self.print_newline)
        if self.wait_len >= 0:
            return printer.get_input(self.wait_len)
        return None