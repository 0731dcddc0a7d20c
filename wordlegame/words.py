"""Five-letter words and the small helpers that check and pick them."""

from __future__ import annotations

import random

WORD_LENGTH = 5


def rng(maximum: int, minimum: int) -> int:
    """Return a random integer between ``minimum`` and ``maximum``, both inclusive."""
    if maximum < minimum:
        raise ValueError(f"empty range: maximum {maximum} is below minimum {minimum}")
    return random.randint(minimum, maximum)


def is_valid_word(text: str) -> bool:
    """True when ``text`` starts with five lower-case ASCII letters."""
    if len(text) < WORD_LENGTH:
        return False
    return all("a" <= ch <= "z" for ch in text[:WORD_LENGTH])


class Word:
    """An immutable five-character word; longer input is cut to five characters."""

    __slots__ = ("_letters",)

    def __init__(self, text: str = "a" * WORD_LENGTH) -> None:
        if len(text) < WORD_LENGTH:
            raise ValueError(f"a word needs {WORD_LENGTH} characters, got {text!r}")
        self._letters = text[:WORD_LENGTH]

    def count(self, letter: str) -> int:
        """How many times ``letter`` occurs in the word."""
        return sum(1 for ch in self._letters if ch == letter)

    def char_at(self, pos: int) -> str:
        """The character at ``pos``, or an empty string when ``pos`` is out of range."""
        if 0 <= pos < WORD_LENGTH:
            return self._letters[pos]
        return ""

    def __str__(self) -> str:
        return self._letters

    def __repr__(self) -> str:
        return f"Word({self._letters!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Word):
            return self._letters == other._letters
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._letters)

    def __iter__(self):
        return iter(self._letters)