"""A fixed collection of five-letter words loaded from a text file."""

from __future__ import annotations

import os

from .trie import Tree
from .words import WORD_LENGTH, Word, is_valid_word


class DictionaryError(Exception):
    """Raised when a dictionary file yields no lines or no word can be drawn."""

    def __init__(self, filename: str | os.PathLike[str], message: str | None = None) -> None:
        self.filename = filename
        super().__init__(message or f"cannot load dictionary from {os.fspath(filename)!r}")


class Dictionary:
    """An immutable set of words read one per line from a file."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self._filename = filename
        self._tree = Tree()
        self._size = 0
        read_any = False
        try:
            with open(filename, encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    read_any = True
                    line = line.rstrip("\n")
                    if is_valid_word(line):
                        self._tree.insert(line)
                        self._size += 1
        except OSError as exc:
            raise DictionaryError(filename) from exc
        if not read_any:
            raise DictionaryError(filename)

    def __len__(self) -> int:
        return self._size

    def random_word(self) -> Word:
        """Pick a word from the dictionary at random."""
        text = self._tree.random()
        if len(text) != WORD_LENGTH:
            raise DictionaryError(self._filename, "dictionary holds no words")
        return Word(text)

    def __contains__(self, word: object) -> bool:
        if isinstance(word, str):
            if len(word) < WORD_LENGTH:
                return False
            word = Word(word)
        if not isinstance(word, Word):
            return False
        return str(word) in self._tree