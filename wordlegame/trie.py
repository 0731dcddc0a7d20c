"""A letter tree holding five-letter lower-case words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .words import WORD_LENGTH, rng

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)


def _is_storable(word: object) -> bool:
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and all("a" <= ch <= "z" for ch in word)
    )


class Tree:
    """Stores five-letter words letter by letter and can pick one at random."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``; anything that is not five lower-case letters is ignored."""
        if not _is_storable(word):
            return
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())

    def __contains__(self, word: object) -> bool:
        if not _is_storable(word):
            return False
        node = self._root
        for ch in word:  # type: ignore[union-attr]
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return True

    def random(self) -> str:
        """Walk down the tree choosing a random branch at each level.

        Returns an empty string when the tree holds no words.
        """
        letters = []
        node = self._root
        for _ in range(WORD_LENGTH):
            if not node.children:
                break
            branches = sorted(node.children)
            choice = branches[0] if len(branches) == 1 else branches[rng(len(branches) - 1, 0)]
            letters.append(choice)
            node = node.children[choice]
        return "".join(letters)

    def debug(self) -> list[str]:
        """Describe every inner node, depth first, one line per node."""
        return list(self._describe(self._root, 0, 0))

    def _describe(self, node: _Node, depth: int, pos: int) -> Iterator[str]:
        if not node.children:
            return
        mask = "".join(ch if ch in node.children else "#" for ch in _ALPHABET)
        yield f"depth: {depth}, pos {pos}: [{mask}]"
        for index, ch in enumerate(_ALPHABET):
            child = node.children.get(ch)
            if child is not None:
                yield from self._describe(child, depth + 1, index)