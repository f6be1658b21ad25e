"""Prefix tree over words of lower-case ASCII letters."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    terminal: bool = False


def _check_word(word: str) -> None:
    bad = set(word) - _ALPHABET
    if bad:
        raise ValueError(
            f"words may hold only the letters a-z, not {''.join(sorted(bad))!r}"
        )


class Trie:
    """Set of words stored letter by letter in a tree."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check_word(word)
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        """True when ``word`` itself was inserted, not merely a longer word."""
        _check_word(word)
        node = self._root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.terminal

    def __contains__(self, word: str) -> bool:
        return self.search(word)