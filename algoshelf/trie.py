"""Prefix tree for exact word lookup."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_terminal: bool = False


class Trie:
    """Set of words stored character by character."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        for word in words:
            self.add_word(word)

    def add_word(self, word: str) -> None:
        """Store ``word``."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_terminal = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was stored as a whole word."""
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return node.is_terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)