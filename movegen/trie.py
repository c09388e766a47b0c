"""Prefix trie for word and prefix lookups."""

from __future__ import annotations

from typing import Iterable


class TrieNode:
    """Single node in the prefix trie.

    ``parent`` is only used to rebuild the letters from a node back to
    the root; children are owned through ``children``.
    """

    __slots__ = ("letter", "parent", "children", "is_terminal")

    def __init__(self, letter: str = "", parent: TrieNode | None = None):
        self.letter = letter
        self.parent = parent
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def word(self) -> str:
        """Letters on the path from the root to this node."""
        letters: list[str] = []
        node: TrieNode | None = self
        while node is not None and node.parent is not None:
            letters.append(node.letter)
            node = node.parent
        return "".join(reversed(letters))

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"<TrieNode {self.word()!r}{mark} {len(self.children)} children>"


class Trie:
    """Prefix trie for fast word and prefix checks."""

    def __init__(self):
        self.root = TrieNode()
        self._count = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str) -> None:
        if not word:
            return
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode(ch, node)
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._count += 1

    def verify(self, word: str) -> bool:
        """True if *word* ends exactly on a terminal node.

        A missing edge is an ordinary miss, never an error.
        """
        node = self._walk(word)
        return node is not None and node.is_terminal

    is_word = verify

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.verify(word)

    def __len__(self) -> int:
        return self._count
