"""Prefix trie with exact and wildcard lookups, plus the literal replace-all helper."""

from __future__ import annotations

from typing import Dict, Optional

from .config import WILDCARD
from .errors import InvalidArgument


class TrieNode:
    """Single node in the prefix trie. Children are owned by their parent."""

    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal: bool = False


def replace_all(text: str, pattern: str, replacement: str) -> str:
    """
    Replace every non-overlapping literal occurrence of `pattern` in `text`,
    left to right. The scan resumes right after each inserted replacement,
    so text introduced by a replacement is never matched again.

    Raises InvalidArgument for an empty pattern.
    """
    if not pattern:
        raise InvalidArgument("search pattern must not be empty")
    return text.replace(pattern, replacement)


class PatternTrie:
    """
    Prefix trie keyed by characters.

    `search` answers exact membership; `wildcard_search` additionally lets
    `.` stand for any single character at that position.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        if not word:
            raise InvalidArgument("cannot insert an empty word")
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def search(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        """True if some inserted word begins with `prefix`."""
        node = self._walk(prefix)
        if node is None:
            return False
        return node is not self.root or self._size > 0

    def wildcard_search(self, word: str) -> bool:
        return self._match(self.root, word, 0)

    # The replace helper does not consult the trie.
    replace_all = staticmethod(replace_all)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._size

    # ---- internals ----

    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _match(self, node: TrieNode, word: str, index: int) -> bool:
        if index == len(word):
            return node.is_terminal
        ch = word[index]
        if ch == WILDCARD:
            for child in node.children.values():
                if self._match(child, word, index + 1):
                    return True
            return False
        child = node.children.get(ch)
        return child is not None and self._match(child, word, index + 1)
