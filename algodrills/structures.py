"""A stack that tracks its minimum, and a prefix tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class MinStack:
    """A stack of integers that reports its smallest value in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put ``val`` on top of the stack."""
        if not self._minima or val <= self._minima[-1]:
            self._minima.append(val)
        self._items.append(val)

    def pop(self) -> None:
        """Remove the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        if self._items.pop() == self._minima[-1]:
            self._minima.pop()

    def top(self) -> int:
        """The value on top of the stack."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """The smallest value on the stack."""
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the tree."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` itself was inserted."""
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word begins with ``prefix``."""
        return self._find(prefix) is not None

    def _find(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node