"""Node types shared by the list, tree and graph routines, plus builders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)


@dataclass(eq=False)
class GraphNode:
    """A node of an undirected graph given by adjacency lists."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list, repr=False)


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _walk(head: Optional[ListNode]) -> Iterator[int]:
    while head is not None:
        yield head.val
        head = head.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list from head to tail."""
    return list(_walk(head))


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a binary tree from level-order values, None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root