"""Routines on graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Optional

from algodrills.nodes import GraphNode


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Deep copy of the connected graph reachable from ``node``."""
    if node is None:
        return None
    clones = {node: GraphNode(node.val)}
    queue = deque([node])
    while queue:
        current = queue.popleft()
        for neighbor in current.neighbors:
            if neighbor not in clones:
                clones[neighbor] = GraphNode(neighbor.val)
                queue.append(neighbor)
            clones[current].neighbors.append(clones[neighbor])
    return clones[node]


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether all courses can be taken given ``[course, prerequisite]`` pairs."""
    unlocks: list[list[int]] = [[] for _ in range(num_courses)]
    in_degree = [0] * num_courses
    for course, required in prerequisites:
        if not (0 <= course < num_courses and 0 <= required < num_courses):
            raise ValueError(f"course out of range: {[course, required]}")
        unlocks[required].append(course)
        in_degree[course] += 1
    ready = deque(c for c, degree in enumerate(in_degree) if degree == 0)
    taken = 0
    while ready:
        course = ready.popleft()
        taken += 1
        for nxt in unlocks[course]:
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                ready.append(nxt)
    return taken == num_courses