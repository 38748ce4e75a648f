"""Routines on rectangular grids of integers."""

from __future__ import annotations

from collections.abc import Sequence

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values of ``matrix`` read clockwise from the top-left corner inwards."""
    if not matrix:
        return []
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        result.extend(row[right] for row in matrix[top + 1:bottom + 1])
        if top < bottom:
            result.extend(reversed(matrix[bottom][left:right]))
        if left < right:
            result.extend(matrix[r][left] for r in range(bottom - 1, top, -1))
        top += 1
        left += 1
        bottom -= 1
        right -= 1
    return result


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left next to a rotten one (2).

    Returns -1 when some fresh orange can never rot. The grid is not changed.
    """
    fresh = set()
    frontier = []
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 1:
                fresh.add((r, c))
            elif value == 2:
                frontier.append((r, c))
    minutes = 0
    while frontier:
        spread = []
        for r, c in frontier:
            for dr, dc in _STEPS:
                cell = (r + dr, c + dc)
                if cell in fresh:
                    fresh.remove(cell)
                    spread.append(cell)
        if spread:
            minutes += 1
        frontier = spread
    return -1 if fresh else minutes