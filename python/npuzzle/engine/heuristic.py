"""Manhattan-distance heuristic for the sliding puzzle.

Each move slides one tile by one cell, so the sum of every tile's distance
to its goal cell never overestimates the moves left, and changes by exactly
one per move.
"""

from __future__ import annotations

from collections.abc import Sequence


def manhattan_distance(tiles: Sequence[Sequence[int]], size: int) -> int:
    """Sum of row and column offsets of every tile from its goal cell.

    Tile ``v`` belongs at ``((v - 1) // size, (v - 1) % size)``; the blank
    is ignored.
    """
    total = 0
    for r, row in enumerate(tiles):
        for c, val in enumerate(row):
            if val == 0:
                continue
            goal_r, goal_c = divmod(val - 1, size)
            total += abs(r - goal_r) + abs(c - goal_c)
    return total
