"""Legal blank moves."""

from __future__ import annotations

from typing import NamedTuple


class Move(NamedTuple):
    """A cell adjacent to the blank that the blank can move into."""

    row: int
    col: int


# Blank offsets in a fixed order: up, down, left, right.
OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def legal_moves(blank_pos: tuple[int, int], size: int) -> list[Move]:
    """Return the 2-4 cells the blank at *blank_pos* can move to."""
    br, bc = blank_pos
    moves: list[Move] = []
    for dr, dc in OFFSETS:
        nr, nc = br + dr, bc + dc
        if 0 <= nr < size and 0 <= nc < size:
            moves.append(Move(nr, nc))
    return moves


def is_adjacent(blank_pos: tuple[int, int], target: tuple[int, int]) -> bool:
    return abs(target[0] - blank_pos[0]) + abs(target[1] - blank_pos[1]) == 1
