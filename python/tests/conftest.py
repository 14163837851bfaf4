"""Shared fixtures: a breadth-first oracle for small boards."""

from __future__ import annotations

from collections import deque

import pytest

from npuzzle.models.board import Board


def goal_distances(size: int, max_depth: int) -> dict[Board, int]:
    """Exact move distance to the goal for every board within *max_depth*."""
    goal = Board.solved(size)
    dist: dict[Board, int] = {goal: 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        d = dist[board]
        if d == max_depth:
            continue
        for move in board.legal_moves():
            nxt = board.apply_move(move)
            if nxt not in dist:
                dist[nxt] = d + 1
                queue.append(nxt)
    return dist


@pytest.fixture(scope="session")
def distances_2x2() -> dict[Board, int]:
    # The 2×2 puzzle has 12 reachable boards, none further than 6 moves.
    return goal_distances(2, 10)


@pytest.fixture(scope="session")
def distances_3x3() -> dict[Board, int]:
    return goal_distances(3, 10)
