"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.models.board import Board

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42


class Shuffler:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(board: Board, moves: int, rng: random.Random) -> Board:
        """Apply *moves* uniformly random legal moves to *board*.

        The walk may step back onto boards it has already visited. The
        result is a new board; *board* is left untouched.
        """
        if moves < 0:
            raise ValueError(f"Shuffle move count must be >= 0, got {moves}.")

        for _ in range(moves):
            board = board.apply_move(rng.choice(board.legal_moves()))
        return board

    @staticmethod
    def generate(size: int, moves: int, seed: int = DEFAULT_SEED) -> Board:
        """Return a *solvable* board: the solved board after *moves* random moves.

        The same ``size``, ``moves`` and ``seed`` always give the same board.
        """
        board = Shuffler.shuffle(Shuffler.solved(size), moves, random.Random(seed))
        logger.info(
            "Generated %dx%d board with %d shuffle moves (seed=%d, h=%d)",
            size, size, moves, seed, board.heuristic(),
        )
        return board
