"""Exceptions raised by the puzzle model."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle errors."""


class InvalidSize(PuzzleError, ValueError):
    """The board dimension cannot form a puzzle (must be an int >= 2)."""

    def __init__(self, size: object) -> None:
        super().__init__(f"Board size must be an integer >= 2, got {size!r}.")
        self.size = size


class InvalidBoard(PuzzleError, ValueError):
    """The tiles do not describe a valid square board."""


class IllegalMove(PuzzleError, RuntimeError):
    """A move target is not adjacent to the blank.

    This signals a bug in the caller, not bad user input.
    """

    def __init__(self, blank_pos: tuple[int, int], target: tuple[int, int]) -> None:
        super().__init__(
            f"Cannot move blank at {blank_pos} to non-adjacent cell {target}."
        )
        self.blank_pos = blank_pos
        self.target = target
