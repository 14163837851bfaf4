"""Board model for the sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from functools import lru_cache

from npuzzle.engine.heuristic import manhattan_distance
from npuzzle.engine.moves import Move, is_adjacent, legal_moves
from npuzzle.models.errors import IllegalMove, InvalidBoard, InvalidSize

Tiles = tuple[tuple[int, ...], ...]


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides into it.
# UP    -> tile below the blank moves up   -> blank shifts down
# DOWN  -> tile above the blank moves down -> blank shifts up
# LEFT  -> tile right of the blank moves left
# RIGHT -> tile left of the blank moves right
_TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}
_DIRECTIONS_BY_OFFSET = {offset: d for d, offset in _TILE_OFFSETS.items()}


def _check_size(size: object) -> int:
    if not isinstance(size, int) or isinstance(size, bool) or size < 2:
        raise InvalidSize(size)
    return size


@lru_cache(maxsize=None)
def _goal_tiles(size: int) -> Tiles:
    flat = list(range(1, size * size)) + [0]
    return tuple(tuple(flat[r * size : (r + 1) * size]) for r in range(size))


@dataclass(frozen=True)
class Board:
    """An immutable puzzle configuration.

    Tiles are stored as a tuple of rows; 0 represents the blank. Two boards
    are equal (and hash equal) exactly when their tiles are equal; ``size``
    and the cached ``blank_pos`` take no part in the comparison.

    Use :meth:`solved`, :meth:`from_flat` or :meth:`from_rows` to build a
    board from scratch; they validate their input. Every other board is
    derived from an existing one with :meth:`apply_move`.
    """

    size: int = field(compare=False)
    tiles: Tiles
    blank_pos: tuple[int, int] = field(compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board: tiles ascending row-major, blank last."""
        size = _check_size(size)
        return cls(size=size, tiles=_goal_tiles(size), blank_pos=(size - 1, size - 1))

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        size = _check_size(size)
        values = list(flat)
        if len(values) != size * size:
            raise InvalidBoard(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(values)}."
            )
        if sorted(values) != list(range(size * size)):
            raise InvalidBoard(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        blank = values.index(0)
        tiles = tuple(tuple(values[r * size : (r + 1) * size]) for r in range(size))
        return cls(size=size, tiles=tiles, blank_pos=divmod(blank, size))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows, e.g. ``[[1, 2], [3, 0]]``."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidBoard("Board rows must form a square grid.")
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    @property
    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.tiles for v in row)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.tiles == _goal_tiles(self.size)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[row][col] == _goal_tiles(self.size)[row][col]

    def heuristic(self) -> int:
        """Manhattan distance of this board from the goal."""
        return manhattan_distance(self.tiles, self.size)

    def legal_moves(self) -> list[Move]:
        """Cells the blank can move to, in up/down/left/right order."""
        return legal_moves(self.blank_pos, self.size)

    def direction_of(self, move: Move) -> Direction:
        """Return the direction the tile at *move* slides into the blank."""
        br, bc = self.blank_pos
        offset = (move[0] - br, move[1] - bc)
        try:
            return _DIRECTIONS_BY_OFFSET[offset]
        except KeyError:
            raise IllegalMove(self.blank_pos, (move[0], move[1])) from None

    # -- transitions ----------------------------------------------------------

    def apply_move(self, move: Move) -> Board:
        """Return a new board with the blank swapped into *move*."""
        target = (move[0], move[1])
        if not (
            0 <= target[0] < self.size
            and 0 <= target[1] < self.size
            and is_adjacent(self.blank_pos, target)
        ):
            raise IllegalMove(self.blank_pos, target)

        br, bc = self.blank_pos
        tr, tc = target
        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], rows[br][bc]
        return Board(
            size=self.size,
            tiles=tuple(tuple(row) for row in rows),
            blank_pos=target,
        )

    def moved(self, direction: Direction) -> Board | None:
        """Slide a tile in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns ``None`` if there is no tile on that side of the blank.
        """
        br, bc = self.blank_pos
        dr, dc = _TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self.apply_move(Move(tr, tc))
