"""Board model: construction, equality, moves."""

from __future__ import annotations

import dataclasses

import pytest

from npuzzle.models import Board, Direction, IllegalMove, InvalidBoard, InvalidSize, Move


# -- construction -------------------------------------------------------------


def test_solved_3x3() -> None:
    board = Board.solved(3)
    assert board.tiles == ((1, 2, 3), (4, 5, 6), (7, 8, 0))
    assert board.blank_pos == (2, 2)
    assert board.size == 3
    assert board.is_solved()


def test_solved_2x2() -> None:
    board = Board.solved(2)
    assert board.flat == (1, 2, 3, 0)
    assert board.is_solved()


@pytest.mark.parametrize("size", [1, 0, -3, "3", 2.0, True])
def test_solved_rejects_bad_size(size: object) -> None:
    with pytest.raises(InvalidSize):
        Board.solved(size)  # type: ignore[arg-type]


def test_invalid_size_is_value_error() -> None:
    with pytest.raises(ValueError, match="must be an integer >= 2"):
        Board.solved(1)


def test_from_flat_finds_blank() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 0, 6, 7, 5, 8])
    assert board.blank_pos == (1, 1)
    assert board.get_tile(2, 1) == 5
    assert not board.is_solved()


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3],
        [1, 2, 3, 4, 0],
        [1, 1, 2, 0],
        [1, 2, 3, 4],
    ],
    ids=["too-short", "too-long", "duplicate", "no-blank"],
)
def test_from_flat_rejects_non_permutation(flat: list[int]) -> None:
    with pytest.raises(InvalidBoard):
        Board.from_flat(2, flat)


def test_from_rows() -> None:
    assert Board.from_rows([[1, 2], [3, 0]]) == Board.solved(2)


def test_from_rows_rejects_ragged_grid() -> None:
    with pytest.raises(InvalidBoard):
        Board.from_rows([[1, 2, 3], [0, 4]])


def test_from_rows_rejects_single_cell() -> None:
    with pytest.raises(InvalidSize):
        Board.from_rows([[0]])


# -- equality / hashing -------------------------------------------------------


def test_equality_is_by_tiles() -> None:
    a = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    b = Board.solved(3).apply_move(Move(2, 1))
    assert a == b
    assert a is not b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_equality_ignores_cached_fields() -> None:
    proper = Board.solved(2)
    odd = Board(size=99, tiles=proper.tiles, blank_pos=(0, 0))
    assert odd == proper
    assert hash(odd) == hash(proper)


def test_different_tiles_are_not_equal() -> None:
    assert Board.solved(3) != Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])


def test_board_is_immutable() -> None:
    board = Board.solved(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        board.blank_pos = (0, 0)  # type: ignore[misc]


# -- moves --------------------------------------------------------------------


@pytest.mark.parametrize(
    ("flat", "expected"),
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], [Move(1, 2), Move(2, 1)]),
        ([0, 1, 2, 3, 4, 5, 6, 7, 8], [Move(1, 0), Move(0, 1)]),
        ([1, 0, 2, 3, 4, 5, 6, 7, 8], [Move(1, 1), Move(0, 0), Move(0, 2)]),
        ([1, 2, 3, 4, 0, 5, 6, 7, 8], [Move(0, 1), Move(2, 1), Move(1, 0), Move(1, 2)]),
    ],
    ids=["corner", "top-left", "edge", "centre"],
)
def test_legal_moves(flat: list[int], expected: list[Move]) -> None:
    assert Board.from_flat(3, flat).legal_moves() == expected


def test_apply_move_swaps_blank() -> None:
    board = Board.solved(3)
    moved = board.apply_move(Move(1, 2))
    assert moved.tiles == ((1, 2, 3), (4, 5, 0), (7, 8, 6))
    assert moved.blank_pos == (1, 2)
    # original untouched
    assert board.is_solved()


@pytest.mark.parametrize(
    "target",
    [(1, 1), (2, 2), (0, 2), (3, 2), (2, 3)],
    ids=["diagonal", "same-cell", "far", "off-bottom", "off-right"],
)
def test_apply_move_rejects_non_adjacent(target: tuple[int, int]) -> None:
    with pytest.raises(IllegalMove) as excinfo:
        Board.solved(3).apply_move(Move(*target))
    assert isinstance(excinfo.value, RuntimeError)
    assert excinfo.value.target == target


def test_move_and_back_is_identity() -> None:
    start = Board.from_flat(3, [4, 1, 3, 7, 2, 6, 0, 5, 8])
    for move in start.legal_moves():
        there = start.apply_move(move)
        back = there.apply_move(Move(*start.blank_pos))
        assert back == start
        assert back.blank_pos == start.blank_pos


# -- directions ---------------------------------------------------------------


def test_direction_of() -> None:
    board = Board.solved(3)
    assert board.direction_of(Move(1, 2)) == Direction.DOWN
    assert board.direction_of(Move(2, 1)) == Direction.RIGHT

    centre = Board.from_flat(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert centre.direction_of(Move(2, 1)) == Direction.UP
    assert centre.direction_of(Move(1, 2)) == Direction.LEFT


def test_direction_of_rejects_non_adjacent() -> None:
    with pytest.raises(IllegalMove):
        Board.solved(3).direction_of(Move(0, 0))


def test_moved_slides_tile() -> None:
    board = Board.solved(3)
    moved = board.moved(Direction.DOWN)
    assert moved is not None
    assert moved.tiles == ((1, 2, 3), (4, 5, 0), (7, 8, 6))


def test_moved_off_board_returns_none() -> None:
    board = Board.solved(3)
    assert board.moved(Direction.UP) is None
    assert board.moved(Direction.LEFT) is None


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(2, 1)
    assert not board.is_tile_correct(2, 2)
