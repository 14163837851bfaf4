from npuzzle.engine.moves import Move
from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import IllegalMove, InvalidBoard, InvalidSize, PuzzleError

__all__ = [
    "Board",
    "Direction",
    "IllegalMove",
    "InvalidBoard",
    "InvalidSize",
    "Move",
    "PuzzleError",
]
