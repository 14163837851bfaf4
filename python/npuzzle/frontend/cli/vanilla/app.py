"""Vanilla terminal frontend — no third-party dependencies.

Prints the shuffled board, the solved board and a one-line summary using
plain fixed-width text.
"""

from __future__ import annotations

from npuzzle.engine.solver import SearchResult, SearchStatus, Solver
from npuzzle.models.board import Board


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return a bordered fixed-width text grid; the blank is left empty."""
    width = len(str(board.size * board.size))
    border = "-" * (board.size * (width + 3) + 1)

    lines: list[str] = [border]
    for row in board.tiles:
        cells = ["" if val == 0 else str(val) for val in row]
        lines.append("| " + " | ".join(f"{cell:>{width}}" for cell in cells) + " |")
    lines.append(border)
    return "\n".join(lines)


def summary_line(result: SearchResult) -> str:
    if result.status is SearchStatus.SOLVED:
        return f"Solution found in {result.move_count} moves."
    if result.status is SearchStatus.BUDGET_EXHAUSTED:
        return (
            f"Search stopped after {result.expanded} expansions "
            "without a solution."
        )
    return "No solution found."


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    *,
    show_steps: bool = False,
    max_expansions: int | None = None,
    time_limit: float | None = None,
) -> SearchResult:
    """Solve *board* and print the shuffled board, solved board and summary."""
    print("\nInitial (Shuffled) Board:")
    print(render_board(board))

    result = Solver.solve(board, max_expansions=max_expansions, time_limit=time_limit)

    if result.path:
        if show_steps:
            for i, step in enumerate(result.path[1:], 1):
                print(f"\nStep {i}:")
                print(render_board(step))
        print("\nFinal (Solved) Board:")
        print(render_board(result.path[-1]))

    print(f"\n{summary_line(result)}")
    return result
