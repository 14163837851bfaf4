"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output around the same solver as the
vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.solver import SearchResult, SearchStatus, Solver
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str) -> Panel:
    size = board.size
    return Panel(
        Align.center(_render_board(board)),
        title=f"[{style}]{title}  {size}×{size}[/{style}]",
        border_style=style,
        padding=(1, 2),
    )


# -- result screens -----------------------------------------------------------


def _summary(result: SearchResult) -> Text:
    text = Text()
    if result.status is SearchStatus.SOLVED:
        text.append("Solution found in ", style="green")
        text.append(str(result.move_count), style="bold yellow")
        text.append(" moves.", style="green")
    elif result.status is SearchStatus.BUDGET_EXHAUSTED:
        text.append(
            f"Search stopped after {result.expanded} expansions without a solution.",
            style="yellow",
        )
    else:
        text.append("No solution found.", style="bold red")
    return text


def _stats(result: SearchResult) -> Text:
    stats = Text()
    stats.append("Expanded: ", style="dim")
    stats.append(str(result.expanded), style="bold cyan")
    stats.append("    Generated: ", style="dim")
    stats.append(str(result.generated), style="bold cyan")
    stats.append("    Peak frontier: ", style="dim")
    stats.append(str(result.peak_frontier), style="bold cyan")
    stats.append("    Time: ", style="dim")
    stats.append(f"{result.elapsed:.3f}s", style="bold cyan")
    return stats


def _draw_steps(result: SearchResult) -> None:
    assert result.path is not None
    directions = result.directions()
    for i, (step, direction) in enumerate(zip(result.path[1:], directions), 1):
        progress = Text()
        progress.append(f"Move {i}/{len(directions)} ", style="bold cyan")
        progress.append(f"({direction.value})", style="dim")
        console.print(Align.center(_render_board(step)))
        console.print(Align.center(progress))


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    *,
    show_steps: bool = False,
    max_expansions: int | None = None,
    time_limit: float | None = None,
) -> SearchResult:
    """Solve *board* and show the boards and search statistics in panels."""
    console.print()
    console.print(Align.center(_board_panel(board, "Initial (Shuffled) Board", "bold cyan")))

    with console.status("Searching…"):
        result = Solver.solve(board, max_expansions=max_expansions, time_limit=time_limit)

    if result.path:
        if show_steps:
            _draw_steps(result)
        console.print(
            Align.center(_board_panel(result.path[-1], "Final (Solved) Board", "bold green"))
        )

    console.print(Align.center(Group(Align.center(_summary(result)), Align.center(_stats(result)))))
    return result
