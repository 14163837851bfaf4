"""Sliding puzzle solver.

Usage::

    npuzzle 3 20                 # shuffle a 3×3 board 20 moves, solve it
    npuzzle 4 30 -f rich         # Rich terminal output
    npuzzle 3 20 --show-steps    # print every board on the solution path
"""

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer

from npuzzle.engine.generator import DEFAULT_SEED, Shuffler
from npuzzle.models.errors import InvalidSize

USAGE = "Usage: npuzzle <size> <number_of_shuffles>"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool, frontend: Frontend) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if frontend is Frontend.rich:
        from rich.console import Console
        from rich.logging import RichHandler

        logging.basicConfig(
            level=level,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True))],
        )
    else:
        logging.basicConfig(
            level=level, format="%(asctime)s [%(levelname)s] %(message)s"
        )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: Optional[int] = typer.Argument(
        None, help="Board dimension (>= 2).", show_default=False,
    ),
    shuffles: Optional[int] = typer.Argument(
        None, help="Number of random moves applied to the solved board.",
        show_default=False,
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    seed: int = typer.Option(
        DEFAULT_SEED, "--seed",
        help="Seed for the shuffle; fixed so runs are reproducible.",
    ),
    show_steps: bool = typer.Option(
        False, "--show-steps",
        help="Print every board on the solution path.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions", min=1,
        help="Give up after expanding this many boards.",
    ),
    time_limit: Optional[float] = typer.Option(
        None, "--time-limit", min=0.001,
        help="Give up after this many seconds of search.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Shuffle a solved N×N sliding puzzle and solve it optimally with A*."""
    if size is None or shuffles is None:
        typer.echo(USAGE)
        return

    _configure_logging(verbose, frontend)

    if shuffles < 0:
        raise typer.BadParameter(
            f"must be >= 0, got {shuffles}.", param_hint="'SHUFFLES'"
        )
    try:
        board = Shuffler.generate(size, shuffles, seed=seed)
    except InvalidSize as exc:
        raise typer.BadParameter(str(exc), param_hint="'SIZE'") from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(
        board,
        show_steps=show_steps,
        max_expansions=max_expansions,
        time_limit=time_limit,
    )


if __name__ == "__main__":
    app()
