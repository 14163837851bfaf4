"""A* sliding puzzle solver."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter

from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass
class SearchRecord:
    """Best known cost to reach a board, and the board it was reached from."""

    g: int
    predecessor: Board | None


@dataclass
class SearchResult:
    """Outcome of one :meth:`Solver.solve` call.

    ``path`` runs from the start board to the solved board and is ``None``
    unless ``status`` is :attr:`SearchStatus.SOLVED`.
    """

    status: SearchStatus
    path: list[Board] | None = None
    expanded: int = 0
    generated: int = 0
    peak_frontier: int = 0
    elapsed: float = 0.0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def move_count(self) -> int | None:
        """Number of moves in the solution, ``None`` if none was found."""
        if self.path is None:
            return None
        return len(self.path) - 1

    def directions(self) -> list[Direction]:
        """The solution as tile slides, one per consecutive pair of boards."""
        if self.path is None:
            return []
        return [
            before.direction_of(after.blank_pos)
            for before, after in zip(self.path, self.path[1:])
        ]


@dataclass(order=True)
class _FrontierEntry:
    f: int
    h: int
    seq: int
    g: int = field(compare=False)
    board: Board = field(compare=False)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        *,
        max_expansions: int | None = None,
        time_limit: float | None = None,
    ) -> SearchResult:
        """Find a shortest move sequence from *board* to the goal with A*.

        The frontier is ordered by ``g + h`` (Manhattan distance), then by
        ``h``, then by insertion order. An entry whose board has since been
        reached more cheaply is skipped when popped.

        ``max_expansions`` and ``time_limit`` (seconds) optionally bound the
        search; hitting either yields :attr:`SearchStatus.BUDGET_EXHAUSTED`.
        An unsolvable board yields :attr:`SearchStatus.NO_SOLUTION` once the
        frontier runs dry.
        """
        if max_expansions is not None and max_expansions <= 0:
            raise ValueError(f"max_expansions must be positive, got {max_expansions}.")
        if time_limit is not None and time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {time_limit}.")

        t0 = perf_counter()
        counter = itertools.count()
        records: dict[Board, SearchRecord] = {board: SearchRecord(0, None)}
        h0 = board.heuristic()
        frontier = [_FrontierEntry(h0, h0, next(counter), 0, board)]

        expanded = 0
        generated = 0
        stale = 0
        peak_frontier = 1

        def result(status: SearchStatus, path: list[Board] | None = None) -> SearchResult:
            return SearchResult(
                status=status,
                path=path,
                expanded=expanded,
                generated=generated,
                peak_frontier=peak_frontier,
                elapsed=perf_counter() - t0,
            )

        while frontier:
            entry = heapq.heappop(frontier)
            current = entry.board
            if entry.g > records[current].g:
                stale += 1
                continue

            if current.is_solved():
                path = Solver._reconstruct(records, current)
                logger.info(
                    "Solved %dx%d board in %d moves (%d expanded, %d generated)",
                    board.size, board.size, len(path) - 1, expanded, generated,
                )
                logger.debug("Skipped %d stale frontier entries", stale)
                return result(SearchStatus.SOLVED, path)

            if max_expansions is not None and expanded >= max_expansions:
                logger.info("Expansion budget of %d reached", max_expansions)
                return result(SearchStatus.BUDGET_EXHAUSTED)
            if time_limit is not None and perf_counter() - t0 > time_limit:
                logger.info("Time limit of %.3fs reached after %d expansions", time_limit, expanded)
                return result(SearchStatus.BUDGET_EXHAUSTED)

            expanded += 1
            g = entry.g + 1
            for move in current.legal_moves():
                neighbor = current.apply_move(move)
                generated += 1
                known = records.get(neighbor)
                if known is None or g < known.g:
                    records[neighbor] = SearchRecord(g, current)
                    h = neighbor.heuristic()
                    heapq.heappush(
                        frontier, _FrontierEntry(g + h, h, next(counter), g, neighbor)
                    )
            peak_frontier = max(peak_frontier, len(frontier))

        logger.info(
            "No solution: frontier exhausted after %d expansions (%d states seen)",
            expanded, len(records),
        )
        return result(SearchStatus.NO_SOLUTION)

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        moves = Solver.solve(board).directions()
        return moves[0] if moves else None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(records: dict[Board, SearchRecord], goal: Board) -> list[Board]:
        path: list[Board] = []
        node: Board | None = goal
        while node is not None:
            path.append(node)
            node = records[node].predecessor
        path.reverse()
        return path
