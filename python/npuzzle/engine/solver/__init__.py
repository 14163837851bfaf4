from npuzzle.engine.solver.solver import SearchRecord, SearchResult, SearchStatus, Solver

__all__ = ["SearchRecord", "SearchResult", "SearchStatus", "Solver"]
