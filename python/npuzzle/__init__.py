"""A* solver for the N×N sliding-tile puzzle."""

__version__ = "0.1.0"
