"""Backtracking solver for the Skyscraper logic puzzle.

This package exposes the public API surface via:

- ``skyscraper.engine.configuration.GridConfiguration``: the search state.
- ``skyscraper.engine.backtracker.Backtracker``: the depth/breadth-first driver.
- ``skyscraper.engine.solver.solve_with_cp_sat``: the OR-Tools cross-check.
- ``skyscraper.io.puzzle_file.load_puzzle``: reads the puzzle file format.
"""

from .engine.backtracker import Backtracker, SearchConfig, SearchResult
from .engine.configuration import GridConfiguration
from .io.puzzle_file import load_puzzle, parse_puzzle

__all__ = [
    "Backtracker",
    "SearchConfig",
    "SearchResult",
    "GridConfiguration",
    "load_puzzle",
    "parse_puzzle",
]

__version__ = "0.1.0"
