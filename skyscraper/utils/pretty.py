"""Pretty-print helpers for skyscraper configurations."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List

from ..core.constants import CLUE_ORDER, EMPTY, EMPTY_CELL, Direction

if TYPE_CHECKING:
    from ..engine.backtracker import SearchResult
    from ..engine.configuration import GridConfiguration


def cell_symbol(value: int) -> str:
    return EMPTY_CELL if value == EMPTY else str(value)


def format_row(values: Iterable[int]) -> str:
    return " ".join(cell_symbol(value) for value in values)


def format_configuration(config: GridConfiguration) -> str:
    """Clue lists labelled by direction, then the grid."""

    lines = [
        f"{direction.short}: {list(config.clues.side(direction))}"
        for direction in CLUE_ORDER
    ]
    lines.extend(format_row(line) for line in config.grid)
    return "\n".join(lines)


def format_framed(config: GridConfiguration) -> str:
    """Grid with the clues drawn around its edges.

    ::

          1 2 4 2
          -------
        1|. . . .|3
        2|. . . .|3
          -------
          4 2 1 2
    """

    clues = config.clues
    width = max(2 * config.size - 1, 0)
    rule = "  " + "-" * width
    lines: List[str] = ["  " + format_row(clues.side(Direction.NORTH)), rule]
    for index, line in enumerate(config.grid):
        west = clues.edge(Direction.WEST, index)
        east = clues.edge(Direction.EAST, index)
        lines.append(f"{west}|{format_row(line)}|{east}")
    lines.append(rule)
    lines.append("  " + format_row(clues.side(Direction.SOUTH)))
    return "\n".join(lines)


def pretty_print_configuration(
    config: GridConfiguration,
    *,
    label: str | None = None,
    framed: bool = False,
    stream=None,
) -> None:
    """Print a configuration in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_framed(config) if framed else format_configuration(config), file=stream)


def print_search_stats(result: SearchResult, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Strategy:      {result.strategy}", file=stream)
    print(f"  Nodes:         {result.nodes_explored}", file=stream)
    print(f"  Elapsed:       {result.elapsed_seconds:.3f}s", file=stream)
    print(f"  Solved:        {'yes' if result.solution is not None else 'no'}", file=stream)
