"""CP-SAT skyscraper model using OR-Tools.

Independent of the backtracking search, so the two can cross-check each
other on the same puzzle.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

from ortools.sat.python import cp_model

from ..core.constants import EMPTY, Direction
from ..core.exceptions import SolverTimeout
from ..core.models import Grid, Puzzle
from ..utils.logger import get_logger
from .configuration import GridConfiguration

LOGGER = get_logger(__name__)


def solve_with_cp_sat(
    puzzle: Union[Puzzle, GridConfiguration],
    timeout: float = 10.0,
    num_workers: int = 4,
) -> Optional[Grid]:
    """Solve the puzzle with CP-SAT.

    Args:
        puzzle: A parsed puzzle or any configuration of it; filled cells are
            treated as fixed.
        timeout: Solver time limit in seconds.
        num_workers: CP-SAT search workers.

    Returns:
        The solved grid as a tuple of rows, or None if the puzzle is infeasible.

    Raises:
        SolverTimeout: The time limit was reached before CP-SAT decided.
    """
    config = (
        puzzle
        if isinstance(puzzle, GridConfiguration)
        else GridConfiguration.from_puzzle_data(puzzle)
    )
    size = config.size
    if size == 0:
        return ()

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Cell height variables
    # ------------------------------------------------------------------
    cells: Dict[Tuple[int, int], cp_model.IntVar] = {}
    for r in range(size):
        for c in range(size):
            given = config.grid[r][c]
            if given == EMPTY:
                cells[(r, c)] = model.new_int_var(1, size, f"h_{r}_{c}")
            else:
                cells[(r, c)] = model.new_int_var(given, given, f"h_{r}_{c}")

    # ------------------------------------------------------------------
    # Step 2: Latin square constraints
    # ------------------------------------------------------------------
    for index in range(size):
        model.add_all_different([cells[(index, c)] for c in range(size)])
        model.add_all_different([cells[(r, index)] for r in range(size)])

    # ------------------------------------------------------------------
    # Step 3: Visibility constraints for every line of sight
    # ------------------------------------------------------------------
    for index in range(size):
        row = [cells[(index, c)] for c in range(size)]
        column = [cells[(r, index)] for r in range(size)]
        sights = (
            (Direction.WEST, row),
            (Direction.EAST, row[::-1]),
            (Direction.NORTH, column),
            (Direction.SOUTH, column[::-1]),
        )
        for direction, line in sights:
            _add_visibility(
                model,
                line,
                config.clues.edge(direction, index),
                size,
                f"{direction.short}{index}",
            )

    # ------------------------------------------------------------------
    # Step 4: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.num_workers = num_workers

    LOGGER.info(
        "CP-SAT: %dx%d grid, %d open cells, solving (timeout=%0.1fs)...",
        size,
        size,
        config.empty_count(),
        timeout,
    )

    status = solver.solve(model)

    if status == cp_model.UNKNOWN:
        LOGGER.warning("CP-SAT: time limit of %0.1fs reached without a verdict", timeout)
        raise SolverTimeout(f"CP-SAT gave no verdict within {timeout:0.1f}s")
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no solution found (status=%s)", solver.status_name(status))
        return None

    LOGGER.info("CP-SAT: solution found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 5: Extract solution
    # ------------------------------------------------------------------
    return tuple(
        tuple(solver.value(cells[(r, c)]) for c in range(size))
        for r in range(size)
    )


def _add_visibility(
    model: cp_model.CpModel,
    line: Sequence[cp_model.IntVar],
    clue: int,
    size: int,
    tag: str,
) -> None:
    """Constrain the number of visible buildings along ``line`` to ``clue``.

    ``tallest[k]`` is the maximum of the first k+1 heights and ``seen[k]``
    holds iff position k is taller than everything before it.
    """
    seen: List[cp_model.IntVar] = [model.new_constant(1)]
    tallest = line[0]
    for pos in range(1, len(line)):
        visible = model.new_bool_var(f"v_{tag}_{pos}")
        model.add(line[pos] > tallest).only_enforce_if(visible)
        model.add(line[pos] <= tallest).only_enforce_if(~visible)
        seen.append(visible)

        running = model.new_int_var(1, size, f"m_{tag}_{pos}")
        model.add_max_equality(running, [tallest, line[pos]])
        tallest = running
    model.add(sum(seen) == clue)
