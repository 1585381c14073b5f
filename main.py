"""CLI entrypoint for the skyscraper puzzle solver."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from skyscraper.core.exceptions import MalformedPuzzle, SearchLimitExceeded, SolverTimeout
from skyscraper.engine.backtracker import STRATEGIES, Backtracker, SearchConfig
from skyscraper.engine.configuration import GridConfiguration
from skyscraper.engine.solver import solve_with_cp_sat
from skyscraper.engine.validator import SolutionValidator
from skyscraper.utils.logger import configure_logging, get_logger
from skyscraper.utils.pretty import pretty_print_configuration, print_search_stats

LOGGER = get_logger("skyscraper.cli")

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_MALFORMED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a Skyscraper puzzle by backtracking search",
    )
    parser.add_argument("puzzle", type=Path, help="Path to the puzzle file")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=STRATEGIES,
        default="dfs",
        help="Search order (depth-first or breadth-first)",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Abort after exploring this many configurations",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Also solve with OR-Tools CP-SAT and compare the outcome",
    )
    parser.add_argument(
        "--cp-sat-timeout",
        type=float,
        default=10.0,
        help="CP-SAT time limit in seconds (with --cross-check)",
    )
    parser.add_argument(
        "--framed",
        action="store_true",
        help="Draw clues around the board instead of listing them",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


@dataclass
class CrossCheckResult:
    """Outcome of comparing the backtracking result with CP-SAT."""

    outcome: str
    problems: List[str] = field(default_factory=list)


def cross_check(
    start: GridConfiguration, backtracked: Optional[GridConfiguration], timeout: float
) -> CrossCheckResult:
    """Compare the backtracking outcome with CP-SAT.

    ``outcome`` is ``"ok"``, ``"mismatch"`` or ``"timed out"``. A CP-SAT
    timeout says nothing about the puzzle, so it is never a disagreement.
    """

    try:
        grid = solve_with_cp_sat(start, timeout=timeout)
    except SolverTimeout as exc:
        return CrossCheckResult("timed out", [f"CP-SAT timed out: {exc}"])

    problems: List[str] = []
    if (grid is None) != (backtracked is None):
        problems.append(
            f"Solvers disagree: backtracking {'solved' if backtracked else 'found nothing'}, "
            f"CP-SAT {'solved' if grid is not None else 'found nothing'}"
        )
    if grid is not None:
        candidate = GridConfiguration.from_puzzle(start.size, start.clues, grid)
        result = SolutionValidator(require_complete=True).validate(candidate)
        problems.extend(f"CP-SAT grid: {message}" for message in result.messages)
    return CrossCheckResult("mismatch" if problems else "ok", problems)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.max_nodes is not None and args.max_nodes < 1:
        parser.error("--max-nodes must be positive")

    try:
        start = GridConfiguration.from_file(args.puzzle)
    except MalformedPuzzle as exc:
        LOGGER.error("Malformed puzzle %s: %s", args.puzzle, exc)
        return EXIT_MALFORMED

    pretty_print_configuration(start, label="Initial configuration:", framed=args.framed)

    backtracker = Backtracker(SearchConfig(strategy=args.strategy, max_nodes=args.max_nodes))
    try:
        result = backtracker.solve(start)
    except SearchLimitExceeded as exc:
        LOGGER.error("%s", exc)
        return EXIT_NO_SOLUTION

    print()
    if result.solution is not None:
        pretty_print_configuration(result.solution, label="Solution:", framed=args.framed)
    else:
        print("No solution.")
    print_search_stats(result)

    payload: Dict[str, Any] = {
        "puzzle": str(args.puzzle),
        "initial": start.to_jsonable(),
        "solution": result.solution.to_jsonable() if result.solution is not None else None,
        "stats": {
            "strategy": result.strategy,
            "nodes_explored": result.nodes_explored,
            "elapsed_seconds": result.elapsed_seconds,
        },
    }

    if args.cross_check:
        check = cross_check(start, result.solution, args.cp_sat_timeout)
        for problem in check.problems:
            LOGGER.warning("%s", problem)
        payload["cross_check"] = {"outcome": check.outcome, "problems": check.problems}
        label = "MISMATCH" if check.outcome == "mismatch" else check.outcome
        print(f"Cross-check:   {label}")

    if args.output:
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        LOGGER.info("Wrote %s", args.output)

    return EXIT_SOLVED if result.solved else EXIT_NO_SOLUTION


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
