import unittest
from unittest import mock

from ortools.sat.python import cp_model

from helpers import (
    FOUR_CLUES,
    FOUR_SOLUTION,
    TWO_CLUES,
    TWO_SOLUTION,
    clues_for,
    empty_grid,
    latin_square,
)
from skyscraper.core.exceptions import SolverTimeout
from skyscraper.core.models import Puzzle
from skyscraper.engine.backtracker import solve
from skyscraper.engine.configuration import GridConfiguration
from skyscraper.engine.solver import solve_with_cp_sat


class CpSatSolverTests(unittest.TestCase):
    def test_solves_unique_puzzles(self) -> None:
        two = Puzzle(size=2, clues=tuple(TWO_CLUES), grid=tuple(map(tuple, empty_grid(2))))
        self.assertEqual(solve_with_cp_sat(two), TWO_SOLUTION)
        four = GridConfiguration.from_puzzle(4, FOUR_CLUES, empty_grid(4))
        self.assertEqual(solve_with_cp_sat(four), FOUR_SOLUTION)

    def test_infeasible_returns_none(self) -> None:
        config = GridConfiguration.from_puzzle(2, [1, 1, 1, 1, 2, 2, 2, 2], empty_grid(2))
        self.assertIsNone(solve_with_cp_sat(config))

    def test_respects_givens(self) -> None:
        grid = empty_grid(4)
        grid[0][0] = 1
        config = GridConfiguration.from_puzzle(4, FOUR_CLUES, grid)
        self.assertIsNone(solve_with_cp_sat(config))

    def test_agrees_with_backtracking(self) -> None:
        for size in (3, 4, 5):
            clues = clues_for(latin_square(size))
            start = GridConfiguration.from_puzzle(size, clues, empty_grid(size))
            with self.subTest(size=size):
                grid = solve_with_cp_sat(start)
                self.assertIsNotNone(grid)
                checked = GridConfiguration.from_puzzle(size, clues, grid)
                self.assertTrue(checked.is_goal())
                self.assertTrue(checked.is_valid())
                self.assertIsNotNone(solve(start))

    def test_zero_sized(self) -> None:
        self.assertEqual(solve_with_cp_sat(GridConfiguration.from_puzzle(0, [], [])), ())

    def test_time_limit_without_verdict_raises(self) -> None:
        config = GridConfiguration.from_puzzle(4, FOUR_CLUES, empty_grid(4))
        with mock.patch.object(cp_model.CpSolver, "solve", return_value=cp_model.UNKNOWN):
            with self.assertRaises(SolverTimeout):
                solve_with_cp_sat(config, timeout=0.5)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
