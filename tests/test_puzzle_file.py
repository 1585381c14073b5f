import tempfile
import unittest
from pathlib import Path

from helpers import FOUR_CLUES
from skyscraper.core.exceptions import MalformedPuzzle, PuzzleFormatError
from skyscraper.engine.configuration import GridConfiguration
from skyscraper.io.puzzle_file import load_puzzle, parse_puzzle

FOUR_TEXT = """4
1 2 4 2
3 3 1 2
4 2 1 2
1 2 3 3
0 0 0 0
0 4 0 0
0 0 0 0
0 0 0 3
"""


class ParsePuzzleTests(unittest.TestCase):
    def test_parses_clues_and_grid(self) -> None:
        puzzle = parse_puzzle(FOUR_TEXT)
        self.assertEqual(puzzle.size, 4)
        self.assertEqual(list(puzzle.clues), FOUR_CLUES)
        self.assertEqual(puzzle.grid[1], (0, 4, 0, 0))
        self.assertEqual(puzzle.grid[3], (0, 0, 0, 3))

    def test_layout_does_not_matter(self) -> None:
        flat = " ".join(FOUR_TEXT.split())
        self.assertEqual(parse_puzzle(flat), parse_puzzle(FOUR_TEXT))

    def test_comments_are_ignored(self) -> None:
        text = "2  # size\n2 1\n1 2\n1 2\n2 1  # west\n0 0\n0 0\n"
        self.assertEqual(parse_puzzle(text).clues, (2, 1, 1, 2, 1, 2, 2, 1))

    def test_empty_text_is_zero_sized(self) -> None:
        puzzle = parse_puzzle("   \n")
        self.assertEqual(puzzle.size, 0)
        self.assertTrue(GridConfiguration.from_puzzle_data(puzzle).is_goal())

    def test_non_integer_token(self) -> None:
        with self.assertRaises(PuzzleFormatError):
            parse_puzzle("2\n2 x\n")

    def test_missing_values(self) -> None:
        with self.assertRaises(PuzzleFormatError):
            parse_puzzle("2\n2 1 1 2\n")

    def test_trailing_values(self) -> None:
        with self.assertRaises(PuzzleFormatError):
            parse_puzzle("1\n1 1 1 1\n0\n7\n")

    def test_dimension_out_of_range(self) -> None:
        with self.assertRaises(MalformedPuzzle):
            parse_puzzle("10\n")

    def test_value_ranges_checked_on_construction(self) -> None:
        puzzle = parse_puzzle("2\n2 1 1 2 1 2 2 1\n0 5\n0 0\n")
        with self.assertRaises(MalformedPuzzle):
            GridConfiguration.from_puzzle_data(puzzle)


class LoadPuzzleTests(unittest.TestCase):
    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "four.txt"
            path.write_text(FOUR_TEXT, encoding="utf-8")
            self.assertEqual(load_puzzle(path).size, 4)
            config = GridConfiguration.from_file(str(path))
            self.assertEqual(config.grid[1][1], 4)

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(PuzzleFormatError):
                load_puzzle(Path(tmpdir) / "absent.txt")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
