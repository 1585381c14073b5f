import unittest

from skyscraper.core.models import Cursor
from skyscraper.engine.cursor import advance, first_empty


class FirstEmptyTests(unittest.TestCase):
    def test_finds_first_empty_in_row_major_order(self) -> None:
        grid = ((1, 0, 0), (0, 0, 0), (0, 0, 0))
        self.assertEqual(first_empty(grid), Cursor(0, 1))

    def test_skips_filled_leading_rows(self) -> None:
        grid = ((1, 2), (0, 1))
        self.assertEqual(first_empty(grid), Cursor(1, 0))

    def test_full_grid_is_complete_on_last_cell(self) -> None:
        cursor = first_empty(((1, 2), (2, 1)))
        self.assertTrue(cursor.complete)
        self.assertEqual((cursor.row, cursor.col), (1, 1))

    def test_zero_sized_grid_is_complete(self) -> None:
        self.assertTrue(first_empty(()).complete)


class AdvanceTests(unittest.TestCase):
    def test_moves_to_next_cell(self) -> None:
        grid = ((1, 0, 0), (0, 0, 0), (0, 0, 0))
        self.assertEqual(advance(grid, Cursor(0, 0)), Cursor(0, 1))

    def test_wraps_to_next_row(self) -> None:
        grid = ((1, 2, 3), (0, 0, 0), (0, 0, 0))
        self.assertEqual(advance(grid, Cursor(0, 2)), Cursor(1, 0))

    def test_skips_filled_cells(self) -> None:
        grid = ((0, 2, 3), (1, 0, 0), (0, 0, 0))
        self.assertEqual(advance(grid, Cursor(0, 0)), Cursor(1, 1))

    def test_last_cell_becomes_complete(self) -> None:
        grid = ((1, 2), (2, 1))
        cursor = advance(grid, Cursor(1, 1))
        self.assertEqual(cursor, Cursor(1, 1, complete=True))

    def test_completes_when_only_filled_cells_remain(self) -> None:
        grid = ((0, 1), (1, 2))
        self.assertEqual(advance(grid, Cursor(0, 0)), Cursor(1, 1, complete=True))

    def test_complete_cursor_does_not_move(self) -> None:
        done = Cursor(1, 1, complete=True)
        self.assertIs(advance(((1, 2), (2, 1)), done), done)

    def test_advance_returns_new_value(self) -> None:
        grid = ((0, 0), (0, 0))
        start = Cursor(0, 0)
        moved = advance(grid, start)
        self.assertEqual(start, Cursor(0, 0))
        self.assertGreater(moved.index(2), start.index(2))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
