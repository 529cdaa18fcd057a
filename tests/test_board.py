import unittest

from tetris_board import new_board, collide, merge, sweep
from tetris_piece import Piece, COLS, ROWS


class CollideTests(unittest.TestCase):
    def setUp(self):
        self.board = new_board()

    def test_dimensions(self):
        self.assertEqual(len(self.board), ROWS)
        self.assertTrue(all(len(r) == COLS for r in self.board))

    def test_walls_and_floor(self):
        dot = [[1]]
        self.assertTrue(collide(self.board, dot, -1, 5))
        self.assertTrue(collide(self.board, dot, COLS, 5))
        self.assertTrue(collide(self.board, dot, 3, ROWS))
        self.assertFalse(collide(self.board, dot, 0, ROWS - 1))
        self.assertFalse(collide(self.board, dot, COLS - 1, 0))

    def test_walls_apply_above_the_top(self):
        self.assertTrue(collide(self.board, [[1]], -1, -3))
        self.assertTrue(collide(self.board, [[1]], COLS, -3))

    def test_empty_cells_of_shape_ignored(self):
        # the zero column may hang past the wall
        self.assertFalse(collide(self.board, [[1, 0]], COLS - 1, 0))

    def test_occupied_cell(self):
        self.board[10][4] = "T"
        self.assertTrue(collide(self.board, [[1, 1]], 3, 10))
        self.assertFalse(collide(self.board, [[1, 1]], 5, 10))

    def test_negative_rows_skip_occupancy(self):
        self.board[0][4] = "T"
        self.assertFalse(collide(self.board, [[1], [0]], 4, -1))
        self.assertTrue(collide(self.board, [[1], [1]], 4, -1))


class MergeSweepTests(unittest.TestCase):
    def test_merge_drops_cells_above_top(self):
        board = new_board()
        merge(board, Piece("O", [[1, 1], [1, 1]], 0, -1))
        self.assertEqual(board[0][:3], ["O", "O", None])
        self.assertTrue(all(c is None for r in board[1:] for c in r))

    def test_partial_row_kept(self):
        board = new_board()
        board[19] = ["I"] * (COLS - 1) + [None]
        self.assertEqual(sweep(board), [])
        self.assertEqual(board[19][0], "I")

    def test_full_rows_cleared_and_rows_shift(self):
        board = new_board()
        board[19] = ["I"] * COLS
        board[18] = ["J"] * COLS
        board[17][2] = "T"
        self.assertEqual(sweep(board), [19, 19])
        self.assertEqual(board[19][2], "T")
        self.assertTrue(all(c is None for r in board[:19] for c in r))
        self.assertEqual(len(board), ROWS)

    def test_non_adjacent_rows(self):
        board = new_board()
        board[19] = ["I"] * COLS
        board[18][0] = "L"
        board[17] = ["S"] * COLS
        self.assertEqual(sweep(board), [19, 18])
        self.assertEqual(board[19][0], "L")
        self.assertEqual(sum(c is not None for r in board for c in r), 1)


if __name__ == "__main__":
    unittest.main()
