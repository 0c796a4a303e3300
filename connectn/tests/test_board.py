"""
Tests for the immutable Board.

Tests:
- Construction and dimension validation
- Gravity (landing row)
- Placement and immutability
- Line detection in every direction and its scan order
"""

import numpy as np
import pytest

from ..errors import CellOccupiedError, InvalidColumnError, InvalidDimensionError
from ..game.board import Board
from ..utils import EMPTY


class TestCreate:
    """Tests for Board.create."""

    def test_all_cells_empty(self):
        board = Board.create(7, 6)
        assert board.width == 7
        assert board.height == 6
        assert board.win_length == 4
        assert all(cell is EMPTY for row in board.rows() for cell in row)

    @pytest.mark.parametrize("width,height", [(0, 6), (7, 0), (-1, 3), (3, -2)])
    def test_non_positive_dimensions_rejected(self, width, height):
        with pytest.raises(InvalidDimensionError):
            Board.create(width, height)

    def test_non_integer_dimension_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Board.create(7.5, 6)

    def test_invalid_dimension_is_value_error(self):
        with pytest.raises(ValueError):
            Board.create(0, 0)

    def test_single_cell_board(self):
        board = Board.create(1, 1, win_length=1)
        assert board.landing_row(0) == 0
        assert board.place(0, 0, "R").winner() == "R"

    def test_equal_boards(self):
        assert Board.create(7, 6) == Board.create(7, 6)
        assert Board.create(7, 6) != Board.create(6, 7)
        assert Board.create(7, 6, 4) != Board.create(7, 6, 5)
        assert hash(Board.create(4, 4)) == hash(Board.create(4, 4))


class TestLandingRow:
    """Tests for gravity placement."""

    def test_empty_column_lands_on_bottom(self, empty_board):
        assert empty_board.landing_row(3) == 5

    def test_lands_above_existing_pieces(self, make_board):
        board = make_board([
            "...",
            "...",
            ".Y.",
            ".R.",
        ])
        assert board.landing_row(1) == 1
        assert board.landing_row(0) == 3

    def test_returns_max_empty_row(self, make_board):
        # A floating piece does not stop the drop below it
        board = make_board([
            "R",
            ".",
            "Y",
            ".",
        ])
        assert board.landing_row(0) == 3

    def test_full_column(self, make_board):
        board = make_board([
            "R.",
            "Y.",
        ])
        assert board.landing_row(0) is None
        assert board.landing_row(1) == 1

    @pytest.mark.parametrize("column", [-1, 7, 100])
    def test_out_of_range_column(self, empty_board, column):
        assert empty_board.landing_row(column) is None
        assert not empty_board.is_valid_column(column)

    def test_valid_columns(self, make_board):
        board = make_board([
            "R.Y",
            "Y.R",
        ])
        assert board.valid_columns() == [1]
        assert not board.is_full()


class TestPlace:
    """Tests for Board.place."""

    def test_returns_new_board_with_mark(self, empty_board):
        board = empty_board.place(5, 2, "R")
        assert board.cell(5, 2) == "R"
        assert empty_board.cell(5, 2) is EMPTY

    def test_other_cells_unchanged(self, empty_board):
        source = empty_board.place(5, 0, "Y")
        result = source.place(5, 1, "R")
        for row in range(source.height):
            for col in range(source.width):
                if (row, col) != (5, 1):
                    assert result.cell(row, col) == source.cell(row, col)

    def test_occupied_cell_rejected(self, empty_board):
        board = empty_board.place(5, 0, "R")
        with pytest.raises(CellOccupiedError):
            board.place(5, 0, "Y")
        assert board.cell(5, 0) == "R"

    def test_invalid_column_rejected(self, empty_board):
        with pytest.raises(InvalidColumnError):
            empty_board.place(5, 7, "R")

    def test_invalid_row_rejected(self, empty_board):
        with pytest.raises(IndexError):
            empty_board.place(6, 0, "R")

    def test_empty_mark_rejected(self, empty_board):
        with pytest.raises(ValueError):
            empty_board.place(5, 0, EMPTY)

    def test_grid_is_read_only(self, empty_board):
        with pytest.raises(ValueError):
            empty_board.grid[0, 0] = "R"

    def test_snapshots_share_no_state(self, empty_board):
        first = empty_board.place(5, 0, "R")
        second = first.place(4, 0, "Y")
        assert not np.shares_memory(first.grid, second.grid)
        assert first.cell(4, 0) is EMPTY


class TestWinner:
    """Tests for line detection."""

    def test_empty_board_has_no_winner(self):
        for width, height, length in [(7, 6, 4), (2, 2, 2), (10, 3, 3)]:
            assert Board.create(width, height, length).winner() is None

    def test_horizontal(self, make_board):
        board = make_board([
            ".......",
            "YYY....",
            "RRRR...",
        ])
        assert board.winner() == "R"
        assert board.winning_line() == [(2, 0), (2, 1), (2, 2), (2, 3)]

    def test_vertical(self, make_board):
        board = make_board([
            "..Y",
            "..Y",
            "R.Y",
            "R.Y",
        ])
        assert board.winner() == "Y"
        assert board.winning_line() == [(0, 2), (1, 2), (2, 2), (3, 2)]

    def test_primary_diagonal(self, make_board):
        board = make_board([
            "......",
            "......",
            "..B...",
            "...B..",
            "....B.",
            ".....B",
        ])
        assert board.winner() == "B"

    @pytest.mark.parametrize("cell", [(2, 2), (3, 3), (4, 4), (5, 5)])
    def test_primary_diagonal_broken(self, cell):
        board = Board.create(7, 6)
        for pos in [(2, 2), (3, 3), (4, 4), (5, 5)]:
            if pos != cell:
                board = board.place(pos[0], pos[1], "B")
        assert board.winner() is None

    def test_secondary_diagonal(self, make_board):
        board = make_board([
            "....",
            "...R",
            "..R.",
            ".R..",
            "R...",
        ])
        assert board.winner() == "R"
        assert board.winning_line() == [(4, 0), (3, 1), (2, 2), (1, 3)]

    def test_secondary_diagonal_ending_on_top_row(self, make_board):
        board = make_board([
            "...Y",
            "..Y.",
            ".Y..",
            "Y...",
        ])
        assert board.winner() == "Y"

    def test_three_in_a_row_is_not_a_win(self, make_board):
        board = make_board([
            "R..R",
            "RRR.",
            "Y.YY",
        ])
        assert board.winner() is None

    def test_desired_length_override(self, make_board):
        board = make_board([
            "....",
            "RRR.",
        ])
        assert board.winner() is None
        assert board.winner(desired_length=3) == "R"

    def test_unsatisfiable_length(self, make_board):
        board = make_board([
            "RRR",
            "RRR",
        ], win_length=4)
        assert board.winner() is None
        assert board.winner(desired_length=0) is None

    @pytest.mark.parametrize("length", [2.5, "4", True])
    def test_non_integer_length_finds_no_win(self, make_board, length):
        board = make_board([
            "RRRR",
            "YYY.",
        ], win_length=length)
        assert board.winner() is None
        assert board.winning_line() == []
        assert board.winner(desired_length=4) == "R"

    def test_scan_order_tie_break(self, make_board):
        # Both players have a line; Y's starts on an earlier row
        board = make_board([
            "....",
            "YYYY",
            "....",
            "RRRR",
        ])
        assert board.winner() == "Y"

    def test_scan_order_prefers_earlier_column(self, make_board):
        board = make_board([
            "R...Y",
            "R...Y",
            "R...Y",
            "R...Y",
        ])
        assert board.winner() == "R"

    def test_full_board(self, make_board):
        board = make_board([
            "RYR",
            "YRY",
        ], win_length=3)
        assert board.is_full()
        assert board.valid_columns() == []
        assert board.winner() is None


class TestRender:

    def test_render_marks(self, make_board):
        text = make_board([
            "...",
            "RY.",
        ]).render()
        lines = text.splitlines()
        assert lines[2] == "|R Y  |"
        assert lines[-1] == "|0 1 2|"
