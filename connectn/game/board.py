"""
board.py - Immutable board representation for the connectn engine

This module implements the Board class, a value object holding one grid
position. A Board answers where a dropped piece would land and whether any
player has completed a line, and produces a new Board for every placement.
"""

import numbers
from typing import Any, Hashable, List, Optional, Tuple

import numpy as np

from connectn.debug import debug
from connectn.errors import CellOccupiedError, InvalidColumnError, InvalidDimensionError
from connectn.utils import CONNECT_N, DIRECTION_VECTORS, EMPTY, render_board_ascii

Coord = Tuple[int, int]


class Board:
    """
    One position of a gravity-drop grid.

    Row 0 is the top of the board and row ``height - 1`` the bottom. The cell
    array is flagged read-only, so a Board never changes after construction;
    ``place`` copies the grid into a new Board instead.
    """

    def __init__(self, grid: np.ndarray, win_length: int = CONNECT_N):
        """
        Wrap an existing cell array. Use Board.create for an empty board.

        Args:
            grid: 2D object array of shape (height, width); taken over by the
                Board and made read-only
            win_length: Number of aligned pieces that wins
        """
        if grid.ndim != 2 or grid.shape[0] < 1 or grid.shape[1] < 1:
            raise InvalidDimensionError(f"Board grid must be a non-empty 2D array, got shape {grid.shape}")

        grid.setflags(write=False)
        self._grid = grid
        self._win_length = win_length

    @classmethod
    def create(cls, width: int, height: int, win_length: int = CONNECT_N) -> 'Board':
        """
        Create a board with every cell empty.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            win_length: Number of aligned pieces that wins

        Returns:
            A new empty Board

        Raises:
            InvalidDimensionError: If width or height is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
                raise InvalidDimensionError(f"Board {name} must be a positive integer, got {value!r}")

        debug.debug(f"Creating empty {width}x{height} board (win length {win_length})", "board")
        return cls(np.full((int(height), int(width)), EMPTY, dtype=object), win_length)

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def height(self) -> int:
        return self._grid.shape[0]

    @property
    def win_length(self) -> int:
        return self._win_length

    @property
    def grid(self) -> np.ndarray:
        """The read-only cell array."""
        return self._grid

    def cell(self, row: int, column: int) -> Any:
        """Contents of one cell (EMPTY or a player mark)."""
        return self._grid[row, column]

    def rows(self) -> Tuple[Tuple[Any, ...], ...]:
        """The grid as nested tuples, top row first."""
        return tuple(tuple(row) for row in self._grid)

    def is_valid_column(self, column: int) -> bool:
        return isinstance(column, numbers.Integral) and 0 <= column < self.width

    def landing_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into a column would come to rest.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The highest-index empty row in that column, or None if the column
            is full or out of range
        """
        if not self.is_valid_column(column):
            debug.trace(f"Column {column} out of range for width {self.width}", "board")
            return None

        for row in range(self.height - 1, -1, -1):
            if self._grid[row, column] is EMPTY:
                return row

        return None

    def valid_columns(self) -> List[int]:
        """Columns that still have room for a piece."""
        return [col for col in range(self.width) if self.landing_row(col) is not None]

    def is_full(self) -> bool:
        return all(cell is not EMPTY for cell in self._grid.flat)

    def place(self, row: int, column: int, mark: Hashable) -> 'Board':
        """
        Put a mark on one cell.

        Args:
            row: Target row, normally obtained from landing_row
            column: Target column
            mark: The player mark to place

        Returns:
            A new Board; the receiver is left untouched

        Raises:
            InvalidColumnError: If column is out of range
            IndexError: If row is out of range
            CellOccupiedError: If the target cell already holds a mark
            ValueError: If mark is the empty cell value
        """
        if mark is EMPTY:
            raise ValueError("Cannot place the empty cell value as a mark")
        if not self.is_valid_column(column):
            raise InvalidColumnError(f"Column {column} out of range for width {self.width}")
        if not (isinstance(row, numbers.Integral) and 0 <= row < self.height):
            raise IndexError(f"Row {row} out of range for height {self.height}")

        occupant = self._grid[row, column]
        if occupant is not EMPTY:
            raise CellOccupiedError(f"Cell ({row}, {column}) is already occupied by {occupant!r}")

        new_grid = self._grid.copy()
        new_grid[row, column] = mark
        debug.trace(f"Placed {mark!r} at ({row}, {column})", "board")
        return Board(new_grid, self._win_length)

    def winning_line(self, desired_length: Optional[int] = None) -> List[Coord]:
        """
        Find the first completed line on the board.

        Every cell is tried as the start of a segment, rows top to bottom and
        columns left to right, and at each cell the directions in
        DIRECTION_VECTORS order. Segments that would leave the grid are skipped.

        Args:
            desired_length: Line length to look for (defaults to win_length)

        Returns:
            The (row, col) positions of the first line held entirely by one
            player, or an empty list if there is none
        """
        length = self._win_length if desired_length is None else desired_length
        if isinstance(length, bool) or not isinstance(length, numbers.Integral) or length < 1:
            return []

        height, width = self._grid.shape
        for row in range(height):
            for col in range(width):
                mark = self._grid[row, col]
                if mark is EMPTY:
                    continue

                for dr, dc in DIRECTION_VECTORS.values():
                    end_row = row + dr * (length - 1)
                    end_col = col + dc * (length - 1)
                    if not (0 <= end_row < height and 0 <= end_col < width):
                        continue

                    line = [(row + dr * i, col + dc * i) for i in range(length)]
                    if all(self._grid[r, c] == mark for r, c in line):
                        debug.debug(f"Line of {length} for {mark!r} starting at ({row}, {col})", "board")
                        return line

        return []

    def winner(self, desired_length: Optional[int] = None) -> Optional[Hashable]:
        """
        Get the player holding the first completed line.

        Returns:
            The winning mark, or None if no line is complete
        """
        line = self.winning_line(desired_length)
        if not line:
            return None
        row, col = line[0]
        return self._grid[row, col]

    def render(self) -> str:
        return render_board_ascii(self.rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, win_length={self._win_length})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._win_length == other._win_length
                and self._grid.shape == other._grid.shape
                and self.rows() == other.rows())

    def __hash__(self) -> int:
        return hash((self._win_length, self.rows()))
