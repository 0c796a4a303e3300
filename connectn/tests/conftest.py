"""
Pytest fixtures for connectn tests.
"""

from typing import Callable, List, Sequence

import numpy as np
import pytest

from ..game.board import Board
from ..game.timeline import GameTimeline
from ..utils import EMPTY


def board_from_rows(rows: Sequence[str], win_length: int = 4) -> Board:
    """Build a board from strings, one per row, top row first; '.' is empty."""
    grid = np.array([[EMPTY if ch == '.' else ch for ch in row] for row in rows], dtype=object)
    return Board(grid, win_length)


@pytest.fixture
def make_board() -> Callable[..., Board]:
    return board_from_rows


@pytest.fixture
def empty_board() -> Board:
    """Standard 7x6 board, four to win."""
    return Board.create(7, 6, 4)


@pytest.fixture
def timeline() -> GameTimeline:
    """Standard two-player game with Red moving first."""
    return GameTimeline(7, 6, 4, ["R", "Y"])


@pytest.fixture
def play_all() -> Callable[[GameTimeline, Sequence[int]], List]:
    """Play a column sequence and return the outcomes."""
    def _play(game: GameTimeline, columns: Sequence[int]) -> List:
        return [game.play(col) for col in columns]
    return _play
