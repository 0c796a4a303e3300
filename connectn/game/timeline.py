"""
timeline.py - Game session management for the connectn engine

This module provides GameTimeline, which keeps every board position of a game
in order together with a cursor into that history. Playing from a past
position discards the positions after it, so undo/redo behave like an editor
history.
"""

import numbers
from typing import Hashable, List, NamedTuple, Optional, Sequence, Tuple

from connectn.debug import debug
from connectn.errors import InvalidPlayerMarksError, OutOfRangeError
from connectn.game.board import Board
from connectn.utils import (CONNECT_N, DEFAULT_HEIGHT, DEFAULT_PLAYER_MARKS, DEFAULT_WIDTH,
                            EMPTY, MoveOutcome)


class Move(NamedTuple):
    """A single placement; moves[i] turned history[i] into history[i + 1]."""
    row: int
    column: int
    mark: Hashable


class GameTimeline:
    """
    Ordered board snapshots plus the index of the one in play.

    The player to move is derived from the cursor alone:
    ``player_marks[current_move % len(player_marks)]``.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 win_length: int = CONNECT_N,
                 player_marks: Sequence[Hashable] = DEFAULT_PLAYER_MARKS,
                 block_after_win: bool = True):
        """
        Start a game on an empty board.

        Args:
            width: Number of columns
            height: Number of rows
            win_length: Number of aligned pieces that wins
            player_marks: Marks in turn order; at least two, all distinct
            block_after_win: Refuse further moves once someone has won

        Raises:
            InvalidDimensionError: If width or height is not a positive integer
            InvalidPlayerMarksError: If player_marks is unusable as a turn order
        """
        self._player_marks = self._validate_marks(player_marks)
        self._block_after_win = block_after_win
        self._history: List[Board] = [Board.create(width, height, win_length)]
        self._moves: List[Move] = []
        self._current_move = 0
        debug.info(f"New {width}x{height} game, {win_length} to win, players {list(self._player_marks)}",
                   "timeline")

    @staticmethod
    def _validate_marks(player_marks: Sequence[Hashable]) -> Tuple[Hashable, ...]:
        marks = tuple(player_marks)
        if len(marks) < 2:
            raise InvalidPlayerMarksError(f"At least two player marks are required, got {len(marks)}")
        if any(mark is EMPTY for mark in marks):
            raise InvalidPlayerMarksError("A player mark cannot be the empty cell value")
        try:
            distinct = len(set(marks)) == len(marks)
        except TypeError as e:
            raise InvalidPlayerMarksError(f"Player marks must be hashable: {e}") from e
        if not distinct:
            raise InvalidPlayerMarksError(f"Player marks must be distinct, got {list(marks)}")
        return marks

    # Query surface

    @property
    def current_move(self) -> int:
        return self._current_move

    @property
    def history_length(self) -> int:
        return len(self._history)

    def __len__(self) -> int:
        return len(self._history)

    @property
    def history(self) -> Tuple[Board, ...]:
        return tuple(self._history)

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def player_marks(self) -> Tuple[Hashable, ...]:
        return self._player_marks

    @property
    def block_after_win(self) -> bool:
        return self._block_after_win

    @property
    def width(self) -> int:
        return self._history[0].width

    @property
    def height(self) -> int:
        return self._history[0].height

    @property
    def win_length(self) -> int:
        return self._history[0].win_length

    @property
    def can_undo(self) -> bool:
        return self._current_move > 0

    @property
    def can_redo(self) -> bool:
        return self._current_move < len(self._history) - 1

    @property
    def last_move(self) -> Optional[Move]:
        """The move that produced the current board, or None at the start."""
        if self._current_move == 0:
            return None
        return self._moves[self._current_move - 1]

    def current_board(self) -> Board:
        return self._history[self._current_move]

    def current_player(self) -> Hashable:
        return self._player_marks[self._current_move % len(self._player_marks)]

    def winner(self) -> Optional[Hashable]:
        return self.current_board().winner()

    def is_decided(self) -> bool:
        return self.winner() is not None

    def is_draw(self) -> bool:
        """Check if the current board is full without a completed line."""
        board = self.current_board()
        return board.is_full() and board.winner() is None

    def valid_columns(self) -> List[int]:
        """Columns play() would currently accept."""
        if self._block_after_win and self.is_decided():
            return []
        return self.current_board().valid_columns()

    # Command surface

    def play(self, column: int) -> MoveOutcome:
        """
        Drop the current player's piece into a column.

        A move made from a past position discards every later position.

        Args:
            column: The column to play (0-indexed)

        Returns:
            MoveOutcome.PLAYED on success; any other outcome leaves the
            timeline unchanged
        """
        board = self.current_board()

        if self._block_after_win and board.winner() is not None:
            debug.debug(f"Ignoring move in column {column}: game already won", "timeline")
            return MoveOutcome.GAME_OVER

        if not board.is_valid_column(column):
            debug.debug(f"Ignoring move in column {column}: out of range", "timeline")
            return MoveOutcome.INVALID_COLUMN

        row = board.landing_row(column)
        if row is None:
            debug.debug(f"Ignoring move in column {column}: column full", "timeline")
            return MoveOutcome.COLUMN_FULL

        mark = self.current_player()
        new_board = board.place(row, column, mark)

        discarded = len(self._history) - 1 - self._current_move
        if discarded:
            debug.debug(f"Discarding {discarded} redo position(s)", "timeline")
        del self._history[self._current_move + 1:]
        del self._moves[self._current_move:]

        self._history.append(new_board)
        self._moves.append(Move(row, column, mark))
        self._current_move = len(self._history) - 1
        debug.debug(f"Move {self._current_move}: {mark!r} at ({row}, {column})", "timeline")

        debug.start_timer("win_check")
        winner = new_board.winner()
        debug.end_timer("win_check", "timeline")
        if winner is not None:
            debug.info(f"Player {winner!r} wins after move {self._current_move}", "timeline")

        return MoveOutcome.PLAYED

    def jump_to(self, index: int) -> None:
        """
        Move the cursor to a recorded position without altering the history.

        Raises:
            OutOfRangeError: If index is not an integer in [0, history_length)
        """
        if isinstance(index, bool) or not isinstance(index, numbers.Integral) \
                or not 0 <= index < len(self._history):
            debug.warning(f"Jump to {index} outside history of length {len(self._history)}", "timeline")
            raise OutOfRangeError(f"Move index {index} outside [0, {len(self._history)})")

        self._current_move = index
        debug.debug(f"Cursor at move {index}", "timeline")

    def undo(self) -> bool:
        """Step back one position; returns False at the start of history."""
        if not self.can_undo:
            debug.debug("Nothing to undo", "timeline")
            return False
        self.jump_to(self._current_move - 1)
        return True

    def redo(self) -> bool:
        """Step forward one position; returns False at the end of history."""
        if not self.can_redo:
            debug.debug("Nothing to redo", "timeline")
            return False
        self.jump_to(self._current_move + 1)
        return True

    def restart(self) -> None:
        """Go back to the empty board, keeping dimensions and players."""
        debug.debug("Restarting game", "timeline")
        del self._history[1:]
        self._moves.clear()
        self._current_move = 0

    def render(self) -> str:
        return self.current_board().render()
