"""
utils.py - Constants, enumerations and helpers shared by the connectn engine

This module holds the default game parameters, the direction vectors used for
line detection, the outcome enumeration returned by GameTimeline.play and the
ASCII renderer used by Board.render and the terminal front end.
"""

from enum import Enum, auto
from typing import Any, Dict, Hashable, Sequence, Tuple

# Game defaults
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win
DEFAULT_PLAYER_MARKS: Tuple[Hashable, ...] = ("R", "Y")

# Display names for the classic red/yellow/black marks
PLAYER_NAMES: Dict[Hashable, str] = {
    "R": "Red",
    "Y": "Yellow",
    "B": "Black",
}

# Content of a cell nobody has played into
EMPTY = None


class MoveOutcome(Enum):
    """Result of GameTimeline.play."""
    PLAYED = auto()
    GAME_OVER = auto()       # a winner exists and play is blocked
    INVALID_COLUMN = auto()  # column outside [0, width)
    COLUMN_FULL = auto()

    def is_success(self) -> bool:
        """Check if the move changed the timeline."""
        return self is MoveOutcome.PLAYED


class Direction(Enum):
    """Line directions, in the order the win scan tries them."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # bottom-left to top-right


# Direction vectors (row, col); dict order is the scan order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


def player_name(mark: Any) -> str:
    """Human-readable name for a mark, falling back to the mark itself."""
    try:
        return PLAYER_NAMES.get(mark, str(mark))
    except TypeError:
        return str(mark)


def mark_symbol(mark: Any) -> str:
    """
    Single character used to draw a mark on the ASCII board.

    Marks that share a first character render identically; the CLI refuses
    such player lists, other callers should pick distinguishable marks.
    """
    if mark is EMPTY:
        return " "
    text = str(mark)
    return text[0] if text else "?"


def render_board_ascii(rows: Sequence[Sequence[Any]]) -> str:
    """
    Render a grid of cells as ASCII art.

    Args:
        rows: Cell contents, row 0 first (top of the board)

    Returns:
        ASCII representation with column numbers underneath
    """
    width = len(rows[0]) if rows else 0
    border = "|" + "-" * (width * 2 - 1) + "|"

    result = [border]
    for row in rows:
        result.append("|" + " ".join(mark_symbol(cell) for cell in row) + "|")
    result.append(border)

    # Column numbers wrap after 9 so wide boards stay aligned
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)
