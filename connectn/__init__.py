"""
connectn - Gravity-drop N-in-a-row game engine

This package provides an immutable board model with gravity placement and
line detection, a game timeline with undo/redo/restart, and a small terminal
front end for playing against another person.
"""

# Version number
__version__ = '0.1.0'

from connectn.errors import (CellOccupiedError, ConnectNError, InvalidColumnError,
                             InvalidDimensionError, InvalidPlayerMarksError, OutOfRangeError)
from connectn.game import Board, GameTimeline, Move
from connectn.utils import EMPTY, MoveOutcome

__all__ = [
    'Board', 'GameTimeline', 'Move', 'MoveOutcome', 'EMPTY',
    'ConnectNError', 'InvalidDimensionError', 'InvalidColumnError',
    'CellOccupiedError', 'OutOfRangeError', 'InvalidPlayerMarksError',
]
