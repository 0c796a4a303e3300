"""
connectn.game - Core game mechanics

This package contains the board representation and the game timeline.
"""

from connectn.game.board import Board
from connectn.game.timeline import GameTimeline, Move

__all__ = ['Board', 'GameTimeline', 'Move']
