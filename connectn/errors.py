"""
errors.py - Exception taxonomy for the connectn engine

Every error derives from ConnectNError and from the builtin it specialises,
so callers may catch either the package base class or e.g. ValueError.
"""


class ConnectNError(Exception):
    """Base class for all engine errors."""


class InvalidDimensionError(ConnectNError, ValueError):
    """A board was requested with a non-positive or non-integer width/height."""


class InvalidColumnError(ConnectNError, IndexError):
    """A column index lies outside [0, width)."""


class CellOccupiedError(ConnectNError, ValueError):
    """A piece was placed on a cell that already holds a mark."""


class OutOfRangeError(ConnectNError, IndexError):
    """A history index lies outside the recorded timeline."""


class InvalidPlayerMarksError(ConnectNError, ValueError):
    """The turn order is too short, repeats a mark, or contains the empty cell."""
