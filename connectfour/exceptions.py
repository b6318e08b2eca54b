"""
exceptions.py - Error types raised by the Connect Four engine
"""

from typing import Optional


class ConnectFourError(Exception):
    """Base class for every engine error."""


class InvalidDimensionsError(ConnectFourError, ValueError):
    """The board is too small (or not integral) to ever hold four in a row."""

    def __init__(self, height, width, minimum: int):
        self.height = height
        self.width = width
        self.minimum = minimum
        super().__init__(
            f"Board must be at least {minimum}x{minimum} integers, got {height!r}x{width!r}")


class CellOutOfRangeError(ConnectFourError, IndexError):
    def __init__(self, row, col, height: int, width: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row!r}, {col!r}) is outside a {height}x{width} board")


class MoveError(ConnectFourError):
    """A rejected ``drop_piece`` request. The board is unchanged."""

    def __init__(self, column, message: Optional[str] = None):
        self.column = column
        super().__init__(message or f"Move in column {column!r} rejected")


class ColumnOutOfRangeError(MoveError, IndexError):
    def __init__(self, column, width: Optional[int] = None):
        bound = f"[0, {width})" if width is not None else "the board"
        super().__init__(column, f"Column {column!r} is outside {bound}")


class ColumnFullError(MoveError):
    def __init__(self, column):
        super().__init__(column, f"Column {column} is full")


class GameAlreadyOverError(MoveError):
    def __init__(self, column):
        super().__init__(column, "The game is over; no further moves are accepted")
