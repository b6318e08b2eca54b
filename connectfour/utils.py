"""
utils.py - Constants, enumerations and helpers shared by the engine

Everything here is stateless: board dimensions are always passed in, never
read from module globals.
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = CONNECT_N  # Smaller boards can never be won


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``"Player 1"``."""
        if self == Player.EMPTY:
            return "Nobody"
        return f"Player {self.value}"

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Lifecycle of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class MoveOutcome(Enum):
    """What happened to a single ``drop_piece`` request."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()
    COLUMN_OUT_OF_RANGE = auto()
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()

    def is_rejection(self) -> bool:
        return self in (MoveOutcome.COLUMN_OUT_OF_RANGE,
                        MoveOutcome.COLUMN_FULL,
                        MoveOutcome.GAME_ALREADY_OVER)


class Direction(Enum):
    """Forward-only directions scanned for a run of four."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (row, col) steps. Row grows downwards, so every run has an anchor cell
# from which one of these steps walks the whole run.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """Check if a position is within a ``height`` x ``width`` board."""
    return 0 <= row < height and 0 <= col < width


def is_index(value) -> bool:
    """True for ints (numpy ints included) but not for bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: 2D array of ``Player`` values

    Returns:
        Multi-line string with the board framed and columns numbered
    """
    height, width = grid.shape
    inner = width * 2 - 1
    lines = ["|" + "-" * inner + "|"]

    for row in range(height):
        cells = [str(Player(int(grid[row, col]))) for col in range(width)]
        lines.append("|" + " ".join(cells) + "|")

    lines.append("|" + "-" * inner + "|")
    # Column numbers wider than one digit only keep their last digit
    lines.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(lines)
