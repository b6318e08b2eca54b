"""
board.py - Grid storage and win scanning for Connect Four

This module implements the Board class: a ``height`` x ``width`` grid that
only ever changes by dropping a piece into a column, plus the exhaustive
four-in-a-row scan used to decide wins.
"""

from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import (CellOutOfRangeError, ColumnFullError,
                                    ColumnOutOfRangeError, InvalidDimensionsError)
from connectfour.utils import (CONNECT_N, DEFAULT_HEIGHT, DEFAULT_WIDTH, DIRECTION_VECTORS,
                               MIN_DIMENSION, Player, is_index, is_valid_position,
                               render_board_ascii)

Position = Tuple[int, int]


class Board:
    """
    A Connect Four grid.

    Row 0 is the top of the board and row ``height - 1`` the bottom, so a
    dropped piece settles in the highest-numbered empty row of its column.
    Because ``drop`` is the only mutator, no empty cell ever sits below an
    occupied one.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Create an empty board.

        Args:
            height: Number of rows (at least four)
            width: Number of columns (at least four)

        Raises:
            InvalidDimensionsError: If either dimension cannot hold a run of four
        """
        if not (is_index(height) and is_index(width)) \
                or height < MIN_DIMENSION or width < MIN_DIMENSION:
            raise InvalidDimensionsError(height, width, MIN_DIMENSION)

        self.height = int(height)
        self.width = int(width)
        self._grid = np.zeros((self.height, self.width), dtype=int)
        debug.trace(f"Initialized {self.height}x{self.width} board", "board")

    def cell(self, row: int, col: int) -> Player:
        """
        Get the occupant of a cell.

        Raises:
            CellOutOfRangeError: If (row, col) is not on the board
        """
        if not (is_index(row) and is_index(col)) \
                or not is_valid_position(row, col, self.height, self.width):
            raise CellOutOfRangeError(row, col, self.height, self.width)
        return Player(int(self._grid[row, col]))

    def contains_column(self, column) -> bool:
        return is_index(column) and 0 <= column < self.width

    def find_spot(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped in ``column`` would land on.

        Returns:
            The lowest empty row, or None if the column is full
        """
        for row in range(self.height - 1, -1, -1):
            if self._grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def is_column_full(self, column: int) -> bool:
        return self._grid[0, column] != Player.EMPTY.value

    def is_top_row_full(self) -> bool:
        # Equivalent to a full board while the gravity invariant holds
        return bool(np.all(self._grid[0] != Player.EMPTY.value))

    def valid_columns(self) -> List[int]:
        return [col for col in range(self.width) if not self.is_column_full(col)]

    def drop(self, column: int, player: Player) -> int:
        """
        Drop a piece for ``player`` into ``column``.

        Args:
            column: Column index (0-indexed)
            player: Player.ONE or Player.TWO

        Returns:
            The row the piece settled in

        Raises:
            ColumnOutOfRangeError: If the column is not on the board
            ColumnFullError: If the column has no empty cell left
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot drop an empty piece")
        if not self.contains_column(column):
            raise ColumnOutOfRangeError(column, self.width)

        row = self.find_spot(column)
        if row is None:
            raise ColumnFullError(column)

        self._grid[row, column] = player.value
        debug.trace(f"Placed {player} at ({row}, {column})", "board")
        return row

    def _run_from(self, row: int, col: int, dr: int, dc: int,
                  player_value: int) -> Optional[List[Position]]:
        """Return the run of CONNECT_N cells from (row, col) if all belong to the player."""
        run = []
        for step in range(CONNECT_N):
            r, c = row + step * dr, col + step * dc
            if not is_valid_position(r, c, self.height, self.width):
                return None
            if self._grid[r, c] != player_value:
                return None
            run.append((r, c))
        return run

    def winning_line(self, player: Player) -> List[Position]:
        """
        Find a run of four cells owned by ``player``.

        Every cell is tried as the anchor of a run in each forward direction;
        the first complete run found is returned.

        Returns:
            List of (row, col) positions, or an empty list if there is none
        """
        if player == Player.EMPTY:
            return []

        for row in range(self.height):
            for col in range(self.width):
                if self._grid[row, col] != player.value:
                    continue
                for dr, dc in DIRECTION_VECTORS.values():
                    run = self._run_from(row, col, dr, dc, player.value)
                    if run:
                        return run
        return []

    def check_win(self, player: Player) -> bool:
        """Check whether ``player`` has four in a row anywhere on the board."""
        return bool(self.winning_line(player))

    def get_state(self) -> np.ndarray:
        """Return a copy of the grid as a 2D numpy array of Player values."""
        return self._grid.copy()

    def render(self) -> str:
        return render_board_ascii(self._grid)

    def __str__(self) -> str:
        return self.render()
