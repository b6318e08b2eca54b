"""
engine.py - Game state machine for Connect Four

This module provides the GameEngine, the single owner of a game's board,
turn order and status, and MoveResult, the typed answer to every move
request.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import (ColumnFullError, ColumnOutOfRangeError,
                                    GameAlreadyOverError)
from connectfour.game.board import Board
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, GameStatus, MoveOutcome, Player


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single ``GameEngine.drop_piece`` call.

    Attributes:
        accepted: Whether a piece was placed
        column: The requested column
        player: The player who moved (or who attempted to)
        outcome: Game progress after the move, or the rejection reason
        row: Row the piece landed in; None when rejected
        winning_line: Cells of the winning run when ``outcome`` is WON
    """
    accepted: bool
    column: int
    player: Player
    outcome: MoveOutcome
    row: Optional[int] = None
    winning_line: Tuple[Tuple[int, int], ...] = ()

    @property
    def is_terminal(self) -> bool:
        return self.outcome in (MoveOutcome.WON, MoveOutcome.DRAW)

    def raise_for_outcome(self) -> 'MoveResult':
        """
        Raise the matching MoveError if the move was rejected.

        Returns:
            self, so accepted results can be chained
        """
        if self.outcome == MoveOutcome.COLUMN_OUT_OF_RANGE:
            raise ColumnOutOfRangeError(self.column)
        if self.outcome == MoveOutcome.COLUMN_FULL:
            raise ColumnFullError(self.column)
        if self.outcome == MoveOutcome.GAME_ALREADY_OVER:
            raise GameAlreadyOverError(self.column)
        return self


class GameEngine:
    """
    Sole authority over a Connect Four game.

    Player ONE moves first. The engine switches players after every accepted
    move that does not end the game; after a win the winner stays the
    current player. Once the status is WON or DRAW no further moves are
    accepted.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Start a new game on an empty board.

        Raises:
            InvalidDimensionsError: If height or width is below four
        """
        self._board = Board(height, width)
        self._current_player = Player.ONE
        self._status = GameStatus.IN_PROGRESS
        self._winner: Optional[Player] = None
        self._winning_line: Tuple[Tuple[int, int], ...] = ()
        self._last_move: Optional[Tuple[int, int]] = None
        debug.debug(f"New {self.height}x{self.width} game", "engine")

    @property
    def height(self) -> int:
        return self._board.height

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        return self._last_move

    @property
    def winning_cells(self) -> Tuple[Tuple[int, int], ...]:
        return self._winning_line

    def is_game_over(self) -> bool:
        return self._status.is_terminal()

    def cell_at(self, row: int, col: int) -> Player:
        return self._board.cell(row, col)

    def valid_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return self._board.valid_columns()

    def _reject(self, column, outcome: MoveOutcome) -> MoveResult:
        debug.debug(f"Rejected move by {self._current_player.label} "
                    f"in column {column!r}: {outcome.name}", "engine")
        return MoveResult(accepted=False, column=column,
                          player=self._current_player, outcome=outcome)

    def drop_piece(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Rejections never change the game; the reason is reported through
        ``MoveResult.outcome``.

        Args:
            column: Column index (0-indexed)

        Returns:
            MoveResult describing the placement and the game's progress
        """
        if not self._board.contains_column(column):
            return self._reject(column, MoveOutcome.COLUMN_OUT_OF_RANGE)
        if self.is_game_over():
            return self._reject(column, MoveOutcome.GAME_ALREADY_OVER)
        if self._board.is_column_full(column):
            return self._reject(column, MoveOutcome.COLUMN_FULL)

        player = self._current_player
        row = self._board.drop(column, player)
        self._last_move = (row, column)

        debug.start_timer("win_check")
        line = self.winning_line(player)
        debug.end_timer("win_check", "engine")

        if line:
            self._status = GameStatus.WON
            self._winner = player
            self._winning_line = line
            debug.info(f"{player.label} wins with {list(line)}", "engine")
            return MoveResult(accepted=True, column=column, player=player,
                              outcome=MoveOutcome.WON, row=row, winning_line=line)

        if self._board.is_top_row_full():
            self._status = GameStatus.DRAW
            debug.info("Game ends in a draw", "engine")
            return MoveResult(accepted=True, column=column, player=player,
                              outcome=MoveOutcome.DRAW, row=row)

        self._current_player = player.other()
        debug.debug(f"{player.label} played ({row}, {column}); "
                    f"{self._current_player.label} to move", "engine")
        return MoveResult(accepted=True, column=column, player=player,
                          outcome=MoveOutcome.IN_PROGRESS, row=row)

    def check_win(self, player: Player) -> bool:
        """Check whether ``player`` has four in a row anywhere on the board."""
        return self._board.check_win(player)

    def winning_line(self, player: Player) -> Tuple[Tuple[int, int], ...]:
        """Coordinates of the first four-in-a-row found for ``player``, or ()."""
        return tuple(self._board.winning_line(player))

    def reset(self, height: Optional[int] = None, width: Optional[int] = None) -> 'GameEngine':
        """
        Start over with a brand new engine.

        Args:
            height: New number of rows (defaults to the current one)
            width: New number of columns (defaults to the current one)

        Returns:
            A fresh GameEngine; this instance is left as it was
        """
        return GameEngine(self.height if height is None else height,
                          self.width if width is None else width)

    def get_state(self) -> np.ndarray:
        """Copy of the grid; changing it does not affect the game."""
        return self._board.get_state()

    def render(self) -> str:
        return self._board.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"GameEngine(height={self.height}, width={self.width}, "
                f"current_player={self._current_player.name}, status={self._status.name})")
