from typing import Dict, Iterable, List, Tuple

import pytest

from connectfour.debug import DebugLevel, debug
from connectfour.game.board import Board
from connectfour.game.engine import GameEngine, MoveResult
from connectfour.utils import Player


@pytest.fixture
def engine() -> GameEngine:
    return GameEngine()


@pytest.fixture
def play():
    """Drop a sequence of columns into an engine and return every result."""
    def _play(engine: GameEngine, columns: Iterable[int]) -> List[MoveResult]:
        return [engine.drop_piece(column) for column in columns]
    return _play


@pytest.fixture
def build_board():
    """
    Build a Board holding the given cells.

    Every cell below a requested cell in the same column is filled with
    ``filler`` so the position respects gravity.
    """
    def _build(cells: Dict[Tuple[int, int], Player], height: int = 6, width: int = 7,
               filler: Player = Player.TWO) -> Board:
        board = Board(height, width)
        for col in range(width):
            rows = [r for (r, c) in cells if c == col]
            if not rows:
                continue
            for row in range(height - 1, min(rows) - 1, -1):
                board.drop(col, cells.get((row, col), filler))
        return board
    return _build


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")
