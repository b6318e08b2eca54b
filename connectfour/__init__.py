"""
connectfour - Two-player Connect Four game engine

This package provides the game-state machine (board, legal moves, turn order,
win and draw detection) together with thin collaborators that drive it: a
Gymnasium environment and a terminal interface.
"""

from connectfour.game.engine import GameEngine, MoveResult
from connectfour.utils import GameStatus, MoveOutcome, Player

# Version number
__version__ = '0.1.0'

__all__ = ['GameEngine', 'MoveResult', 'GameStatus', 'MoveOutcome', 'Player']
