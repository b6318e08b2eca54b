"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the game engine that owns
a game's state, and the Gymnasium environment built on top of it.
"""

from connectfour.game.board import Board
from connectfour.game.engine import GameEngine, MoveResult
from connectfour.game.env import ConnectFourEnv

__all__ = ['Board', 'GameEngine', 'MoveResult', 'ConnectFourEnv']
