"""
env.py - Gymnasium environment over the Connect Four engine

Lets any host loop that speaks the Gymnasium ``reset``/``step`` protocol
drive a GameEngine. Both players act through the same environment; the
reward is always from the point of view of the player who just moved.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.engine import GameEngine
from connectfour.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, MoveOutcome, Player


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the board as an ``int8`` array of Player values.
    An illegal action leaves the board untouched and truncates the episode.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 render_mode: Optional[str] = None):
        """
        Args:
            height: Number of board rows
            width: Number of board columns
            render_mode: None, "ascii" or "human"
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        # Validates the dimensions before any space is built
        self.engine = GameEngine(height, width)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(self.engine.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.engine.height, self.engine.width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

        debug.debug(f"Initialized {self.engine.height}x{self.engine.width} environment", "env")

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Args:
            seed: Seed for the environment's RNG
            options: Unused

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        self.engine = self.engine.reset()
        debug.debug("Environment reset", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player whose turn it is.

        Args:
            action: Column index

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.engine.drop_piece(action)

        if not result.accepted:
            debug.debug(f"Invalid action {action!r}: {result.outcome.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['rejection'] = result.outcome.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        terminated = result.is_terminal
        if result.outcome == MoveOutcome.WON:
            reward = self.reward_win
        elif result.outcome == MoveOutcome.DRAW:
            reward = self.reward_draw
        else:
            reward = self.reward_step

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.get_state().astype(np.int8)

    def _get_info(self) -> Dict:
        valid_moves = self.engine.valid_moves()
        winner = self.engine.winner
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.current_player.value,
            'status': self.engine.status.name,
            'winner': winner.value if winner is not None else None,
            'last_move': self.engine.last_move,
            'winning_line': list(self.engine.winning_cells),
        }

    def close(self):
        pass


def random_playout(env: ConnectFourEnv, seed: Optional[int] = None) -> Optional[Player]:
    """
    Play one game with uniformly random legal moves for both sides.

    Returns:
        The winning Player, or None for a draw
    """
    _, info = env.reset(seed=seed)
    terminated = False
    while not terminated:
        action = env.np_random.choice(info['valid_moves'])
        _, _, terminated, _, info = env.step(action)
    return env.engine.winner
