"""
Gymnasium environment wrapper for the Sweeper engine.

Exposes a ``Game`` through the standard RL interface so array-based
consumers can drive it with flat action indices.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .game import Game, GameConfig, SEED_BITS
from .grid import Position


# ============================================================================
# Sweeper Environment
# ============================================================================

class SweeperEnv(gym.Env):
    """
    Gymnasium environment for the Sweeper engine.

    Observation:
        2D array indexed [y, x] where:
        - -1 = unknown cell
        - -2 = flagged cell
        - 0-8 = opened cell with adjacent mine count
        - 9 = detonated mine

    Actions:
        Discrete action space of size width * height.
        Action i opens the cell at (i % width, i // width).

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a rejected action (off the board, already opened
          or flagged)
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        """
        Initialize the environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or GameConfig()
        self.game = Game(self.config)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed; the same seed reproduces the same layout
                for the same first action.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        layout_seed = int(self.np_random.integers(2 ** SEED_BITS))
        self.game = Game(self.config, seed=layout_seed)
        self._steps = 0

        return self.game.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Open the cell selected by ``action``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self.action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)

        terminated = self.game.finished
        truncated = False

        return self.game.observation(), reward, terminated, truncated, self._get_info()

    def action_to_position(self, action: int) -> Position:
        """Convert flat action index to (x, y) position."""
        return action % self.config.width, action // self.config.width

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return y * self.config.width + x

    def _calculate_reward(self, x: int, y: int) -> float:
        """Open a cell and score the outcome."""
        if self.game.finished:
            return 0.0
        if not self.game.contains(x, y):
            return -0.1
        if not self.game.knowledge_at(x, y).is_unknown:
            return -0.1

        self.game.open(x, y)

        if self.game.won:
            return 10.0
        if self.game.dead:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "opened": self.game.opened_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.game.state.name,
            "valid_actions": len(self.game.unknown_cells()),
        }

    def action_masks(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell can still be opened.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.game.unknown_cells():
            mask[self.position_to_action(x, y)] = True
        return mask
