"""
Gymnasium environment wrapper for Minesweeper.

Lets automated agents play engine sessions through a standard RL
interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .difficulty import DifficultyConfig, get_difficulty
from .engine import MinesweeperEngine
from .session import GameSession


# ============================================================================
# Constants
# ============================================================================

LOSS_PENALTY = 10.0
INVALID_ACTION_PENALTY = 0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size size * size.
        Action i reveals the cell with flat index i.

    Rewards:
        - The change in session score (cells revealed, win bonus)
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Union[str, DifficultyConfig] = "Easy",
        engine: Optional[MinesweeperEngine] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Preset name or configuration to play.
            engine: Engine whose leaderboard records the games
                (default: a private in-memory engine).
            render_mode: How to render the environment.
        """
        super().__init__()

        if isinstance(difficulty, str):
            difficulty = get_difficulty(difficulty)
        self.difficulty = difficulty
        self.engine = engine or MinesweeperEngine()
        self.render_mode = render_mode
        self.session: Optional[GameSession] = None

        size = difficulty.size
        self.observation_space = spaces.Box(
            low=-2, high=9, shape=(size, size), dtype=np.int8,
        )
        self.action_space = spaces.Discrete(difficulty.cell_count)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new session for a new episode.

        Args:
            seed: Seed for the environment's own generator, which
                draws every board this environment plays. The engine's
                generator is left alone.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = self.engine.start_session(
            self.difficulty, rng=self.np_random
        )
        self._steps = 0
        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Flat cell index to reveal.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.session is None:
            raise RuntimeError("Call reset() before step()")
        self._steps += 1
        reward = self._calculate_reward(int(action))
        observation = self.session.board.get_observation()
        terminated = self.session.is_terminal
        return observation, reward, terminated, False, self._get_info()

    def _calculate_reward(self, index: int) -> float:
        """Apply a reveal and turn its effect into a reward."""
        session = self.session
        cell = session.board.get_cell(index)
        if session.is_terminal or cell.is_revealed:
            return -INVALID_ACTION_PENALTY

        score_before = session.score
        session.reveal(index)
        if session.is_lost:
            return -LOSS_PENALTY
        return float(session.score - score_before)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "revealed": board.revealed_count,
            "total_safe": board.cell_count - board.num_mines,
            "score": self.session.score,
            "game_state": self.session.phase.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        symbols = {-1: ".", -2: "F", 9: "*", 0: " "}
        obs = self.session.board.get_observation()
        return "\n".join(
            " ".join(symbols.get(int(val), str(val)) for val in row)
            for row in obs
        )

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell not yet revealed.
        """
        return np.array(
            [not cell.is_revealed for cell in self.session.board.cells],
            dtype=bool,
        )
