"""
Base interface for automated players.

Agents drive the engine through MinesweeperEnv: they see the board as
an int8 observation and answer with the flat index of the cell to
reveal next.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Common plumbing for agents playing a square board.

    Subclasses only decide which cell to reveal; index conversion and
    mask recovery from an observation live here.
    """

    def __init__(self, board_size: int) -> None:
        """
        Initialize the agent.

        Args:
            board_size: Rows (and columns) of the difficulty being played.
        """
        self.board_size = board_size
        self.total_cells = board_size * board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick the next cell to reveal.

        Args:
            observation: size x size array from Board.get_observation.
            valid_actions: Mask from MinesweeperEnv.get_action_mask; when
                omitted, it is rebuilt from the observation.

        Returns:
            Flat cell index (row * size + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Flat cell index as (row, col), for logging moves."""
        return divmod(action, self.board_size)

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Rebuild the reveal mask from an observation.

        Negative codes mark hidden and flagged cells, both of which can
        still be revealed.
        """
        return observation.flatten() < 0

    def reset(self) -> None:
        """Forget per-game state before a new session starts."""
