"""
Engine-wide configuration.

Holds the scoring rules and default values shared by the session,
scoreboard, and engine facade.
"""
from dataclasses import dataclass

from .errors import InvalidConfiguration


# ============================================================================
# Constants
# ============================================================================

DEFAULT_DIFFICULTY = "Medium"
DEFAULT_PLAYER_NAME = "Anonymous"

# Above this mine density, mine placement shuffles instead of resampling
DENSE_BOARD_RATIO = 0.5


# ============================================================================
# Scoring Configuration
# ============================================================================

@dataclass(frozen=True)
class ScoringConfig:
    """
    Numeric scoring rules.

    Attributes:
        time_penalty_interval: Ticks between time penalties.
        time_penalty: Points deducted at each penalty.
        win_bonus_per_mine: Bonus per mine awarded on a win.
        leaderboard_size: Entries kept per difficulty.
    """

    time_penalty_interval: int = 15
    time_penalty: int = 1
    win_bonus_per_mine: int = 10
    leaderboard_size: int = 5

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.time_penalty_interval < 1:
            raise InvalidConfiguration("Time penalty interval must be positive")
        if self.leaderboard_size < 1:
            raise InvalidConfiguration("Leaderboard size must be positive")


DEFAULT_SCORING = ScoringConfig()
