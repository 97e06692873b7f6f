"""
Engine facade for the presentation layer.

Wires process-wide state (leaderboard, display name, win counter) to
game sessions through an injected storage port.
"""
import logging
from typing import List, Optional, Union

import numpy as np

from .config import (
    DEFAULT_DIFFICULTY,
    DEFAULT_PLAYER_NAME,
    DEFAULT_SCORING,
    ScoringConfig,
)
from .difficulty import DifficultyConfig, get_difficulty
from .scoreboard import LeaderboardEntry, Scoreboard
from .session import GameSession, start_session
from .storage import InMemoryStorage, StoragePort


logger = logging.getLogger(__name__)


class MinesweeperEngine:
    """
    Entry point used by a presentation layer.

    Loads the leaderboard and display name once on construction and
    writes them back through the storage port after each change.
    Losses are recorded on the leaderboard; wins only bump the win
    counter.
    """

    def __init__(
        self,
        storage: Optional[StoragePort] = None,
        scoring: ScoringConfig = DEFAULT_SCORING,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            storage: Persistence port (default: in-memory only).
            scoring: Scoring rules for every session.
            rng: Random source for board generation.
        """
        self.storage = storage or InMemoryStorage()
        self.scoring = scoring
        self.rng = rng if rng is not None else np.random.default_rng()
        self.scoreboard = Scoreboard.from_mapping(
            self.storage.load_leaderboard(), scoring.leaderboard_size
        )
        self._player_name = self.storage.load_player_name()
        self.difficulty = get_difficulty(DEFAULT_DIFFICULTY)
        self.wins = 0

    # ========================================================================
    # Sessions
    # ========================================================================

    def start_session(
        self,
        difficulty: Union[str, DifficultyConfig, None] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> GameSession:
        """
        Start a new session.

        Args:
            difficulty: Preset name or configuration; None restarts on
                the most recently selected difficulty.
            rng: Random source for this board only (default: the
                engine's own generator).
        """
        if isinstance(difficulty, str):
            difficulty = get_difficulty(difficulty)
        if difficulty is not None:
            self.difficulty = difficulty
        return start_session(
            self.difficulty,
            rng=rng if rng is not None else self.rng,
            scoring=self.scoring,
            on_loss=self.record_loss,
            on_win=self.record_win,
        )

    def reveal(self, session: GameSession, index: int) -> GameSession:
        """Reveal a cell in a session."""
        return session.reveal(index)

    def toggle_flag(self, session: GameSession, index: int) -> GameSession:
        """Toggle a flag in a session."""
        return session.toggle_flag(index)

    def tick(self, session: GameSession) -> GameSession:
        """Advance a session's clock by one second."""
        return session.tick()

    # ========================================================================
    # Outcome Hooks
    # ========================================================================

    def record_loss(self, session: GameSession) -> None:
        """Put a lost session's score on its leaderboard and save it."""
        entry = LeaderboardEntry(self.player_name, session.score)
        self.scoreboard.record_loss(session.difficulty.name, entry)
        self.storage.save_leaderboard(self.scoreboard.to_mapping())

    def record_win(self, session: GameSession) -> None:
        """Count a won session. Wins are not put on the leaderboard."""
        self.wins += 1
        logger.debug("Win count now %d", self.wins)

    # ========================================================================
    # Process-wide State
    # ========================================================================

    def get_leaderboard(
        self, difficulty: Union[str, DifficultyConfig]
    ) -> List[LeaderboardEntry]:
        """Top scores for a difficulty, best first."""
        if isinstance(difficulty, str):
            difficulty = get_difficulty(difficulty)
        return self.scoreboard.get_top(difficulty.name)

    @property
    def player_name(self) -> str:
        """Display name used for leaderboard entries."""
        return self._player_name or DEFAULT_PLAYER_NAME

    @player_name.setter
    def player_name(self, name: str) -> None:
        self._player_name = name.strip()
        self.storage.save_player_name(self._player_name)
