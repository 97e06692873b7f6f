"""
Scoreboard module.

Keeps a bounded, descending top-N list of scores per difficulty.
Persistence is handled by a storage port outside this module.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .config import DEFAULT_SCORING


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    """A single recorded score."""

    name: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "score": self.score}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LeaderboardEntry":
        """
        Build an entry from its serialized form.

        Raises:
            KeyError: If name or score is missing.
            ValueError: If the score is not a finite number.
        """
        score = data["score"]
        if isinstance(score, float) and not math.isfinite(score):
            raise ValueError(f"Score must be finite, got {score}")
        return cls(name=str(data["name"]), score=int(score))


@dataclass
class Scoreboard:
    """
    Top-N leaderboard partitioned by difficulty.

    Every list is sorted descending by score and never longer than
    ``max_entries``. Among equal scores the most recently recorded entry
    comes first.
    """

    max_entries: int = DEFAULT_SCORING.leaderboard_size
    _entries: Dict[str, List[LeaderboardEntry]] = field(
        default_factory=dict, repr=False
    )

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, List[LeaderboardEntry]],
        max_entries: Optional[int] = None,
    ) -> "Scoreboard":
        """Build a scoreboard from previously stored lists."""
        scoreboard = cls(max_entries or DEFAULT_SCORING.leaderboard_size)
        for difficulty, entries in data.items():
            ranked = sorted(entries, key=lambda e: e.score, reverse=True)
            scoreboard._entries[difficulty] = ranked[:scoreboard.max_entries]
        return scoreboard

    def record_loss(
        self, difficulty: str, entry: LeaderboardEntry
    ) -> List[LeaderboardEntry]:
        """
        Insert an entry, re-sort and truncate.

        Args:
            difficulty: Difficulty the entry belongs to.
            entry: Score to record.

        Returns:
            The updated list for that difficulty.
        """
        # sorted() is stable, so putting the new entry first ranks it
        # ahead of existing entries with the same score
        updated = [entry] + self._entries.get(difficulty, [])
        updated = sorted(updated, key=lambda e: e.score, reverse=True)
        self._entries[difficulty] = updated[:self.max_entries]
        logger.debug(
            "Recorded %s=%d on %s leaderboard", entry.name, entry.score,
            difficulty,
        )
        return self.get_top(difficulty)

    def get_top(self, difficulty: str) -> List[LeaderboardEntry]:
        """Get up to ``max_entries`` entries for a difficulty, best first."""
        return list(self._entries.get(difficulty, []))

    def to_mapping(self) -> Dict[str, List[LeaderboardEntry]]:
        """Copy of all lists, keyed by difficulty."""
        return {
            difficulty: list(entries)
            for difficulty, entries in self._entries.items()
        }
