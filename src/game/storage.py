"""
Storage port for process-wide state.

The engine loads the leaderboard and display name once through a
StoragePort and writes them back after every change. Corrupt stored
data is recovered here, never surfaced to the engine.
"""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

from .scoreboard import LeaderboardEntry


logger = logging.getLogger(__name__)

Leaderboard = Dict[str, List[LeaderboardEntry]]


# ============================================================================
# Storage Interface
# ============================================================================

class StoragePort(ABC):
    """Abstract store for the leaderboard and the player's display name."""

    @abstractmethod
    def load_leaderboard(self) -> Leaderboard:
        """Load stored leaderboard lists, or an empty mapping."""
        pass

    @abstractmethod
    def save_leaderboard(self, leaderboard: Leaderboard) -> None:
        """Persist all leaderboard lists."""
        pass

    @abstractmethod
    def load_player_name(self) -> str:
        """Load the stored display name, or an empty string."""
        pass

    @abstractmethod
    def save_player_name(self, name: str) -> None:
        """Persist the display name."""
        pass


# ============================================================================
# In-Memory Storage
# ============================================================================

class InMemoryStorage(StoragePort):
    """Storage that lives for the process only."""

    def __init__(self) -> None:
        self.leaderboard: Leaderboard = {}
        self.player_name = ""

    def load_leaderboard(self) -> Leaderboard:
        return {key: list(value) for key, value in self.leaderboard.items()}

    def save_leaderboard(self, leaderboard: Leaderboard) -> None:
        self.leaderboard = {key: list(value) for key, value in leaderboard.items()}

    def load_player_name(self) -> str:
        return self.player_name

    def save_player_name(self, name: str) -> None:
        self.player_name = name


# ============================================================================
# JSON File Storage
# ============================================================================

class JsonFileStorage(StoragePort):
    """
    Storage backed by a single JSON document.

    Layout::

        {
            "leaderboard": {"Easy": [{"name": "ann", "score": 12}, ...]},
            "username": "ann"
        }

    Missing or unreadable files load as empty state.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize the store.

        Args:
            path: Location of the JSON document.
        """
        self.path = Path(path)

    def load_leaderboard(self) -> Leaderboard:
        raw = self._read().get("leaderboard", {})
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed leaderboard in %s", self.path)
            return {}
        leaderboard: Leaderboard = {}
        try:
            for difficulty, entries in raw.items():
                leaderboard[str(difficulty)] = [
                    LeaderboardEntry.from_dict(entry) for entry in entries
                ]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring malformed leaderboard in %s: %s", self.path, e)
            return {}
        return leaderboard

    def save_leaderboard(self, leaderboard: Leaderboard) -> None:
        data = self._read()
        data["leaderboard"] = {
            difficulty: [entry.to_dict() for entry in entries]
            for difficulty, entries in leaderboard.items()
        }
        self._write(data)

    def load_player_name(self) -> str:
        name = self._read().get("username", "")
        if not isinstance(name, str):
            logger.warning("Ignoring malformed username in %s", self.path)
            return ""
        return name

    def save_player_name(self, name: str) -> None:
        data = self._read()
        data["username"] = name
        self._write(data)

    def _read(self) -> Dict[str, Any]:
        """Read the whole document, falling back to an empty one."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed storage file %s", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        """Write the whole document."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
