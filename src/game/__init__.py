"""
Minesweeper game engine.

Provides board generation, the reveal/flood-fill engine, the session
state machine, difficulty presets, and the per-difficulty scoreboard.
"""
from .errors import (
    MinesweeperError,
    InvalidConfiguration,
    IndexOutOfBounds,
    UnknownDifficulty,
)
from .config import ScoringConfig, DEFAULT_DIFFICULTY, DEFAULT_PLAYER_NAME
from .cell import Cell, CellState
from .difficulty import (
    DifficultyConfig,
    EASY,
    MEDIUM,
    HARD,
    PRESETS,
    get_difficulty,
    difficulty_names,
)
from .board import Board, generate_board, place_mines
from .reveal import RevealResult, reveal_cell, flood_fill
from .session import GamePhase, GameSession, start_session
from .scoreboard import LeaderboardEntry, Scoreboard
from .storage import StoragePort, InMemoryStorage, JsonFileStorage
from .engine import MinesweeperEngine
from .environment import MinesweeperEnv

__all__ = [
    "MinesweeperError",
    "InvalidConfiguration",
    "IndexOutOfBounds",
    "UnknownDifficulty",
    "ScoringConfig",
    "DEFAULT_DIFFICULTY",
    "DEFAULT_PLAYER_NAME",
    "Cell",
    "CellState",
    "DifficultyConfig",
    "EASY",
    "MEDIUM",
    "HARD",
    "PRESETS",
    "get_difficulty",
    "difficulty_names",
    "Board",
    "generate_board",
    "place_mines",
    "RevealResult",
    "reveal_cell",
    "flood_fill",
    "GamePhase",
    "GameSession",
    "start_session",
    "LeaderboardEntry",
    "Scoreboard",
    "StoragePort",
    "InMemoryStorage",
    "JsonFileStorage",
    "MinesweeperEngine",
    "MinesweeperEnv",
]
