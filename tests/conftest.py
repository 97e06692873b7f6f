"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports, and the repo root for main.py
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(1, str(ROOT))

from game import (
    Board,
    Cell,
    GameSession,
    InMemoryStorage,
    MinesweeperEngine,
    EASY,
    generate_board,
)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source for reproducible boards."""
    return np.random.default_rng(1234)


@pytest.fixture
def easy_board(rng: np.random.Generator) -> Board:
    """Create a seeded easy 8x8 board with 10 mines."""
    return generate_board(8, 10, rng)


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Layout (M = mine):
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 M
    """
    return Board.from_mines(5, [24])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board whose middle column is all mines.

    Layout (M = mine):
        0 2 M 2 0
        0 3 M 3 0
        0 3 M 3 0
        0 3 M 3 0
        0 2 M 2 0
    """
    return Board.from_mines(5, [2, 7, 12, 17, 22])


@pytest.fixture
def top_left_mines_board() -> Board:
    """8x8 board with 10 mines, one of them at index 0."""
    return Board.from_mines(8, [0, 9, 18, 27, 36, 45, 54, 63, 7, 56])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_mine_count=3)
    cell.reveal()
    return cell


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def storage() -> InMemoryStorage:
    """Empty in-memory store."""
    return InMemoryStorage()


@pytest.fixture
def engine(storage: InMemoryStorage) -> MinesweeperEngine:
    """Engine over in-memory storage with a seeded random source."""
    return MinesweeperEngine(storage, rng=np.random.default_rng(99))


@pytest.fixture
def make_session(engine: MinesweeperEngine):
    """Factory for engine-wired sessions on a fixed board."""
    def _make(board: Board, difficulty=EASY) -> GameSession:
        session = engine.start_session(difficulty)
        session.board = board
        return session
    return _make
