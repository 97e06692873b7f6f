"""
Game session state machine.

A session owns one board and moves through
IDLE -> RUNNING -> WON | LOST. Terminal sessions ignore every further
action; only a new session starts play again.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Union

import numpy as np

from .board import Board, generate_board
from .config import DEFAULT_SCORING, ScoringConfig
from .difficulty import DifficultyConfig, get_difficulty
from .reveal import reveal_cell


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Possible phases of a session."""

    IDLE = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()


SessionHook = Callable[["GameSession"], None]


# ============================================================================
# Session Class
# ============================================================================

@dataclass
class GameSession:
    """
    One play-through on a single board.

    Operations mutate the session in place and return it, so callers
    may chain or ignore the return value.

    Attributes:
        board: The board being played.
        difficulty: Difficulty the board was built from.
        scoring: Scoring rules in effect.
        phase: Current phase.
        elapsed_seconds: Ticks received while running.
        score: Current score; may go negative from time penalties.
        on_loss: Called once when the session is lost.
        on_win: Called once when the session is won.
    """

    board: Board
    difficulty: DifficultyConfig
    scoring: ScoringConfig = DEFAULT_SCORING
    phase: GamePhase = GamePhase.IDLE
    elapsed_seconds: int = 0
    score: int = 0
    on_loss: Optional[SessionHook] = field(default=None, repr=False)
    on_win: Optional[SessionHook] = field(default=None, repr=False)

    # ========================================================================
    # Actions
    # ========================================================================

    def reveal(self, index: int) -> "GameSession":
        """
        Reveal a cell.

        Does nothing once the session is over or if the cell is already
        revealed. A mine loses the game and uncovers every mine. A safe
        reveal scores one point per newly revealed cell and may win.

        Raises:
            IndexOutOfBounds: If the index is outside the board.
        """
        self.board.check_index(index)
        if self.is_terminal or self.board.cells[index].is_revealed:
            return self
        self._start_running()

        result = reveal_cell(self.board, index)
        self.board = result.board

        if result.hit_mine:
            self._lose()
            return self

        self.score += result.newly_revealed
        if self.board.is_cleared:
            self._win()
        return self

    def toggle_flag(self, index: int) -> "GameSession":
        """
        Flag or unflag a hidden cell.

        Does nothing once the session is over or if the cell is revealed.

        Raises:
            IndexOutOfBounds: If the index is outside the board.
        """
        self.board.check_index(index)
        if self.is_terminal or self.board.cells[index].is_revealed:
            return self
        self._start_running()
        self.board.cells[index].toggle_flag()
        return self

    def tick(self) -> "GameSession":
        """Advance the clock by one second while running."""
        if self.phase != GamePhase.RUNNING:
            return self
        self.elapsed_seconds += 1
        if self.elapsed_seconds % self.scoring.time_penalty_interval == 0:
            self.score -= self.scoring.time_penalty
        return self

    # ========================================================================
    # Transitions
    # ========================================================================

    def _start_running(self) -> None:
        """Leave the idle phase on the first action."""
        if self.phase == GamePhase.IDLE:
            self.phase = GamePhase.RUNNING

    def _lose(self) -> None:
        """Enter the lost phase and uncover all mines."""
        self.phase = GamePhase.LOST
        self.board.reveal_mines()
        logger.info(
            "Lost on %s with score %d after %ds",
            self.difficulty.name, self.score, self.elapsed_seconds,
        )
        if self.on_loss:
            self.on_loss(self)

    def _win(self) -> None:
        """Enter the won phase and add the mine bonus."""
        self.phase = GamePhase.WON
        self.score += self.board.num_mines * self.scoring.win_bonus_per_mine
        logger.info(
            "Won on %s with score %d after %ds",
            self.difficulty.name, self.score, self.elapsed_seconds,
        )
        if self.on_win:
            self.on_win(self)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_terminal(self) -> bool:
        """Check if the session has been won or lost."""
        return self.phase in (GamePhase.WON, GamePhase.LOST)

    @property
    def is_won(self) -> bool:
        """Check if session was won."""
        return self.phase == GamePhase.WON

    @property
    def is_lost(self) -> bool:
        """Check if session was lost."""
        return self.phase == GamePhase.LOST

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.board.num_mines - self.board.flag_count

    @property
    def formatted_time(self) -> str:
        """Elapsed time as M:SS."""
        minutes, seconds = divmod(self.elapsed_seconds, 60)
        return f"{minutes}:{seconds:02d}"


# ============================================================================
# Session Factory
# ============================================================================

def start_session(
    difficulty: Union[str, DifficultyConfig],
    rng: Optional[np.random.Generator] = None,
    scoring: ScoringConfig = DEFAULT_SCORING,
    on_loss: Optional[SessionHook] = None,
    on_win: Optional[SessionHook] = None,
) -> GameSession:
    """
    Start a new idle session on a freshly generated board.

    Args:
        difficulty: Preset name or explicit configuration.
        rng: Random source for mine placement.
        scoring: Scoring rules.
        on_loss: Hook called when the session is lost.
        on_win: Hook called when the session is won.

    Returns:
        New session with score and elapsed time at zero.
    """
    if isinstance(difficulty, str):
        difficulty = get_difficulty(difficulty)
    board = generate_board(difficulty.size, difficulty.num_mines, rng)
    logger.info(
        "Started %s session (%dx%d, %d mines)",
        difficulty.name, difficulty.size, difficulty.size, difficulty.num_mines,
    )
    return GameSession(
        board=board,
        difficulty=difficulty,
        scoring=scoring,
        on_loss=on_loss,
        on_win=on_win,
    )
