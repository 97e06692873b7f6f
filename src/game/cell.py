"""
Cell module for the Minesweeper engine.

A cell is one square of the grid, addressed by its flat row-major
index. Its content (mine, neighbor count) is fixed when the board is
generated; only its visible state changes during play.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """What the player currently sees on a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation codes for unrevealed cells and revealed mines
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the board.

    ``is_revealed`` and ``is_flagged`` are views over a single ``state``
    field, so a revealed cell always reads as unflagged.

    Attributes:
        index: Flat row-major position on the board.
        is_mine: Whether this cell holds a mine.
        neighbor_mine_count: Mines among the up-to-8 surrounding cells;
            left at 0 for mine cells.
        state: Hidden, revealed or flagged.
    """

    index: int = 0
    is_mine: bool = False
    neighbor_mine_count: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Uncover the cell, dropping a flag if one was placed.

        The flood fill relies on the return value as its visited check.

        Returns:
            True if the cell was newly revealed, False if it already was.
        """
        if self.is_revealed:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Mark or unmark the cell as a suspected mine.

        Returns:
            False if the cell is already revealed and cannot be flagged.
        """
        if self.is_revealed:
            return False
        self.state = (
            CellState.HIDDEN if self.is_flagged else CellState.FLAGGED
        )
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode the visible state as one int8 value for agents.

        Hidden cells give -1 and flagged cells -2. Revealed cells give
        their neighbor count, or 9 for a mine uncovered after a loss.
        """
        if self.is_hidden:
            return HIDDEN_CODE
        if self.is_flagged:
            return FLAGGED_CODE
        return MINE_CODE if self.is_mine else self.neighbor_mine_count
