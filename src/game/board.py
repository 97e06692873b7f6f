"""
Board module for Minesweeper game.

Implements the square game board, random mine placement and
neighbor mine counting. Cells are addressed by a flat row-major index.
"""
import copy
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .config import DENSE_BOARD_RATIO
from .difficulty import validate_board_config
from .errors import IndexOutOfBounds, InvalidConfiguration


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Holds size * size cells in row-major order. Mine positions and
    neighbor counts are fixed at construction; only cell states change
    afterwards.
    """

    size: int
    num_mines: int
    cells: List[Cell] = field(repr=False)

    def __post_init__(self) -> None:
        """Reject boards whose cell list does not cover the grid."""
        if len(self.cells) != self.size * self.size:
            raise InvalidConfiguration(
                f"Board of size {self.size} needs {self.size * self.size} "
                f"cells, got {len(self.cells)}; use Board.from_mines or "
                "generate_board"
            )

    @classmethod
    def from_mines(cls, size: int, mine_indices: Iterable[int]) -> "Board":
        """
        Build a board with mines at the given flat indices.

        Args:
            size: Number of rows and columns.
            mine_indices: Distinct cell indices that hold a mine.

        Returns:
            Board with neighbor mine counts computed.

        Raises:
            InvalidConfiguration: If the mine layout is not playable.
        """
        mines = list(mine_indices)
        validate_board_config(size, len(mines))
        cell_count = size * size
        if len(set(mines)) != len(mines):
            raise InvalidConfiguration("Mine positions must be distinct")
        if any(not 0 <= index < cell_count for index in mines):
            raise InvalidConfiguration("Mine position outside the board")

        board = cls(
            size=size,
            num_mines=len(mines),
            cells=[Cell(index=index) for index in range(cell_count)],
        )
        for index in mines:
            board.cells[index].is_mine = True
        board._calculate_neighbor_mines()
        return board

    def _calculate_neighbor_mines(self) -> None:
        """Calculate neighbor mine counts for all non-mine cells."""
        for cell in self.cells:
            if not cell.is_mine:
                cell.neighbor_mine_count = sum(
                    1 for neighbor in self.neighbors(cell.index)
                    if self.cells[neighbor].is_mine
                )

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return self.size * self.size

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat index."""
        return row * self.size + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert flat index to (row, col) position."""
        return index // self.size, index % self.size

    def check_index(self, index: int) -> None:
        """
        Ensure an index addresses a cell on this board.

        Raises:
            IndexOutOfBounds: If the index is outside the board.
        """
        if not 0 <= index < self.cell_count:
            raise IndexOutOfBounds(index, self.cell_count)

    def neighbors(self, index: int) -> List[int]:
        """
        Get flat indices of the up-to-8 cells around a cell.

        Neighbors are clipped to the grid; there is no wraparound.
        """
        row, col = self.position_of(index)
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if 0 <= new_row < self.size and 0 <= new_col < self.size:
                    result.append(self.index_of(new_row, new_col))
        return result

    # ========================================================================
    # State Accessors
    # ========================================================================

    def get_cell(self, index: int) -> Cell:
        """Get cell at a flat index."""
        self.check_index(index)
        return self.cells[index]

    @property
    def mine_indices(self) -> List[int]:
        """Indices of all mine cells."""
        return [cell.index for cell in self.cells if cell.is_mine]

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(1 for cell in self.cells if cell.is_revealed)

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self.cells if cell.is_flagged)

    @property
    def is_cleared(self) -> bool:
        """Check if every cell is either revealed or a mine."""
        return all(cell.is_revealed or cell.is_mine for cell in self.cells)

    def reveal_mines(self) -> None:
        """Reveal every mine cell."""
        for cell in self.cells:
            if cell.is_mine:
                cell.reveal()

    def copy(self) -> "Board":
        """Return an independent copy of the board."""
        return copy.deepcopy(self)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.array(
            [cell.to_observation() for cell in self.cells], dtype=np.int8
        )
        return obs.reshape(self.size, self.size)


# ============================================================================
# Board Generation
# ============================================================================

def place_mines(
    size: int,
    num_mines: int,
    rng: Optional[np.random.Generator] = None,
) -> List[int]:
    """
    Draw distinct mine positions uniformly at random.

    Sparse boards resample on a duplicate draw; dense boards take the
    first positions of a random permutation instead.

    Args:
        size: Number of rows and columns.
        num_mines: Mines to place.
        rng: Random source (default: fresh unseeded generator).

    Returns:
        List of distinct flat indices, in draw order.

    Raises:
        InvalidConfiguration: If the mine count is not playable.
    """
    validate_board_config(size, num_mines)
    rng = rng if rng is not None else np.random.default_rng()
    cell_count = size * size

    if num_mines > cell_count * DENSE_BOARD_RATIO:
        return [int(index) for index in rng.permutation(cell_count)[:num_mines]]

    mines: List[int] = []
    chosen = set()
    while len(mines) < num_mines:
        index = int(rng.integers(cell_count))
        if index not in chosen:
            chosen.add(index)
            mines.append(index)
    return mines


def generate_board(
    size: int,
    num_mines: int,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Generate a fresh board with randomly placed mines.

    Args:
        size: Number of rows and columns.
        num_mines: Mines to place, strictly between 0 and size * size.
        rng: Random source; pass a seeded generator for reproducibility.

    Returns:
        Board with all cells hidden.

    Raises:
        InvalidConfiguration: If the mine count is not playable.
    """
    return Board.from_mines(size, place_mines(size, num_mines, rng))
