"""
Reveal engine.

Applies a single reveal action to a board, expanding through
zero-count cells with an iterative flood fill.
"""
import logging
from dataclasses import dataclass
from typing import List

from .board import Board


logger = logging.getLogger(__name__)


@dataclass
class RevealResult:
    """
    Outcome of one reveal action.

    Attributes:
        board: Board after the reveal (a copy; the input is untouched).
        newly_revealed: Non-mine cells revealed by this action.
        hit_mine: Whether the target cell was a mine.
    """

    board: Board
    newly_revealed: int = 0
    hit_mine: bool = False


def reveal_cell(board: Board, index: int) -> RevealResult:
    """
    Reveal a cell on a copy of the board.

    A mine is revealed alone and reported through ``hit_mine``. A
    numbered cell is revealed alone. A zero-count cell starts a flood
    fill over its connected zero-count region and the numbered ring
    around it.

    Args:
        board: Board to reveal on.
        index: Flat index of the target cell.

    Returns:
        RevealResult with the new board and the count of newly revealed
        cells (0 if the target was already revealed).

    Raises:
        IndexOutOfBounds: If the index is outside the board.
    """
    board.check_index(index)
    new_board = board.copy()
    cell = new_board.cells[index]

    if cell.is_revealed:
        return RevealResult(new_board)

    if cell.is_mine:
        cell.reveal()
        return RevealResult(new_board, hit_mine=True)

    if cell.neighbor_mine_count > 0:
        cell.reveal()
        return RevealResult(new_board, newly_revealed=1)

    revealed = flood_fill(new_board, index)
    logger.debug("Flood fill from %d revealed %d cells", index, revealed)
    return RevealResult(new_board, newly_revealed=revealed)


def flood_fill(board: Board, start: int) -> int:
    """
    Reveal the zero-count region containing ``start`` in place.

    Uses an explicit stack; a cell's own revealed state serves as the
    visited mark. Only neighbors of zero-count cells are pushed, and
    those are never mines.

    Args:
        board: Board to mutate.
        start: Index of a non-mine cell with no neighboring mines.

    Returns:
        Number of cells newly revealed.
    """
    revealed = 0
    stack: List[int] = [start]
    while stack:
        index = stack.pop()
        cell = board.cells[index]
        if not cell.reveal():
            continue
        revealed += 1
        if cell.neighbor_mine_count == 0:
            stack.extend(
                neighbor for neighbor in board.neighbors(index)
                if not board.cells[neighbor].is_revealed
            )
    return revealed
