"""
Exceptions raised by the Minesweeper engine.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot produce a playable board."""


class IndexOutOfBounds(MinesweeperError, IndexError):
    """A cell index outside the board was passed to an operation."""

    def __init__(self, index: int, cell_count: int) -> None:
        super().__init__(
            f"Cell index {index} out of range (board has {cell_count} cells)"
        )
        self.index = index
        self.cell_count = cell_count


class UnknownDifficulty(MinesweeperError, KeyError):
    """No difficulty preset exists under the requested name."""

    def __str__(self) -> str:
        return f"Unknown difficulty: {self.args[0]!r}"
