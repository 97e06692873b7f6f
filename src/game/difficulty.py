"""
Difficulty catalog.

Fixed presets mapping a difficulty name to grid size and mine count.
"""
from dataclasses import dataclass
from typing import Dict, List

from .errors import InvalidConfiguration, UnknownDifficulty


@dataclass(frozen=True)
class DifficultyConfig:
    """
    Configuration for one difficulty tier.

    Attributes:
        name: Display name of the tier.
        size: Number of rows and columns of the square grid.
        num_mines: Total mines to place.
    """

    name: str
    size: int
    num_mines: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_board_config(self.size, self.num_mines)

    @property
    def cell_count(self) -> int:
        """Total number of cells on the grid."""
        return self.size * self.size


def validate_board_config(size: int, num_mines: int) -> None:
    """
    Ensure a grid size and mine count can produce a playable board.

    Raises:
        InvalidConfiguration: If size is not positive or the mine count
            is not strictly between 0 and the number of cells.
    """
    if size < 1:
        raise InvalidConfiguration("Board size must be positive")
    cell_count = size * size
    if num_mines <= 0:
        raise InvalidConfiguration("Number of mines must be positive")
    if num_mines >= cell_count:
        raise InvalidConfiguration(
            f"Too many mines (max {cell_count - 1} for a {size}x{size} board)"
        )


# Preset difficulty levels
EASY = DifficultyConfig("Easy", 8, 10)
MEDIUM = DifficultyConfig("Medium", 10, 15)
HARD = DifficultyConfig("Hard", 12, 20)

PRESETS: Dict[str, DifficultyConfig] = {
    preset.name: preset for preset in (EASY, MEDIUM, HARD)
}


def get_difficulty(name: str) -> DifficultyConfig:
    """
    Look up a preset by name, ignoring case.

    Raises:
        UnknownDifficulty: If no preset has that name.
    """
    for preset_name, preset in PRESETS.items():
        if preset_name.lower() == name.strip().lower():
            return preset
    raise UnknownDifficulty(name)


def difficulty_names() -> List[str]:
    """Names of all presets, easiest first."""
    return list(PRESETS)
