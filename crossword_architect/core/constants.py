"""Shared constants and enumerations for the crossword architect."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Orientation(str, Enum):
    """Word orientations supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        """Unit ``(drow, dcol)`` step along the word."""
        return (0, 1) if self is Orientation.ACROSS else (1, 0)

    def flipped(self) -> "Orientation":
        return Orientation.DOWN if self is Orientation.ACROSS else Orientation.ACROSS


class AdjacencyMode(str, Enum):
    """How much spacing the placement validator enforces."""

    NONE = "none"  # bounds and letter match only
    STRICT = "strict"
    RELAXED = "relaxed"


DIAGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

DEFAULT_ROWS = 15
DEFAULT_COLS = 15
MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 35


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
