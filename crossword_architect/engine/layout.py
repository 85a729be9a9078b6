"""Automatic crossword layout.

The engine is greedy: the longest word is anchored across the middle of the
grid, then every remaining word is hung off an already placed word through a
shared letter. A word is never moved once committed, so the set of words left
unplaced depends on the order in which crossings are found.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import Bounds, Orientation
from ..core.models import Placement, Word
from ..utils.logger import get_logger
from .grid import LetterGrid
from .validator import can_place_auto


LOGGER = get_logger(__name__)


@dataclass
class LayoutConfig:
    """Grid dimensions the layout engine works within."""

    rows: int
    cols: int

    def bounds(self) -> Bounds:
        return Bounds(rows=self.rows, cols=self.cols)


@dataclass
class LayoutResult:
    placements: List[Placement] = field(default_factory=list)
    unplaced: List[Word] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unplaced


@dataclass
class _Move:
    row: int
    col: int
    orientation: Orientation
    distance: float


class LayoutEngine:
    """Places a batch of words onto an empty grid."""

    def __init__(self, config: LayoutConfig) -> None:
        if config.rows <= 0 or config.cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {config.rows}x{config.cols}")
        self.config = config
        self.center_row = config.rows / 2
        self.center_col = config.cols / 2

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def run(self, words: Sequence[Word]) -> LayoutResult:
        ordered = sorted(words, key=lambda entry: -len(entry.word))
        if not ordered:
            return LayoutResult()

        grid = LetterGrid(self.config.rows, self.config.cols)
        placed: List[Placement] = []

        anchor = ordered[0]
        self._commit(grid, placed, self._anchor(anchor))

        unplaced = ordered[1:]
        passes = 0
        changed = True
        while changed and unplaced:
            changed = False
            passes += 1
            index = 0
            while index < len(unplaced):
                word = unplaced[index]
                move = self._best_move(grid, placed, word)
                if move is None:
                    index += 1
                    continue
                self._commit(grid, placed, Placement.of(word, move.row, move.col, move.orientation))
                del unplaced[index]
                changed = True

        LOGGER.info(
            "Layout placed %s/%s words in %s passes on %sx%s grid",
            len(placed),
            len(ordered),
            passes,
            self.config.rows,
            self.config.cols,
        )
        if unplaced:
            LOGGER.info("Unplaced words: %s", ", ".join(entry.word for entry in unplaced))
        return LayoutResult(placements=placed, unplaced=unplaced)

    # ------------------------------------------------------------------
    # Placement helpers
    # ------------------------------------------------------------------
    def _anchor(self, word: Word) -> Placement:
        row = self.config.rows // 2
        col = (self.config.cols - len(word.word)) // 2
        if col < 0:
            LOGGER.warning(
                "Anchor word %s is longer than the grid is wide; placing at (0,0)", word.word
            )
            row, col = 0, 0
        return Placement.of(word, row, col, Orientation.ACROSS)

    @staticmethod
    def _commit(grid: LetterGrid, placed: List[Placement], placement: Placement) -> None:
        grid.place(placement)
        placed.append(placement)
        LOGGER.debug(
            "Committed %s at (%s,%s) %s",
            placement.word,
            placement.row,
            placement.col,
            placement.orientation.value,
        )

    def _best_move(self, grid: LetterGrid, placed: Sequence[Placement], word: Word) -> Optional[_Move]:
        """Closest-to-center crossing, strict spacing preferred over relaxed."""

        for strict in (True, False):
            best = self._sweep(grid, placed, word.word, strict)
            if best is not None:
                return best
        return None

    def _sweep(
        self, grid: LetterGrid, placed: Sequence[Placement], letters: str, strict: bool
    ) -> Optional[_Move]:
        best: Optional[_Move] = None
        for other in placed:
            orientation = other.orientation.flipped()
            dr, dc = orientation.step
            other_cells = list(other.cells)
            for j, letter in enumerate(letters):
                for k, other_letter in enumerate(other.word):
                    if other_letter != letter:
                        continue
                    cross_row, cross_col = other_cells[k]
                    row = cross_row - j * dr
                    col = cross_col - j * dc
                    if not can_place_auto(grid, letters, row, col, orientation, strict):
                        continue
                    distance = self._distance(row, col, len(letters), orientation)
                    if best is None or distance < best.distance:
                        best = _Move(row=row, col=col, orientation=orientation, distance=distance)
        return best

    def _distance(self, row: int, col: int, length: int, orientation: Orientation) -> float:
        dr, dc = orientation.step
        mid_row = row + (length / 2) * dr
        mid_col = col + (length / 2) * dc
        return (mid_row - self.center_row) ** 2 + (mid_col - self.center_col) ** 2


def generate_layout(words: Sequence[Word], rows: int, cols: int) -> List[Placement]:
    """Place as many of ``words`` as possible; unplaceable words are omitted."""
    return LayoutEngine(LayoutConfig(rows=rows, cols=cols)).run(words).placements
