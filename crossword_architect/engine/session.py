"""Editing session tying the word list, placements and grid size together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core.constants import DEFAULT_COLS, DEFAULT_ROWS, MAX_GRID_SIZE, MIN_GRID_SIZE, Orientation
from ..core.exceptions import ConfigError, PlacementError
from ..core.models import Board, ClueEntry, Placement, Word
from ..data.parser import format_input, parse_input, relink_placements, words_to_text
from ..utils.logger import get_logger
from .grid import derive_board
from .layout import LayoutConfig, LayoutEngine, LayoutResult
from .validator import can_place_interactive


LOGGER = get_logger(__name__)


@dataclass
class SessionConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    def validate(self) -> None:
        for name, value in (("rows", self.rows), ("cols", self.cols)):
            if not isinstance(value, int) or not MIN_GRID_SIZE <= value <= MAX_GRID_SIZE:
                raise ConfigError(
                    f"Grid {name} must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {value!r}"
                )

    def to_layout_config(self) -> LayoutConfig:
        return LayoutConfig(rows=self.rows, cols=self.cols)


class CrosswordSession:
    """Mutable authoring state; the board is always derived on demand."""

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        input_text: str = "",
        words: Optional[List[Word]] = None,
        placements: Optional[List[Placement]] = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.config.validate()
        self.input_text = input_text
        self.words: List[Word] = list(words) if words is not None else parse_input(input_text)
        self.placements: List[Placement] = list(placements or [])

    # ------------------------------------------------------------------
    # Word list
    # ------------------------------------------------------------------
    def set_input_text(self, text: str) -> None:
        """Re-parse ``text``, keeping placements of unchanged word/clue pairs."""
        self.input_text = text
        self.words = parse_input(text)
        self.placements = relink_placements(self.words, self.placements)

    def format_text(self) -> None:
        self.set_input_text(format_input(self.input_text))

    def import_generated(self, entries: Iterable[Tuple[str, str]]) -> None:
        """Replace the word list with generated pairs and clear the grid."""
        self.input_text = words_to_text(entries)
        self.words = parse_input(self.input_text)
        self.placements = []
        LOGGER.info("Imported %s generated words", len(self.words))

    def word(self, word_id: str) -> Optional[Word]:
        for entry in self.words:
            if entry.id == word_id:
                return entry
        return None

    def unplaced_words(self) -> List[Word]:
        placed_ids = {placement.id for placement in self.placements}
        return [entry for entry in self.words if entry.id not in placed_ids]

    # ------------------------------------------------------------------
    # Grid
    # ------------------------------------------------------------------
    def resize(self, rows: int, cols: int) -> None:
        config = SessionConfig(rows=rows, cols=cols)
        config.validate()
        self.config = config

    def board(self) -> Tuple[Board, List[ClueEntry]]:
        return derive_board(self.placements, self.config.rows, self.config.cols)

    def auto_arrange(self) -> LayoutResult:
        if not self.words:
            return LayoutResult()
        result = LayoutEngine(self.config.to_layout_config()).run(self.words)
        self.placements = list(result.placements)
        if not result.complete:
            LOGGER.warning(
                "Could not place all words: %s/%s placed",
                len(result.placements),
                len(self.words),
            )
        return result

    def preview(self, word_id: str, row: int, col: int, orientation: Orientation) -> bool:
        entry = self.word(word_id)
        if entry is None:
            return False
        board, _ = self.board()
        return can_place_interactive(board, entry.word, row, col, orientation)

    def place_word(self, word_id: str, row: int, col: int, orientation: Orientation) -> Placement:
        entry = self.word(word_id)
        if entry is None:
            raise PlacementError(f"Unknown word id {word_id}")
        if any(placement.id == word_id for placement in self.placements):
            raise PlacementError(f"Word {entry.word} is already on the grid")
        board, _ = self.board()
        if not can_place_interactive(board, entry.word, row, col, orientation):
            raise PlacementError(
                f"Cannot place {entry.word} at ({row},{col}) {orientation.value}"
            )
        placement = Placement.of(entry, row, col, orientation)
        self.placements.append(placement)
        return placement

    def remove_word(self, word_id: str) -> None:
        self.placements = [placement for placement in self.placements if placement.id != word_id]

    def rotate_word(self, word_id: str) -> None:
        """Flip orientation around the same origin; conflicts show as collisions."""
        self.placements = [
            placement.rotated() if placement.id == word_id else placement
            for placement in self.placements
        ]
