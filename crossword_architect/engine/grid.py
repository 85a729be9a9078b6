"""Grid representation: board derivation and the sparse search grid."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.constants import Bounds
from ..core.exceptions import PlacementBoundsError
from ..core.models import Board, Cell, ClueEntry, Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def _check_dimensions(rows: int, cols: int) -> Bounds:
    if not isinstance(rows, int) or not isinstance(cols, int) or rows <= 0 or cols <= 0:
        raise ValueError(f"Grid dimensions must be positive integers, got {rows}x{cols}")
    return Bounds(rows=rows, cols=cols)


def create_empty_cells(bounds: Bounds) -> List[List[Cell]]:
    return [[Cell() for _ in range(bounds.cols)] for _ in range(bounds.rows)]


def derive_board(
    placements: Iterable[Placement],
    rows: int,
    cols: int,
    strict: bool = False,
) -> Tuple[Board, List[ClueEntry]]:
    """Build the board and the numbered clue list for ``placements``.

    Conflicting letters do not reject a placement: the cell is flagged with
    ``is_error`` and keeps the letter written last. Cells falling outside
    the grid are skipped; with ``strict`` set they raise
    :class:`PlacementBoundsError` instead. A placement whose origin is off
    the grid keeps ``number`` None and has no clue entry.
    """

    bounds = _check_dimensions(rows, cols)
    placements = list(placements)
    cells = create_empty_cells(bounds)

    for placement in placements:
        for index, (row, col) in enumerate(placement.cells):
            if not bounds.contains(row, col):
                if strict:
                    raise PlacementBoundsError(
                        f"Placement {placement.word} at ({placement.row},{placement.col}) "
                        f"{placement.orientation.value} leaves the {rows}x{cols} grid"
                    )
                LOGGER.debug(
                    "Clipping cell (%s,%s) of %s outside %sx%s grid",
                    row,
                    col,
                    placement.word,
                    rows,
                    cols,
                )
                continue
            cell = cells[row][col]
            letter = placement.word[index]
            if cell.letter is not None and cell.letter != letter:
                cell.is_error = True
            cell.letter = letter
            cell.word_ids.add(placement.id)

    starts: Dict[Tuple[int, int], List[int]] = {}
    for position, placement in enumerate(placements):
        starts.setdefault(placement.origin, []).append(position)

    numbered: List[Placement] = [
        placement if placement.number is None else replace(placement, number=None)
        for placement in placements
    ]
    clues: List[ClueEntry] = []
    current = 1
    for row, col in sorted(starts):
        # Off-board origins stay unnumbered and get no clue.
        if not bounds.contains(row, col):
            continue
        for position in starts[(row, col)]:
            placement = placements[position]
            numbered[position] = replace(placement, number=current)
            clues.append(
                ClueEntry(
                    number=current,
                    clue=placement.clue,
                    word=placement.word,
                    orientation=placement.orientation,
                )
            )
        cells[row][col].clue_number = current
        current += 1

    clues.sort(key=lambda entry: entry.number)
    return Board(bounds=bounds, cells=cells, placements=numbered), clues


class LetterGrid:
    """Sparse occupancy map used while the layout engine searches.

    Only committed placements are written; trial placements are checked
    against it through :func:`can_place` and never stored.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.bounds = _check_dimensions(rows, cols)
        self._letters: Dict[Tuple[int, int], str] = {}

    def place(self, placement: Placement) -> None:
        for index, position in enumerate(placement.cells):
            self._letters[position] = placement.word[index]

    def letter_at(self, row: int, col: int) -> Optional[str]:
        return self._letters.get((row, col))

    def is_occupied(self, row: int, col: int) -> bool:
        return (row, col) in self._letters

    def __len__(self) -> int:
        return len(self._letters)
