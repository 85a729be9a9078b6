"""Pretty-print helpers for derived boards and clue lists."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..core.constants import Orientation

if TYPE_CHECKING:
    from ..core.models import Board, Cell, ClueEntry, Word
    from ..engine.layout import LayoutResult


EMPTY = "."
COLLISION = "!"
BLANK = "_"

HEADINGS = {
    Orientation.ACROSS: "Across",
    Orientation.DOWN: "Down",
}


def cell_symbol(cell: Cell, hide_answers: bool = False) -> str:
    if cell.letter is None:
        return EMPTY
    if cell.is_error:
        return COLLISION
    if hide_answers:
        return str(cell.clue_number) if cell.clue_number is not None else BLANK
    return cell.letter


def format_board(board: Board, hide_answers: bool = False) -> str:
    width = board.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(board.rows):
        row_cells = [cell_symbol(board.cell(r, c), hide_answers) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(clues: Sequence[ClueEntry]) -> str:
    lines: List[str] = []
    for orientation in Orientation:
        if lines:
            lines.append("")
        lines.append(HEADINGS[orientation])
        entries = [entry for entry in clues if entry.orientation is orientation]
        if not entries:
            lines.append("  (none)")
        for entry in entries:
            lines.append(f"  {entry.number:>2}. {entry.clue} ({len(entry.word)})")
    return "\n".join(lines)


def print_puzzle(
    board: Board,
    clues: Sequence[ClueEntry],
    *,
    hide_answers: bool = False,
    label: Optional[str] = None,
    stream=None,
) -> None:
    """Print the board followed by its clue lists."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board, hide_answers=hide_answers), file=stream)
    print(file=stream)
    print(format_clues(clues), file=stream)


def print_layout_stats(
    result: LayoutResult,
    board: Board,
    unplaced: Optional[Sequence[Word]] = None,
    *,
    stream=None,
) -> None:
    """Print placement counts and any words the layout left out."""

    stream = stream or sys.stdout
    unplaced = list(result.unplaced if unplaced is None else unplaced)
    total = len(result.placements) + len(unplaced)
    letter_cells = sum(1 for row in board.cells for cell in row if cell.letter is not None)
    crossings = sum(1 for row in board.cells for cell in row if len(cell.word_ids) > 1)

    print("--- Layout ---", file=stream)
    print(f"  Grid:       {board.rows} x {board.cols}", file=stream)
    print(f"  Placed:     {len(result.placements)}/{total}", file=stream)
    print(f"  Letters:    {letter_cells}", file=stream)
    print(f"  Crossings:  {crossings}", file=stream)
    if unplaced:
        print(f"  Unplaced:   {', '.join(word.word for word in unplaced)}", file=stream)
