"""Placement validation shared by manual placement and the layout engine."""

from __future__ import annotations

from typing import Optional, Protocol

from ..core.constants import DIAGONAL_STEPS, AdjacencyMode, Bounds, Orientation


class LetterSource(Protocol):
    """Anything exposing grid bounds and a per-cell letter lookup."""

    bounds: Bounds

    def letter_at(self, row: int, col: int) -> Optional[str]:
        ...


def _occupied(board: LetterSource, row: int, col: int) -> bool:
    return board.letter_at(row, col) is not None


def fits_bounds(length: int, row: int, col: int, orientation: Orientation, bounds: Bounds) -> bool:
    dr, dc = orientation.step
    if row < 0 or col < 0:
        return False
    return row + dr * (length - 1) < bounds.rows and col + dc * (length - 1) < bounds.cols


def can_place(
    board: LetterSource,
    word: str,
    row: int,
    col: int,
    orientation: Orientation,
    mode: AdjacencyMode = AdjacencyMode.NONE,
) -> bool:
    """Return whether ``word`` may start at ``(row, col)`` in ``orientation``.

    Every mode requires the word to lie inside the grid and to agree with
    any letter already on a cell it covers. ``STRICT`` and ``RELAXED`` also
    keep new letters off the sides of existing words, forbid corner-only
    contact and keep both end caps clear; ``STRICT`` additionally demands a
    second empty line between parallel runs.
    """

    if not fits_bounds(len(word), row, col, orientation, board.bounds):
        return False

    dr, dc = orientation.step
    # perpendicular to the word
    pr, pc = dc, dr
    spaced = mode is not AdjacencyMode.NONE

    for index, letter in enumerate(word):
        r = row + dr * index
        c = col + dc * index
        existing = board.letter_at(r, c)
        if existing is not None:
            if existing != letter:
                return False
            continue
        if not spaced:
            continue

        if _occupied(board, r + pr, c + pc) or _occupied(board, r - pr, c - pc):
            return False
        if mode is AdjacencyMode.STRICT and (
            _occupied(board, r + 2 * pr, c + 2 * pc) or _occupied(board, r - 2 * pr, c - 2 * pc)
        ):
            return False
        for ddr, ddc in DIAGONAL_STEPS:
            if not _occupied(board, r + ddr, c + ddc):
                continue
            if not _occupied(board, r + ddr, c) and not _occupied(board, r, c + ddc):
                return False

    if spaced:
        if _occupied(board, row - dr, col - dc):
            return False
        if _occupied(board, row + dr * len(word), col + dc * len(word)):
            return False
    return True


def can_place_interactive(
    board: LetterSource, word: str, row: int, col: int, orientation: Orientation
) -> bool:
    """Bounds and letter-match check used by manual placement and hover preview."""
    return can_place(board, word, row, col, orientation, AdjacencyMode.NONE)


def can_place_auto(
    board: LetterSource,
    word: str,
    row: int,
    col: int,
    orientation: Orientation,
    strict: bool,
) -> bool:
    mode = AdjacencyMode.STRICT if strict else AdjacencyMode.RELAXED
    return can_place(board, word, row, col, orientation, mode)
