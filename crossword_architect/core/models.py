"""Data models supporting the crossword architect."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .constants import Bounds, Orientation


@dataclass(frozen=True)
class Word:
    """A word/clue pair authored by the user or supplied by a generator."""

    id: str
    word: str
    clue: str

    @classmethod
    def create(cls, word: str, clue: str) -> Word:
        return cls(id=str(uuid.uuid4()), word=word, clue=clue)


@dataclass(frozen=True)
class Placement:
    """A word committed to an origin cell and orientation."""

    id: str
    word: str
    clue: str
    row: int
    col: int
    orientation: Orientation
    number: Optional[int] = None

    @classmethod
    def of(cls, word: Word, row: int, col: int, orientation: Orientation) -> Placement:
        return cls(
            id=word.id,
            word=word.word,
            clue=word.clue,
            row=row,
            col=col,
            orientation=orientation,
        )

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> Iterator[Tuple[int, int]]:
        dr, dc = self.orientation.step
        for index in range(len(self.word)):
            yield self.row + dr * index, self.col + dc * index

    @property
    def origin(self) -> Tuple[int, int]:
        return self.row, self.col

    def rotated(self) -> Placement:
        return replace(self, orientation=self.orientation.flipped(), number=None)

    def relinked(self, word_id: str) -> Placement:
        return replace(self, id=word_id)


@dataclass
class Cell:
    """A single board cell derived from the placement set."""

    letter: Optional[str] = None
    clue_number: Optional[int] = None
    word_ids: Set[str] = field(default_factory=set)
    is_error: bool = False

    def is_empty(self) -> bool:
        return self.letter is None


@dataclass(frozen=True)
class ClueEntry:
    """A numbered clue as shown in the clue lists."""

    number: int
    clue: str
    word: str
    orientation: Orientation


@dataclass
class Board:
    """Board state derived from a set of placements.

    Boards are rebuilt from scratch by :func:`derive_board`; nothing in the
    package mutates one after it is returned.
    """

    bounds: Bounds
    cells: List[List[Cell]]
    placements: List[Placement] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def letter_at(self, row: int, col: int) -> Optional[str]:
        if not self.bounds.contains(row, col):
            return None
        return self.cells[row][col].letter

    def placement(self, word_id: str) -> Optional[Placement]:
        for placement in self.placements:
            if placement.id == word_id:
                return placement
        return None

    @property
    def has_collisions(self) -> bool:
        return any(cell.is_error for row in self.cells for cell in row)

    def to_jsonable(self) -> List[List[Dict[str, object]]]:
        serialized: List[List[Dict[str, object]]] = []
        for row in self.cells:
            serialized.append(
                [
                    {
                        "letter": cell.letter,
                        "clue_number": cell.clue_number,
                        "word_ids": sorted(cell.word_ids),
                        "is_error": cell.is_error,
                    }
                    for cell in row
                ]
            )
        return serialized
