"""Persistent session state and puzzle export.

The session document mirrors what the editor keeps between runs: the raw
input text, parsed words (with their identities), placements and the grid
size. Exported puzzles are frontend-ready and carry the derived board.
"""

from __future__ import annotations

import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.constants import Orientation
from ..core.exceptions import StoreError
from ..core.models import Board, ClueEntry, Placement, Word
from ..utils.logger import get_logger
from .session import CrosswordSession, SessionConfig


LOGGER = get_logger(__name__)

DEFAULT_STATE_PATH = Path("local_db/crossword_architect_v1.json")
STATE_VERSION = 1


class SessionStore:
    """Save and restore a :class:`CrosswordSession` as one JSON document."""

    def __init__(self, path: Path | str = DEFAULT_STATE_PATH) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def save(self, session: CrosswordSession) -> None:
        doc = {
            "version": STATE_VERSION,
            "saved_at": datetime.now(timezone.utc).isoformat(),
            "input_text": session.input_text,
            "words": [self._serialize_word(word) for word in session.words],
            "placements": [self._serialize_placement(p) for p in session.placements],
            "grid": {"rows": session.config.rows, "cols": session.config.cols},
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Session saved to %s", self.path)

    def load(self) -> Optional[CrosswordSession]:
        """Return the stored session, or None when nothing was saved yet."""
        if not self.path.exists():
            return None
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
            grid = doc.get("grid") or {}
            config = SessionConfig(rows=int(grid["rows"]), cols=int(grid["cols"]))
            words = [self._deserialize_word(item) for item in doc.get("words", [])]
            placements = [self._deserialize_placement(item) for item in doc.get("placements", [])]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise StoreError(f"Unreadable session state at {self.path}: {exc}") from exc
        LOGGER.info("Session loaded from %s (%s words)", self.path, len(words))
        return CrosswordSession(
            config=config,
            input_text=doc.get("input_text", ""),
            words=words,
            placements=placements,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _serialize_word(word: Word) -> Dict[str, Any]:
        return {"id": word.id, "word": word.word, "clue": word.clue}

    @staticmethod
    def _deserialize_word(item: Dict[str, Any]) -> Word:
        return Word(id=item["id"], word=item["word"], clue=item["clue"])

    @staticmethod
    def _serialize_placement(placement: Placement) -> Dict[str, Any]:
        return {
            "id": placement.id,
            "word": placement.word,
            "clue": placement.clue,
            "row": placement.row,
            "col": placement.col,
            "orientation": placement.orientation.value,
        }

    @staticmethod
    def _deserialize_placement(item: Dict[str, Any]) -> Placement:
        return Placement(
            id=item["id"],
            word=item["word"],
            clue=item["clue"],
            row=int(item["row"]),
            col=int(item["col"]),
            orientation=Orientation(item["orientation"]),
        )


def export_puzzle(session: CrosswordSession, path: Path | str) -> Dict[str, Any]:
    """Write the current puzzle as a frontend-ready JSON document."""

    board, clues = session.board()
    doc = build_puzzle_document(board, clues, session.unplaced_words())
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
    LOGGER.info("Puzzle exported to %s", target)
    return doc


def build_puzzle_document(
    board: Board, clues: List[ClueEntry], unplaced: List[Word]
) -> Dict[str, Any]:
    return {
        "created_at": datetime.now(timezone.utc).isoformat(),
        "grid": board.to_jsonable(),
        "placements": [
            {
                "id": p.id,
                "number": p.number,
                "word": p.word,
                "clue": p.clue,
                "start": [p.row, p.col],
                "orientation": p.orientation.value,
            }
            for p in board.placements
        ],
        "clues": {
            orientation.value: [
                {"number": entry.number, "clue": entry.clue, "length": len(entry.word)}
                for entry in clues
                if entry.orientation is orientation
            ]
            for orientation in Orientation
        },
        "unplaced": [word.word for word in unplaced],
        "stats": compute_stats(board),
    }


def compute_stats(board: Board) -> Dict[str, Any]:
    total_cells = board.rows * board.cols
    letter_cells = sum(1 for row in board.cells for cell in row if cell.letter is not None)
    collisions = sum(1 for row in board.cells for cell in row if cell.is_error)
    crossings = sum(1 for row in board.cells for cell in row if len(cell.word_ids) > 1)
    lengths = Counter(p.length for p in board.placements)
    return {
        "rows": board.rows,
        "cols": board.cols,
        "total_cells": total_cells,
        "letter_cells": letter_cells,
        "crossings": crossings,
        "collisions": collisions,
        "words": len(board.placements),
        "length_distribution": {str(k): v for k, v in sorted(lengths.items())},
    }
