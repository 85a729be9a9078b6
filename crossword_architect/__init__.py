"""Crossword architect: arrange word/clue pairs into a crossing-word grid.

This package exposes the public API surface via:

- ``crossword_architect.engine.grid.derive_board``: board state and clue numbering.
- ``crossword_architect.engine.validator.can_place``: placement legality checks.
- ``crossword_architect.engine.layout.generate_layout``: greedy automatic layout.
- ``crossword_architect.engine.session.CrosswordSession``: editing workflow.
"""

from .core.constants import AdjacencyMode, Orientation
from .core.models import Board, Cell, ClueEntry, Placement, Word
from .engine.grid import derive_board
from .engine.layout import LayoutConfig, LayoutEngine, LayoutResult, generate_layout
from .engine.session import CrosswordSession, SessionConfig
from .engine.validator import can_place, can_place_interactive

__all__ = [
    "AdjacencyMode",
    "Board",
    "Cell",
    "ClueEntry",
    "CrosswordSession",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "Orientation",
    "Placement",
    "SessionConfig",
    "Word",
    "can_place",
    "can_place_interactive",
    "derive_board",
    "generate_layout",
]

__version__ = "0.1.0"
