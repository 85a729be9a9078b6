"""Parsing of ``WORD - clue`` word lists and re-linking of placements."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from ..core.models import Placement, Word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

SEPARATOR = "-"


def clean_word(text: str) -> str:
    """Return ``text`` reduced to uppercase letters and digits."""

    if not text:
        return ""
    return "".join(char for char in text if char.isalnum()).upper()


def _split_line(line: str) -> Tuple[str, str]:
    head, _, tail = line.partition(SEPARATOR)
    return head.strip(), tail.strip()


def _tighten_dashes(clue: str) -> str:
    return SEPARATOR.join(part.strip() for part in clue.split(SEPARATOR)).strip()


def parse_input(text: str) -> List[Word]:
    """Parse one ``WORD - clue`` entry per line.

    Only the first dash separates word from clue, so clues may contain
    dashes themselves; spaces around those dashes are dropped. Lines
    missing either half are skipped.
    """

    words: List[Word] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        if SEPARATOR not in line:
            LOGGER.debug("Skipping line %s without separator: %r", line_no, line)
            continue
        raw_word, tail = _split_line(line)
        clue = _tighten_dashes(tail)
        word = clean_word(raw_word)
        if not word or not clue:
            LOGGER.debug("Skipping incomplete line %s: %r", line_no, line)
            continue
        words.append(Word.create(word, clue))
    return words


def format_input(text: str) -> str:
    """Normalise input text: uppercase words, capitalised clues, no repeats."""

    unique: Dict[str, str] = {}
    for line in text.splitlines():
        if SEPARATOR not in line:
            continue
        raw_word, clue = _split_line(line)
        word = raw_word.upper()
        if clue:
            clue = clue[0].upper() + clue[1:]
        if word and clue and word not in unique:
            unique[word] = clue
    return words_to_text(unique.items())


def words_to_text(entries: Iterable[Tuple[str, str]]) -> str:
    return "\n".join(f"{word} {SEPARATOR} {clue}" for word, clue in entries)


def relink_placements(words: Sequence[Word], placements: Sequence[Placement]) -> List[Placement]:
    """Carry placements over to freshly parsed words.

    A new word adopts the first unclaimed placement with the same letters
    and clue; placements nobody claims are dropped.
    """

    remaining = list(placements)
    relinked: List[Placement] = []
    for word in words:
        for index, placement in enumerate(remaining):
            if placement.word == word.word and placement.clue == word.clue:
                relinked.append(placement.relinked(word.id))
                del remaining[index]
                break
    if remaining:
        LOGGER.debug("Dropped %s placements with no matching word", len(remaining))
    return relinked
