"""CLI entrypoint for the crossword architect."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from crossword_architect.core.constants import DEFAULT_COLS, DEFAULT_ROWS
from crossword_architect.core.exceptions import CrosswordError
from crossword_architect.data.generator import GeminiWordGenerator
from crossword_architect.engine.layout import LayoutResult
from crossword_architect.engine.session import CrosswordSession, SessionConfig
from crossword_architect.engine.session_store import SessionStore, export_puzzle
from crossword_architect.io.gemini_client import GeminiAPIError
from crossword_architect.utils.logger import configure_logging, get_logger
from crossword_architect.utils.pretty import print_layout_stats, print_puzzle


LOGGER = get_logger("crossword_architect.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Arrange WORD - clue pairs into a crossword grid",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one 'WORD - clue' entry per line",
    )
    parser.add_argument(
        "--topic",
        type=str,
        help="Ask Gemini for a word list on this topic (needs GEMINI_API_KEY)",
    )
    parser.add_argument("--language", type=str, default="English", help="Language for generated words")
    parser.add_argument("--rows", type=int, help=f"Grid rows (default {DEFAULT_ROWS})")
    parser.add_argument("--cols", type=int, help=f"Grid columns (default {DEFAULT_COLS})")
    parser.add_argument(
        "--state",
        type=Path,
        help="Session state file to resume from and save to",
    )
    parser.add_argument(
        "--keep-layout",
        action="store_true",
        help="Keep placements restored from --state instead of re-arranging",
    )
    parser.add_argument(
        "--format",
        action="store_true",
        help="Normalise the word list (uppercase words, capitalised clues, no repeats)",
    )
    parser.add_argument("--hide-answers", action="store_true", help="Print the blank puzzle")
    parser.add_argument("--output", type=Path, help="Optional path to JSON export")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def _load_session(args: argparse.Namespace, store: Optional[SessionStore]) -> CrosswordSession:
    session = store.load() if store is not None else None
    if session is None:
        session = CrosswordSession(SessionConfig())
    if args.rows is not None or args.cols is not None:
        session.resize(
            args.rows if args.rows is not None else session.config.rows,
            args.cols if args.cols is not None else session.config.cols,
        )
    return session


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.words_file and args.topic:
        parser.error("--words-file and --topic are mutually exclusive")
    if args.keep_layout and not args.state:
        parser.error("--keep-layout requires --state")

    store = SessionStore(args.state) if args.state else None
    try:
        session = _load_session(args, store)
        if args.words_file:
            session.set_input_text(args.words_file.read_text(encoding="utf-8"))
        elif args.topic:
            content = GeminiWordGenerator().generate(args.topic, language=args.language)
            session.import_generated(content.as_pairs())
        if args.format:
            session.format_text()
    except (CrosswordError, GeminiAPIError, OSError) as exc:
        LOGGER.error("%s", exc)
        return 1

    if not session.words:
        parser.error("no words: provide --words-file, --topic or a --state with words")

    if args.keep_layout and session.placements:
        result = LayoutResult(placements=list(session.placements), unplaced=session.unplaced_words())
    else:
        result = session.auto_arrange()

    board, clues = session.board()
    print_puzzle(board, clues, hide_answers=args.hide_answers)
    print(file=sys.stdout)
    print_layout_stats(result, board, session.unplaced_words())

    if store is not None:
        store.save(session)
    if args.output:
        export_puzzle(session, args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
