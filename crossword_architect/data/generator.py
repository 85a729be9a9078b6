"""Word/clue list providers feeding the word list."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from ..core.exceptions import ParseError
from ..io.gemini_client import GeminiClient
from ..utils.logger import get_logger
from .parser import clean_word, words_to_text


LOGGER = get_logger(__name__)


@dataclass
class GeneratedWord:
    word: str
    clue: str


@dataclass
class GeneratedContent:
    """Words produced by a generator, ready to become input text."""

    words: List[GeneratedWord] = field(default_factory=list)

    def as_pairs(self) -> List[Tuple[str, str]]:
        return [(entry.word, entry.clue) for entry in self.words]

    def to_text(self) -> str:
        return words_to_text(self.as_pairs())


class WordGenerator(Protocol):
    """Protocol implemented by all word list providers."""

    def generate(self, topic: str, language: str = "English", limit: int = 15) -> GeneratedContent:
        ...


WORDS_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "words": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "word": {"type": "STRING"},
                    "clue": {"type": "STRING"},
                },
                "required": ["word", "clue"],
            },
        }
    },
    "required": ["words"],
}


class GeminiWordGenerator:
    """LLM-powered word list generator using the Gemini API."""

    PROMPT = (
        'Generate a list of 10-{limit} distinct words related to the topic "{topic}" '
        'in the language "{language}". '
        "Provide a short, crossword-style clue for each word. "
        "The words should be suitable for a crossword puzzle "
        "(no spaces, punctuation, or special characters in the word itself)."
    )

    def __init__(self, client: Optional[GeminiClient] = None, model_name: str = "gemini-2.5-flash") -> None:
        self.model_name = model_name
        self._client = client

    def generate(self, topic: str, language: str = "English", limit: int = 15) -> GeneratedContent:
        if not topic.strip():
            raise ValueError("Topic must not be empty")
        client = self._client or GeminiClient(model_name=self.model_name)
        self._client = client
        prompt = self.PROMPT.format(topic=topic.strip(), language=language, limit=limit)
        text = client.generate_text(prompt, response_schema=WORDS_SCHEMA)
        content = parse_generated(text)
        LOGGER.info("Gemini produced %s words for topic '%s'", len(content.words), topic)
        return content


class StaticWordGenerator:
    """Returns a fixed word list; used offline and in tests."""

    def __init__(self, entries: Iterable[Tuple[str, str]]) -> None:
        self._entries = list(entries)

    def generate(self, topic: str, language: str = "English", limit: int = 15) -> GeneratedContent:
        return _build_content(
            {"word": word, "clue": clue} for word, clue in self._entries[:limit]
        )


def _strip_fences(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```"):
        lines = stripped.splitlines()
        inner = lines[1:-1] if lines[-1].strip().startswith("```") else lines[1:]
        stripped = "\n".join(inner).strip()
    return stripped


def parse_generated(text: str) -> GeneratedContent:
    """Parse a ``{"words": [{"word", "clue"}]}`` payload."""

    try:
        data = json.loads(_strip_fences(text or ""))
    except json.JSONDecodeError as exc:
        raise ParseError(f"Generated payload is not JSON: {exc}") from exc
    if not isinstance(data, dict) or not isinstance(data.get("words"), list):
        raise ParseError("Generated payload has no 'words' list")
    return _build_content(data["words"])


def _build_content(items: Iterable[Any]) -> GeneratedContent:
    entries: List[GeneratedWord] = []
    seen: set[str] = set()
    for item in items:
        if not isinstance(item, dict):
            continue
        word = clean_word(str(item.get("word") or ""))
        clue = str(item.get("clue") or "").strip()
        if not word or not clue or word in seen:
            continue
        seen.add(word)
        entries.append(GeneratedWord(word=word, clue=clue))
    return GeneratedContent(words=entries)
