import json
import os
import unittest
from unittest.mock import MagicMock, patch

import requests

from crossword_architect.core.exceptions import ParseError
from crossword_architect.data.generator import (
    WORDS_SCHEMA,
    GeminiWordGenerator,
    GeneratedContent,
    StaticWordGenerator,
    parse_generated,
)
from crossword_architect.io.gemini_client import GeminiAPIError, GeminiClient


def _gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class ParseGeneratedTests(unittest.TestCase):
    def test_parses_words_payload(self) -> None:
        text = json.dumps({"words": [{"word": "react", "clue": "UI library"}, {"word": "State", "clue": "Data"}]})
        content = parse_generated(text)
        self.assertEqual(content.as_pairs(), [("REACT", "UI library"), ("STATE", "Data")])

    def test_strips_markdown_fences(self) -> None:
        text = "```json\n" + json.dumps({"words": [{"word": "HOOK", "clue": "Reusable logic"}]}) + "\n```"
        self.assertEqual(parse_generated(text).as_pairs(), [("HOOK", "Reusable logic")])

    def test_cleans_and_dedupes_entries(self) -> None:
        text = json.dumps(
            {
                "words": [
                    {"word": "type script", "clue": "Typed JS"},
                    {"word": "TYPESCRIPT", "clue": "Duplicate"},
                    {"word": "!!", "clue": "Nothing left"},
                    {"word": "MEMO", "clue": ""},
                    "not an object",
                ]
            }
        )
        self.assertEqual(parse_generated(text).as_pairs(), [("TYPESCRIPT", "Typed JS")])

    def test_invalid_payload_raises(self) -> None:
        with self.assertRaises(ParseError):
            parse_generated("not json")
        with self.assertRaises(ParseError):
            parse_generated(json.dumps({"items": []}))

    def test_content_to_text(self) -> None:
        content = parse_generated(json.dumps({"words": [{"word": "CAT", "clue": "Pet"}]}))
        self.assertEqual(content.to_text(), "CAT - Pet")


class GeminiWordGeneratorTests(unittest.TestCase):
    def test_generate_uses_client_with_schema(self) -> None:
        client = MagicMock()
        client.generate_text.return_value = json.dumps({"words": [{"word": "GEMINI", "clue": "AI model"}]})
        generator = GeminiWordGenerator(client=client)

        content = generator.generate("AI", language="Russian")

        self.assertIsInstance(content, GeneratedContent)
        self.assertEqual(content.as_pairs(), [("GEMINI", "AI model")])
        prompt = client.generate_text.call_args[0][0]
        self.assertIn('"AI"', prompt)
        self.assertIn('"Russian"', prompt)
        self.assertEqual(client.generate_text.call_args[1]["response_schema"], WORDS_SCHEMA)

    def test_blank_topic_rejected(self) -> None:
        with self.assertRaises(ValueError):
            GeminiWordGenerator(client=MagicMock()).generate("   ")

    def test_static_generator_respects_limit(self) -> None:
        generator = StaticWordGenerator([("cat", "Pet"), ("dog", "Barker"), ("owl", "Hooter")])
        self.assertEqual(generator.generate("pets", limit=2).as_pairs(), [("CAT", "Pet"), ("DOG", "Barker")])


class GeminiClientTests(unittest.TestCase):
    def test_missing_key_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(GeminiAPIError):
                GeminiClient()

    def test_generate_text_posts_schema(self) -> None:
        session = MagicMock()
        response = MagicMock()
        response.json.return_value = _gemini_payload('{"words": []}')
        session.post.return_value = response
        with patch.dict(os.environ, {"GEMINI_API_KEY": "secret"}, clear=True):
            client = GeminiClient(session=session)
            text = client.generate_text("prompt", response_schema=WORDS_SCHEMA)

        self.assertEqual(text, '{"words": []}')
        _, kwargs = session.post.call_args
        self.assertEqual(kwargs["params"], {"key": "secret"})
        self.assertEqual(kwargs["json"]["generationConfig"]["responseMimeType"], "application/json")
        self.assertIn("gemini-2.5-flash", session.post.call_args[0][0])

    def test_model_override_from_environment(self) -> None:
        with patch.dict(os.environ, {"GEMINI_API_KEY": "secret", "GEMINI_MODEL": "gemini-pro"}, clear=True):
            client = GeminiClient(session=MagicMock())
        self.assertEqual(client.model_name, "gemini-pro")

    def test_http_failure_wrapped(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("offline")
        with patch.dict(os.environ, {"GEMINI_API_KEY": "secret"}, clear=True):
            client = GeminiClient(session=session)
            with self.assertRaises(GeminiAPIError):
                client.generate_text("prompt")

    def test_missing_candidates_raise(self) -> None:
        session = MagicMock()
        session.post.return_value.json.return_value = {"candidates": []}
        with patch.dict(os.environ, {"GEMINI_API_KEY": "secret"}, clear=True):
            client = GeminiClient(session=session)
            with self.assertRaises(GeminiAPIError):
                client.generate_text("prompt")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
