"""Lightweight HTTP client for Gemini API interactions."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests

from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class GeminiAPIError(RuntimeError):
    """Raised when the Gemini API responds with an error payload."""


class GeminiClient:
    """Minimal client around the public Gemini REST API."""

    API_BASE = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        model_name: str = "gemini-2.5-flash",
        api_key_env: str = "GEMINI_API_KEY",
        model_env: str = "GEMINI_MODEL",
        timeout_seconds: float = 60.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.model_name = os.environ.get(model_env, model_name)
        self.api_key_env = api_key_env
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._api_key = os.environ.get(api_key_env)
        if not self._api_key:
            raise GeminiAPIError(
                f"Missing Gemini API key in environment variable {self.api_key_env}"
            )

    def generate_text(
        self, prompt: str, response_schema: Optional[Dict[str, Any]] = None
    ) -> str:
        """Send the prompt to Gemini and return the first candidate text.

        When ``response_schema`` is given the model is asked for JSON that
        conforms to it.
        """
        url = f"{self.API_BASE}/models/{self.model_name}:generateContent"
        payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if response_schema is not None:
            payload["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            }
        LOGGER.debug("Requesting Gemini model %s", self.model_name)
        try:
            response = self._session.post(
                url,
                params={"key": self._api_key},
                json=payload,
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise GeminiAPIError(f"Gemini request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise GeminiAPIError("Gemini API returned a non-JSON body") from exc
        text = self._extract_text(data)
        if not text:
            LOGGER.warning("Gemini response missing candidates: %s", data)
            raise GeminiAPIError("Gemini API response missing text candidates")
        return text

    @staticmethod
    def _extract_text(payload: Dict[str, Any]) -> Optional[str]:
        """Extract first textual candidate from the API payload."""
        candidates: List[Dict[str, Any]] = payload.get("candidates") or []
        for candidate in candidates:
            content = candidate.get("content") or {}
            parts: List[Dict[str, Any]] = content.get("parts") or []
            for part in parts:
                text = part.get("text")
                if text:
                    return text
        return None
