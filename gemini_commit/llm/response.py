"""Extraction of generated text from a decoded generateContent response."""

from typing import Any

from gemini_commit.llm.base import MalformedResponseError


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _field(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None


def extract_text(response: Any) -> str:
    """Return ``candidates[0].content.parts[0].text``, stripped.

    Only the first candidate and its first part are read; any others are
    ignored. Any missing link in that path, or a non-string ``text``, raises
    MalformedResponseError carrying the original response.
    """
    candidate = _first(_field(response, "candidates"))
    part = _first(_field(_field(candidate, "content"), "parts"))
    text = _field(part, "text")

    if not isinstance(text, str):
        raise MalformedResponseError(response)

    return text.strip()
