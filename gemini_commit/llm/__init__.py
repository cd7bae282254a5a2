"""LLM Client Package"""

from gemini_commit.llm.base import (
    LLMClient,
    LLMError,
    MalformedResponseError,
    ServiceError,
    TransportError,
)
from gemini_commit.llm.gemini import GeminiClient
from gemini_commit.llm.response import extract_text


def get_client(api_key: str, model: str | None = None, timeout: float | None = None) -> LLMClient:
    """Build the Gemini client from an already-resolved API key."""
    return GeminiClient(api_key, model=model, timeout=timeout)


__all__ = [
    "LLMClient",
    "LLMError",
    "TransportError",
    "ServiceError",
    "MalformedResponseError",
    "GeminiClient",
    "extract_text",
    "get_client",
]
