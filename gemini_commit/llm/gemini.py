"""Google Gemini LLM Client"""

import httpx

from gemini_commit.llm.base import LLMClient, ServiceError, TransportError
from gemini_commit.llm.response import extract_text


class GeminiClient(LLMClient):
    """Gemini generateContent client. The API key is sent as a header."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    DEFAULT_MODEL = "gemini-2.5-flash"
    DEFAULT_TIMEOUT = 60.0
    MAX_OUTPUT_TOKENS = 4096
    TEMPERATURE = 0.0

    def __init__(self, api_key: str, model: str | None = None, timeout: float | None = None,
                 transport: httpx.AsyncBaseTransport | None = None):
        self._api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.timeout = self.DEFAULT_TIMEOUT if timeout is None else timeout
        self.endpoint = f"{self.BASE_URL}/{self.model}:generateContent"
        self._transport = transport

    @property
    def name(self) -> str:
        return f"Gemini ({self.model})"

    def __repr__(self) -> str:
        return f"GeminiClient(model={self.model!r})"

    def _build_payload(self, prompt: str) -> dict:
        return {
            "contents": [{
                "parts": [{"text": prompt}],
            }],
            "generationConfig": {
                "temperature": self.TEMPERATURE,
                "maxOutputTokens": self.MAX_OUTPUT_TOKENS,
            },
        }

    async def generate(self, prompt: str) -> str:
        """POST the prompt once and return the first candidate's text."""
        headers = {"x-goog-api-key": self._api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.endpoint, json=self._build_payload(prompt), headers=headers)
        except httpx.TimeoutException as e:
            raise TransportError(f"timed out after {self.timeout:g}s ({type(e).__name__})") from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e
        except httpx.InvalidURL as e:
            raise TransportError(f"invalid endpoint for model {self.model!r}: {e}") from e
        except UnicodeEncodeError as e:
            raise TransportError(f"API key contains characters that cannot be sent in a header: {e}") from e

        if not response.is_success:
            raise ServiceError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"response body is not valid JSON: {e}") from e

        return extract_text(data)
