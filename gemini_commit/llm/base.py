"""LLM Base Classes and Error Types"""

import json
from abc import ABC, abstractmethod
from typing import Any


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class TransportError(LLMError):
    """The network exchange with the service could not be completed."""

    def __init__(self, message: str):
        super().__init__(f"Request to generation service failed: {message}")


class ServiceError(LLMError):
    """The service answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"API returned HTTP {status}:\n{body}")


class MalformedResponseError(LLMError):
    """The service answered, but not with the expected response shape."""

    def __init__(self, response: Any):
        self.response = response
        super().__init__(
            f"Could not extract message from API response. Full response:\n{_render(response)}"
        )


def _render(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        pass

    @property
    def name(self) -> str:
        return type(self).__name__
