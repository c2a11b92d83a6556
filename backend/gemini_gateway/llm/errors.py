# gemini_gateway/llm/errors.py
from __future__ import annotations


class LLMError(Exception):
    """Base LLM error (wrapped)."""


class LLMProviderError(LLMError):
    """A failed remote call, reduced to what the HTTP layer needs.

    `status_code` is the upstream HTTP status when the provider reported one.
    `message` is safe to return to the caller; it is None when the failure
    carried no upstream message worth exposing.
    """

    def __init__(self, message: str | None = None, *, status_code: int | None = None):
        super().__init__(message or "LLM provider error")
        self.message = message
        self.status_code = status_code
