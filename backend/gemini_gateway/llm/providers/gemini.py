# gemini_gateway/llm/providers/gemini.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from gemini_gateway.core import ErrorReason
from gemini_gateway.llm.errors import LLMProviderError
from gemini_gateway.llm.types import LLMRequest, LLMResponse

logger = logging.getLogger("gemini_gateway.llm.gemini")


def _upstream_status(exc: genai_errors.APIError) -> int | None:
    code = getattr(exc, "code", None)
    if isinstance(code, int) and 400 <= code <= 599:
        return code
    return None


@dataclass
class GeminiProvider:
    """
    Gemini provider using Google Gen AI SDK (google-genai).

    One instance per process, created by the app factory. The SDK client is
    built on first use and reused for every later call; nothing else on the
    instance changes, so concurrent requests can share it.
    Single-attempt: failures are reported, never retried.
    """
    api_key: Optional[str] = None
    name: str = "gemini"
    _client: Optional[genai.Client] = field(default=None, repr=False)

    def _get_client(self) -> genai.Client:
        if not self.api_key:
            raise LLMProviderError(ErrorReason.API_KEY_MISSING.value)
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, req: LLMRequest) -> LLMResponse:
        client = self._get_client()
        start_ms = int(time.time() * 1000)

        cfg = types.GenerateContentConfig(
            temperature=req.temperature,
            top_p=req.top_p,
            top_k=req.top_k,
            max_output_tokens=req.max_output_tokens,
        )

        try:
            resp = await client.aio.models.generate_content(
                model=req.model,
                contents=req.prompt,
                config=cfg,
            )
        except genai_errors.APIError as e:
            raise LLMProviderError(
                getattr(e, "message", None) or None,
                status_code=_upstream_status(e),
            ) from e
        except (httpx.TimeoutException, TimeoutError) as e:
            raise LLMProviderError("Gemini call timed out") from e
        except Exception as e:
            # Transport/SDK internals: keep the detail in the logs only
            logger.warning("gemini_unexpected_failure", extra={"error_type": type(e).__name__})
            raise LLMProviderError() from e

        text = getattr(resp, "text", None) or ""

        # Token usage: best-effort, won't break if missing
        input_tokens = None
        output_tokens = None
        usage = getattr(resp, "usage_metadata", None)
        if usage is not None:
            input_tokens = getattr(usage, "prompt_token_count", None)
            output_tokens = getattr(usage, "candidates_token_count", None)

        return LLMResponse(
            trace_id=req.trace_id,
            model=req.model,
            output_text=text,
            latency_ms=int(time.time() * 1000) - start_ms,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
