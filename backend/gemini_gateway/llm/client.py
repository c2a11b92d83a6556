# gemini_gateway/llm/client.py
from __future__ import annotations

import uuid
from typing import Protocol

from gemini_gateway.core.request_context import set_context
from gemini_gateway.llm.errors import LLMProviderError
from gemini_gateway.llm.telemetry import LLMCallLog, log_llm_call, now_ms
from gemini_gateway.llm.types import LLMRequest, LLMResponse


class TextProvider(Protocol):
    name: str

    async def generate(self, req: LLMRequest) -> LLMResponse: ...


async def llm_generate(provider: TextProvider, *, prompt: str, model: str) -> LLMResponse:
    """Issue exactly one generation call and record it. No retries, no cache."""
    trace_id = str(uuid.uuid4())
    set_context(trace_id=trace_id)

    req = LLMRequest(trace_id=trace_id, prompt=prompt, model=model)

    start_ms = now_ms()
    try:
        resp = await provider.generate(req)
    except LLMProviderError as e:
        log_llm_call(
            LLMCallLog(
                trace_id=trace_id,
                provider=provider.name,
                model=model,
                latency_ms=(now_ms() - start_ms),
                ok=False,
                status_code=e.status_code,
                error_type=type(e.__cause__ or e).__name__,
            )
        )
        raise

    log_llm_call(
        LLMCallLog(
            trace_id=trace_id,
            provider=provider.name,
            model=model,
            latency_ms=(now_ms() - start_ms),
            ok=True,
        )
    )
    return resp
