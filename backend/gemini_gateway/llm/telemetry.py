# gemini_gateway/llm/telemetry.py

import logging
import time
from dataclasses import dataclass

logger = logging.getLogger("llm")

@dataclass
class LLMCallLog:
    trace_id: str
    provider: str
    model: str
    latency_ms: int
    ok: bool
    status_code: int | None = None
    error_type: str | None = None

def now_ms() -> int:
    return int(time.time() * 1000)

def log_llm_call(item: LLMCallLog) -> None:
    logger.info(
        "llm_call trace_id=%s provider=%s model=%s latency_ms=%s ok=%s status=%s error=%s",
        item.trace_id,
        item.provider,
        item.model,
        item.latency_ms,
        item.ok,
        item.status_code,
        item.error_type,
    )
