# gemini_gateway/llm/types.py
from dataclasses import dataclass

# Generation parameters are fixed; callers only choose prompt and model.
TEMPERATURE = 0.7
TOP_P = 0.95
TOP_K = 40
MAX_OUTPUT_TOKENS = 2048


@dataclass(frozen=True)
class LLMRequest:
    trace_id: str
    prompt: str
    model: str                      # e.g. "gemini-3-flash-preview"

    temperature: float = TEMPERATURE
    top_p: float = TOP_P
    top_k: int = TOP_K
    max_output_tokens: int = MAX_OUTPUT_TOKENS


@dataclass(frozen=True)
class LLMResponse:
    trace_id: str
    model: str
    output_text: str

    # Optional metadata (provider-dependent)
    latency_ms: int
    input_tokens: int | None = None
    output_tokens: int | None = None
