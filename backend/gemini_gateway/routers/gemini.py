"""
gemini.py
- Purpose: Text-generation passthrough to Gemini.
- Design: Validate, make one call, map the outcome. No retries.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from gemini_gateway.api.deps import get_llm_provider, get_settings
from gemini_gateway.core import ErrorCode, ErrorReason
from gemini_gateway.core.config import Settings
from gemini_gateway.core.errors import bad_request
from gemini_gateway.llm.client import TextProvider, llm_generate
from gemini_gateway.llm.errors import LLMProviderError
from gemini_gateway.schemas.generation import (
    GenerationFailure,
    GenerationRequest,
    GenerationSuccess,
)

logger = logging.getLogger("gemini_gateway.gemini")

router = APIRouter(prefix="/api", tags=["gemini"])


@router.post(
    "/gemini",
    response_model=GenerationSuccess,
    responses={
        400: {"description": "Prompt missing or invalid body"},
        "4XX": {"model": GenerationFailure, "description": "Upstream client error, e.g. 429"},
        "5XX": {"model": GenerationFailure, "description": "Upstream or gateway failure"},
    },
)
async def generate(
    body: GenerationRequest | None = None,
    provider: TextProvider = Depends(get_llm_provider),
    settings: Settings = Depends(get_settings),
):
    if body is None or not body.prompt:
        raise bad_request(ErrorReason.PROMPT_REQUIRED)

    model = body.model or settings.GEMINI_MODEL

    try:
        resp = await llm_generate(provider, prompt=body.prompt, model=model)
    except LLMProviderError as e:
        status_code = e.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
        logger.error(
            "gemini_error",
            extra={"code": ErrorCode.UPSTREAM_ERROR.value, "model": model, "status_code": status_code},
            exc_info=e,
        )
        failure = GenerationFailure(error=e.message or ErrorReason.UNKNOWN.value)
        return JSONResponse(status_code=status_code, content=failure.model_dump())

    return GenerationSuccess(text=resp.output_text)
