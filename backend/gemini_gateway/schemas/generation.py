"""
generation.py (schemas)
- Purpose: Request/response DTOs for the health and generation endpoints.
"""

from typing import Literal, Optional

from pydantic import BaseModel


class GenerationRequest(BaseModel):
    """
    `prompt` is optional at the schema level so that a missing prompt is
    reported as "Prompt is required" by the router, not as a schema error.
    """
    prompt: Optional[str] = None
    model: Optional[str] = None


class GenerationSuccess(BaseModel):
    success: Literal[True] = True
    text: str


class GenerationFailure(BaseModel):
    success: Literal[False] = False
    error: str


class HealthResponse(BaseModel):
    status: Literal["UP"] = "UP"
    timestamp: str
    service: str
