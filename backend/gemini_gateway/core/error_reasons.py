"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; clients match on them.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "An unexpected error occurred"

    PROMPT_REQUIRED = "Prompt is required"
    INVALID_BODY = "Invalid request body"
    API_KEY_MISSING = "API_KEY is not configured"
    INTERNAL_ERROR = "Internal Server Error"
