# gemini_gateway/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Gemini
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
