"""
errors.py
- Purpose: AppError raised by routers/providers for consistent errors.
- Pattern: raise AppError(...), the registered handler converts it to JSON.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fastapi import status as http_status

from gemini_gateway.core.error_codes import ErrorCode
from gemini_gateway.core.error_reasons import ErrorReason


def _text(value: Any) -> str:
    # str() on a str-Enum member yields "ErrorReason.X" on 3.11+
    return value.value if isinstance(value, Enum) else str(value)


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def to_dict(self) -> dict[str, Any]:
        # Clients read a flat {"error": "..."}; code/reason go to the logs.
        return {"error": _text(self.message if self.message else self.reason)}


# Convenience constructors
def bad_request(reason: str = ErrorReason.INVALID_BODY, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR) -> AppError:
    return AppError(code=code, reason=_text(reason), status_code=http_status.HTTP_400_BAD_REQUEST)
