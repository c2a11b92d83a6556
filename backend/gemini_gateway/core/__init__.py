# gemini_gateway/core/__init__.py
from gemini_gateway.core.errors import AppError
from gemini_gateway.core.error_codes import ErrorCode
from gemini_gateway.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
