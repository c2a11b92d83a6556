"""
exception_handlers.py
- Purpose: Convert AppError, request validation failures and any other
  exception into JSON responses.

Every failure is logged with the request context.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gemini_gateway.core import AppError, ErrorCode, ErrorReason
from gemini_gateway.core.request_context import clear_context, get_context

logger = logging.getLogger("gemini_gateway.exceptions")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(
        "app_error",
        extra={
            "path": str(getattr(request.url, "path", "")),
            "method": request.method,
            "status_code": exc.status_code,
            "code": getattr(exc, "code", None),
            "reason": getattr(exc, "reason", None),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    err = AppError(
        code=ErrorCode.VALIDATION_ERROR,
        reason=ErrorReason.INVALID_BODY.value,
        details={"errors": exc.errors()},
    )
    logger.warning(
        "validation_error",
        extra={
            "path": str(getattr(request.url, "path", "")),
            "method": request.method,
            "status_code": err.status_code,
            "details": err.details,
        },
    )
    return JSONResponse(status_code=err.status_code, content=err.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside the request middleware; it left the context bound for us.
    ctx = get_context()
    try:
        logger.exception(
            "unhandled_exception",
            extra={
                "path": str(getattr(request.url, "path", "")),
                "method": request.method,
                "code": ErrorCode.INTERNAL_ERROR.value,
                **ctx,
            },
            exc_info=exc,
        )
    finally:
        clear_context()

    headers = {"x-request-id": ctx["request_id"]} if "request_id" in ctx else None
    return JSONResponse(
        status_code=500,
        content={"error": ErrorReason.INTERNAL_ERROR.value},
        headers=headers,
    )
