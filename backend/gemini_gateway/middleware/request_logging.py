from __future__ import annotations

import time
import uuid
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from gemini_gateway.core.request_context import set_context, clear_context


logger = logging.getLogger("gemini_gateway.http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One line in, one line out per request, tagged with x-request-id."""

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        set_context(request_id=rid)

        client = request.client.host if request.client else None
        t0 = time.perf_counter()

        logger.info(
            "http.request",
            extra={"method": request.method, "path": request.url.path, "client": client},
        )
        try:
            response: Response = await call_next(request)
        except Exception:
            logger.info(
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": 500,
                    "duration_ms": round((time.perf_counter() - t0) * 1000, 1),
                },
            )
            # Context stays bound; unhandled_exception_handler clears it.
            raise

        logger.info(
            "http.response",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - t0) * 1000, 1),
                "content_length": response.headers.get("content-length"),
            },
        )

        response.headers["x-request-id"] = rid
        clear_context()
        return response
