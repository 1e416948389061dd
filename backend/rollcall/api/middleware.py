"""HTTP middleware for the roster API.

Every dashboard call gets a request id that is echoed back in
``X-Request-ID`` and bound into structlog's context, so the
``request_completed`` line and any provider log emitted while serving
it can be joined on one id. Unhandled failures are turned into the same
``{"error": {...}}`` envelope the 502 handler in main.py uses.

Stack, outermost first:
    ErrorHandlerMiddleware → SecurityHeadersMiddleware → LoggingMiddleware → RequestIDMiddleware

Called by: main.py (``register_middleware()``)
"""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from rollcall.models.schemas import ErrorDetail, ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by the dashboard and orchestrators; logged at debug only.
_QUIET_PATHS = frozenset({"/health"})


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag the request with an id and bind it into the structlog context.

    A caller-supplied ``X-Request-ID`` is reused so the dashboard can
    correlate its own fetch logs with ours.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """One ``request_completed`` event per call, including the mock latency."""

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

        log = logger.debug if request.url.path in _QUIET_PATHS else logger.info
        log(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=elapsed_ms,
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn an unhandled exception into a 500 ``ErrorResponse``.

    The traceback stays in the log; the client only sees a fixed message
    and the request id to quote when reporting it.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        try:
            return await call_next(request)
        except Exception:
            request_id = getattr(request.state, "request_id", None)
            logger.exception("unhandled_error", path=request.url.path)
            body = ErrorResponse(
                error=ErrorDetail(
                    code="INTERNAL_ERROR",
                    message="Rollcall hit an unexpected error. Please retry shortly.",
                )
            )
            headers = {REQUEST_ID_HEADER: request_id} if request_id else None
            return JSONResponse(status_code=500, content=body.model_dump(), headers=headers)


def register_middleware(app: FastAPI) -> None:
    """Install the stack; Starlette wraps in reverse registration order."""
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
