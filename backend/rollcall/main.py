"""FastAPI application factory.

Builds the FastAPI app with middleware, routes, and lifespan events.
The lifespan validates settings and builds the people provider (and with
it the seeded roster) exactly once, before the first request is served.

Called by: Uvicorn (``uvicorn rollcall.main:app``)
Depends on: config.py, environment.py, registry.py, routes/*, middleware.py
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rollcall.api.middleware import register_middleware
from rollcall.api.routes import health, people
from rollcall.config import get_settings
from rollcall.core.environment import APP_VERSION, validate_environment
from rollcall.core.protocols import PeopleFetchError
from rollcall.core.registry import get_provider_registry

_settings = get_settings()
_log_level = getattr(logging, _settings.log_level.upper(), logging.INFO)

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if not _settings.is_production
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(_log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown events.

    Validates configuration, then resolves the people provider so the
    roster is generated once and shared read-only by every request.
    """
    settings = get_settings()
    validate_environment(settings)
    app.state.people_provider = get_provider_registry().get_people()
    logger.info(
        "app_startup",
        env=settings.app_env,
        people_provider=settings.people_provider,
        expected=settings.mock_expected_count,
        arrived=settings.mock_arrived_count,
        latency_ms=settings.mock_latency_ms,
    )
    yield
    logger.info("app_shutdown")


async def _people_fetch_error_handler(request: Request, exc: PeopleFetchError) -> JSONResponse:
    logger.error(
        "people_fetch_failed",
        error=str(exc),
        path=request.url.path,
        request_id=getattr(request.state, "request_id", "unknown"),
    )
    return JSONResponse(
        status_code=502,
        content={
            "error": {
                "code": "PEOPLE_SOURCE_UNAVAILABLE",
                "message": "The personnel data source is unavailable. Please retry shortly.",
            }
        },
    )


def create_app() -> FastAPI:
    """Build and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Rollcall",
        description="Arrived / not-arrived personnel data for the tracking dashboard",
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_middleware(app)
    app.add_exception_handler(PeopleFetchError, _people_fetch_error_handler)

    app.include_router(health.router)
    app.include_router(people.router)

    return app


app = create_app()
