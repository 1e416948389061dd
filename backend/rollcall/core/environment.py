"""environment.py — Startup validation and environment metadata.

Checks the roster settings before anything is generated, so a bad
MOCK_ARRIVED_COUNT or MOCK_SEED fails the boot instead of the first request.

Called by: main.py (lifespan), api/routes/health.py
Depends on: config.py (Settings), registry.py (provider names)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import urlparse

from rollcall.config import Settings, get_settings
from rollcall.core.registry import available_providers

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@dataclass(frozen=True)
class EnvironmentInfo:
    """Immutable snapshot of the current environment configuration."""

    app_env: str
    version: str
    provider: str
    expected_count: int


def get_environment_info(settings: Settings | None = None) -> EnvironmentInfo:
    settings = settings or get_settings()
    return EnvironmentInfo(
        app_env=settings.app_env,
        version=APP_VERSION,
        provider=settings.people_provider,
        expected_count=settings.mock_expected_count,
    )


def _is_valid_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_environment(settings: Settings | None = None) -> None:
    """Validate configuration on startup.

    Checks:
        - PEOPLE_PROVIDER names a registered provider.
        - Headcounts are consistent and the seed is usable.
        - ALLOWED_ORIGINS are http(s) URLs, and not '*' in production.

    Raises:
        ValueError: On invalid provider or roster settings.
        RuntimeError: On invalid CORS configuration.
    """
    settings = settings or get_settings()

    providers = available_providers()
    if settings.people_provider not in providers:
        raise ValueError(
            f"Invalid PEOPLE_PROVIDER='{settings.people_provider}'. "
            f"Must be one of: {providers}"
        )

    if settings.mock_expected_count <= 0:
        raise ValueError(
            f"MOCK_EXPECTED_COUNT must be positive, got {settings.mock_expected_count}"
        )
    if not 0 <= settings.mock_arrived_count <= settings.mock_expected_count:
        raise ValueError(
            f"MOCK_ARRIVED_COUNT must be within 0..{settings.mock_expected_count}, "
            f"got {settings.mock_arrived_count}"
        )
    if settings.mock_seed % 2**32 == 0:
        raise ValueError("MOCK_SEED must be non-zero modulo 2**32")
    if settings.mock_latency_ms < 0:
        raise ValueError(f"MOCK_LATENCY_MS must be >= 0, got {settings.mock_latency_ms}")

    origins = settings.allowed_origins_list
    if "*" in origins:
        if settings.is_production:
            raise RuntimeError("ALLOWED_ORIGINS cannot contain '*' in production.")
        logger.warning("ALLOWED_ORIGINS contains '*'. This is unsafe outside local development.")
        origins = [origin for origin in origins if origin != "*"]

    invalid_origins = [origin for origin in origins if not _is_valid_http_url(origin)]
    if invalid_origins:
        raise RuntimeError(f"ALLOWED_ORIGINS has invalid URL(s): {', '.join(invalid_origins)}")

    logger.info(
        "Environment initialized: env=%s, provider=%s, expected=%d, arrived=%d",
        settings.app_env,
        settings.people_provider,
        settings.mock_expected_count,
        settings.mock_arrived_count,
    )
