"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from rollcall.core.environment import get_environment_info
from rollcall.models.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service health check. The mock roster has no upstream, so always healthy."""
    info = get_environment_info()
    return HealthResponse(
        status="healthy",
        version=info.version,
        app_env=info.app_env,
        provider=info.provider,
        expected_count=info.expected_count,
    )
