"""Pydantic v2 schemas for API response bodies."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# WHY: The dashboard reads camelCase keys (lastLon, lastTime, ...).
# populate_by_name keeps snake_case usable from Python.
_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─── Health ────────────────────────────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = "0.1.0"
    app_env: str = "development"
    provider: str = "mock"
    expected_count: int = 0


# ─── People ────────────────────────────────────────────────────────────────────


class PersonRecord(BaseModel):
    """One generated roster entry."""

    model_config = _CAMEL_CONFIG

    id: int = Field(..., ge=1)
    name: str
    group: int = Field(..., ge=1, le=2)
    position: str
    room: str
    dept: str
    shift: str
    phone: str = Field(..., min_length=11, max_length=11)
    avatar: str


class TrackSample(BaseModel):
    model_config = _CAMEL_CONFIG

    lon: float
    lat: float
    time: int  # epoch milliseconds


class UnresolvedPersonRecord(PersonRecord):
    """A not-arrived roster entry decorated with last-known tracking data."""

    last_lon: float
    last_lat: float
    last_time: int  # epoch milliseconds
    confidence: float = Field(..., ge=0.0, le=1.0)
    last_area: str
    track: list[TrackSample]


class RosterSummary(BaseModel):
    """Headcount totals for the dashboard header."""

    model_config = _CAMEL_CONFIG

    expected: int
    arrived: int
    not_arrived: int
    generated_at: int  # epoch milliseconds
    seed: int


# ─── Errors ────────────────────────────────────────────────────────────────────


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
