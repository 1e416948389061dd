"""Application settings via pydantic-settings.

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  DEVELOPER QUICK-START  — What env vars do I need?
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#  None.  Every setting has a working default and the only people provider
#  that ships is the deterministic mock (PEOPLE_PROVIDER=mock).
#
# ─── Roster Generation ────────────────────────────────────────────────────────
#
#   Setting              Default     Env Var
#   ───────              ───────     ───────
#   Seed                 42          MOCK_SEED
#   Expected headcount   80          MOCK_EXPECTED_COUNT
#   Arrived headcount    72          MOCK_ARRIVED_COUNT
#   Fetch latency (ms)   300         MOCK_LATENCY_MS
#   Reference point      Beijing     REFERENCE_LON / REFERENCE_LAT
#
#   The not-arrived headcount is always EXPECTED - ARRIVED.
#   Same seed → same roster (names, phones, coordinates, track offsets).
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from environment variables.

    Called by: Every module that needs configuration (via ``get_settings()``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: str = "development"
    log_level: str = "INFO"
    # Comma-separated CORS origins. Default is the Vite dev server.
    allowed_origins: str = "http://localhost:5173"

    # ─── Provider Selection ───────────────────────────────────────────────────
    # Available options:
    #   people_provider: "mock"
    people_provider: str = "mock"

    # ─── Mock Roster ──────────────────────────────────────────────────────────
    mock_seed: int = 42
    mock_expected_count: int = 80
    mock_arrived_count: int = 72
    mock_latency_ms: int = 300

    # Fixed point the not-arrived positions are jittered around.
    reference_lon: float = 116.397428
    reference_lat: float = 39.90923

    # ─── Computed Properties ──────────────────────────────────────────────────

    @property
    def is_production(self) -> bool:
        """True when app_env is explicitly set to 'production'."""
        return self.app_env == "production"

    @property
    def mock_not_arrived_count(self) -> int:
        """Remainder of the expected headcount after the arrived slice."""
        return self.mock_expected_count - self.mock_arrived_count

    @property
    def mock_latency_seconds(self) -> float:
        return self.mock_latency_ms / 1000

    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a normalized list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
