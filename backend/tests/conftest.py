"""Global pytest fixtures."""

from __future__ import annotations

import pytest

from rollcall.config import Settings
from rollcall.core.providers.mock_people import MockPeopleProvider
from rollcall.mock.factory import Roster, initialize_roster

# Fixed generation time so tracking timestamps are reproducible.
FIXED_NOW_MS = 1_760_000_000_000


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def fast_settings() -> Settings:
    """Default settings with the artificial latency switched off."""
    return Settings(_env_file=None, mock_latency_ms=0)


@pytest.fixture
def roster() -> Roster:
    return initialize_roster(now_ms=FIXED_NOW_MS)


@pytest.fixture
def fast_provider(fast_settings: Settings, roster: Roster) -> MockPeopleProvider:
    return MockPeopleProvider(fast_settings, roster=roster)
