"""Tests for startup validation (core/environment.py).

Run with: pytest backend/tests/unit/test_environment.py -v
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from rollcall.config import Settings
from rollcall.core.environment import APP_VERSION, get_environment_info, validate_environment


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestEnvironmentInfo:
    """Tests for get_environment_info()."""

    def test_reflects_settings(self):
        info = get_environment_info(_settings(app_env="staging", mock_expected_count=50))
        assert info.app_env == "staging"
        assert info.version == APP_VERSION
        assert info.provider == "mock"
        assert info.expected_count == 50

    @patch("rollcall.core.environment.get_settings")
    def test_falls_back_to_cached_settings(self, mock_settings):
        mock_settings.return_value = _settings(app_env="production")
        assert get_environment_info().app_env == "production"


class TestValidateEnvironment:
    """Tests for the validate_environment() startup check."""

    def test_defaults_validate_ok(self):
        validate_environment(_settings())

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Invalid PEOPLE_PROVIDER"):
            validate_environment(_settings(people_provider="ldap"))

    @pytest.mark.parametrize("arrived", [-1, 81])
    def test_arrived_count_out_of_range(self, arrived):
        with pytest.raises(ValueError, match="MOCK_ARRIVED_COUNT"):
            validate_environment(_settings(mock_arrived_count=arrived))

    def test_expected_count_must_be_positive(self):
        with pytest.raises(ValueError, match="MOCK_EXPECTED_COUNT"):
            validate_environment(_settings(mock_expected_count=0, mock_arrived_count=0))

    def test_zero_seed_raises(self):
        with pytest.raises(ValueError, match="MOCK_SEED"):
            validate_environment(_settings(mock_seed=0))

    def test_negative_latency_raises(self):
        with pytest.raises(ValueError, match="MOCK_LATENCY_MS"):
            validate_environment(_settings(mock_latency_ms=-1))

    def test_everyone_arrived_is_valid(self):
        validate_environment(_settings(mock_arrived_count=80))

    def test_wildcard_origin_allowed_in_development(self):
        validate_environment(_settings(allowed_origins="*"))

    def test_wildcard_origin_rejected_in_production(self):
        with pytest.raises(RuntimeError, match="cannot contain"):
            validate_environment(_settings(app_env="production", allowed_origins="*"))

    def test_invalid_origin_raises(self):
        with pytest.raises(RuntimeError, match="invalid URL"):
            validate_environment(_settings(allowed_origins="localhost:5173"))
