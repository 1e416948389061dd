"""Provider registry — resolves the people provider from config.

The registry is the single place where provider implementations are wired.
Route dependencies call ``registry.get_people()`` and get back the
implementation named by ``PEOPLE_PROVIDER``.

Usage:
    from rollcall.core.registry import get_provider_registry

    registry = get_provider_registry()
    people = registry.get_people()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from rollcall.config import Settings, get_settings
from rollcall.core.protocols import PeopleProvider

logger = logging.getLogger(__name__)

# ─── Provider Factory Map ──────────────────────────────────────────────────────
# Adding a new provider = one entry here + one module in providers/.

_PEOPLE_FACTORIES: dict[str, type] = {}


def register_provider(name: str, cls: type) -> None:
    """Register a people provider implementation.

    Called by provider modules on import, or manually in tests.
    """
    _PEOPLE_FACTORIES[name] = cls
    logger.info("Registered people provider: %s", name)


def available_providers() -> list[str]:
    """Names of every registered people provider."""
    _ensure_providers_loaded()
    return sorted(_PEOPLE_FACTORIES)


def _ensure_providers_loaded() -> None:
    """Import provider modules so their ``register_provider()`` calls run."""
    from rollcall.core.providers import mock_people  # noqa: F401


class ProviderRegistry:
    """Resolves and caches provider instances.

    Construction is cheap; the provider itself (and the roster it builds)
    is created on the first ``get_people()`` call.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._instances: dict[str, Any] = {}
        _ensure_providers_loaded()

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def get_people(self, override: str | None = None) -> PeopleProvider:
        """Get the configured people provider."""
        name = override or self.settings.people_provider
        if name in self._instances:
            return self._instances[name]

        cls = _PEOPLE_FACTORIES.get(name)
        if cls is None:
            raise ValueError(
                f"Unknown people provider: '{name}'. "
                f"Available: {sorted(_PEOPLE_FACTORIES)}"
            )

        instance = cls(self.settings)
        self._instances[name] = instance
        logger.info("Initialized people provider: %s", name)
        return instance


@lru_cache
def get_provider_registry() -> ProviderRegistry:
    """Get the singleton provider registry."""
    return ProviderRegistry()
