"""mock_people.py — Mock people provider backed by the seeded roster.

Implements the PeopleProvider protocol over an in-memory ``Roster``.
Every call sleeps for MOCK_LATENCY_MS to mimic a network round trip, then
hands back deep copies so callers can mutate results freely.

Called by: registry.py (when PEOPLE_PROVIDER=mock), API route dependencies
Depends on: mock/factory.py (roster), protocols.py, registry.py
"""

from __future__ import annotations

import asyncio
import logging

from rollcall.config import Settings
from rollcall.core.registry import register_provider
from rollcall.mock.factory import Roster, initialize_roster
from rollcall.models.schemas import PersonRecord, RosterSummary, UnresolvedPersonRecord

logger = logging.getLogger(__name__)


class MockPeopleProvider:
    """Serves the deterministic roster with an artificial delay.

    The roster is built (or copied) once in ``__init__`` and never mutated. Concurrent
    fetches only share read access to it, so no locking is needed.

    Usage:
        Set PEOPLE_PROVIDER=mock (the default) to activate.
    """

    def __init__(self, settings: Settings, roster: Roster | None = None) -> None:
        """Initialize the provider.

        Args:
            settings: Supplies seed, headcounts, reference point and latency.
            roster: Prebuilt roster (tests pass one with a fixed ``now``).
                Built from ``settings`` when omitted.
        """
        self._latency = settings.mock_latency_seconds
        if roster is None:
            roster = initialize_roster(
                seed=settings.mock_seed,
                expected_count=settings.mock_expected_count,
                arrived_count=settings.mock_arrived_count,
                reference=(settings.reference_lon, settings.reference_lat),
            )
        else:
            roster = roster.deep_copy()
        self._roster = roster
        logger.info(
            "🎭 MockPeopleProvider initialized — %d arrived, %d not arrived, %.0f ms latency",
            len(self._roster.arrived),
            len(self._roster.not_arrived),
            self._latency * 1000,
        )

    @property
    def roster(self) -> Roster:
        """Detached copy of the served roster; edits to it never reach fetches."""
        return self._roster.deep_copy()

    async def _delay(self) -> None:
        # Cooperative: other requests keep running while this one waits.
        await asyncio.sleep(self._latency)

    async def fetch_arrived_people(self) -> list[PersonRecord]:
        """Return deep copies of the arrived slice after the mock latency."""
        await self._delay()
        logger.debug("MockPeople.fetch_arrived_people → %d records", len(self._roster.arrived))
        return [person.model_copy(deep=True) for person in self._roster.arrived]

    async def fetch_not_arrived_people(self) -> list[UnresolvedPersonRecord]:
        """Return deep copies of the not-arrived slice after the mock latency."""
        await self._delay()
        logger.debug(
            "MockPeople.fetch_not_arrived_people → %d records", len(self._roster.not_arrived)
        )
        return [person.model_copy(deep=True) for person in self._roster.not_arrived]

    async def get_not_arrived_person(self, person_id: int) -> UnresolvedPersonRecord | None:
        await self._delay()
        for person in self._roster.not_arrived:
            if person.id == person_id:
                return person.model_copy(deep=True)
        return None

    async def summary(self) -> RosterSummary:
        # No delay: the header counts render before the lists load.
        return RosterSummary(
            expected=self._roster.expected_count,
            arrived=len(self._roster.arrived),
            not_arrived=len(self._roster.not_arrived),
            generated_at=self._roster.generated_at,
            seed=self._roster.seed,
        )


register_provider("mock", MockPeopleProvider)
