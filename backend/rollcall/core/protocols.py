"""Provider protocols — abstract interface for the people data source.

Route handlers import ``PeopleProvider``, never a concrete implementation.
Today the only implementation is the deterministic mock; a real check-in
backend would slot in behind the same protocol via ``PEOPLE_PROVIDER``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rollcall.models.schemas import PersonRecord, RosterSummary, UnresolvedPersonRecord


class PeopleFetchError(Exception):
    """A provider could not retrieve people data.

    The API layer maps this to HTTP 502. The mock provider never raises
    it, but callers must treat every fetch as fallible.
    """


@runtime_checkable
class PeopleProvider(Protocol):
    """Abstract interface for arrived / not-arrived personnel lookups.

    Every method returns caller-owned data: mutating a result must never
    affect another call's result.
    """

    async def fetch_arrived_people(self) -> list[PersonRecord]:
        """Return everyone who has arrived, in roster order.

        Raises:
            PeopleFetchError: If the data source is unavailable.
        """
        ...

    async def fetch_not_arrived_people(self) -> list[UnresolvedPersonRecord]:
        """Return everyone not yet arrived, with last-known tracking data.

        Raises:
            PeopleFetchError: If the data source is unavailable.
        """
        ...

    async def get_not_arrived_person(self, person_id: int) -> UnresolvedPersonRecord | None:
        """Return one not-arrived person by id, or None if not in that list."""
        ...

    async def summary(self) -> RosterSummary:
        """Return headcount totals."""
        ...
