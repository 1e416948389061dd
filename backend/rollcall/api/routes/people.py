"""People routes — arrived / not-arrived lists for the dashboard.

Endpoints:
    GET /api/v1/people/summary                  – Headcount totals
    GET /api/v1/people/arrived                  – Arrived list
    GET /api/v1/people/not-arrived              – Not-arrived list with tracking data
    GET /api/v1/people/not-arrived/{person_id}  – One trace-view record

Called by: main.py
Depends on: deps.py (PeopleDep)

PeopleFetchError from the provider is mapped to 502 by the handler in main.py.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from rollcall.api.deps import PeopleDep
from rollcall.models.schemas import (
    ErrorResponse,
    PersonRecord,
    RosterSummary,
    UnresolvedPersonRecord,
)

router = APIRouter(
    prefix="/api/v1/people",
    tags=["people"],
    responses={status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse}},
)


@router.get("/summary", response_model=RosterSummary)
async def get_summary(people: PeopleDep) -> RosterSummary:
    """Return expected / arrived / not-arrived totals."""
    return await people.summary()


@router.get("/arrived", response_model=list[PersonRecord])
async def list_arrived(people: PeopleDep) -> list[PersonRecord]:
    """List everyone who has arrived, in roster order."""
    return await people.fetch_arrived_people()


@router.get("/not-arrived", response_model=list[UnresolvedPersonRecord])
async def list_not_arrived(people: PeopleDep) -> list[UnresolvedPersonRecord]:
    """List everyone not yet arrived, each with last-known position and track."""
    return await people.fetch_not_arrived_people()


@router.get("/not-arrived/{person_id}", response_model=UnresolvedPersonRecord)
async def get_not_arrived(person_id: int, people: PeopleDep) -> UnresolvedPersonRecord:
    """Return one not-arrived person for the trace view.

    Raises:
        HTTPException 404: If the id is not in the not-arrived list.
    """
    person = await people.get_not_arrived_person(person_id)
    if person is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No not-arrived person with id {person_id}",
        )
    return person
