"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from rollcall.core.protocols import PeopleProvider


def get_people_provider(request: Request) -> PeopleProvider:
    """Return the provider the lifespan stored on ``app.state``."""
    return request.app.state.people_provider


PeopleDep = Annotated[PeopleProvider, Depends(get_people_provider)]
