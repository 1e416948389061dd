"""factory.py — Builds the deterministic mock roster.

Pipeline (all draws from one ``XorShift32``, in this order):
    1. generate_population()    → ordered PersonRecords, ids 1..N
    2. partition_arrivals()     → first N arrived, next M not-arrived
    3. augment_with_tracking()  → last-known position + track per not-arrived

``initialize_roster()`` runs the pipeline once and returns an immutable
``Roster``. The app lifespan calls it at startup; nothing here runs at
import time.

Called by: core/providers/mock_people.py, scripts/dump_roster.py
Depends on: fixtures.py, core/random_source.py, models/schemas.py
"""

from __future__ import annotations

import math
import time
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from rollcall.core.random_source import XorShift32
from rollcall.mock.fixtures import (
    AREAS,
    ARRIVED_COUNT,
    AVATAR_PATH,
    DEFAULT_SEED,
    DEPTS,
    EXPECTED_COUNT,
    LAST_SEEN_WINDOW_MS,
    NAMES,
    POSITION_JITTER_DEG,
    POSITIONS,
    REFERENCE_POINT,
    ROOMS,
    SHIFTS,
    TRACK_INTERVAL_MS,
    TRACK_LENGTH,
    TRACK_STEP_DEG,
)
from rollcall.models.schemas import PersonRecord, TrackSample, UnresolvedPersonRecord


@dataclass(frozen=True)
class Roster:
    """Immutable result of one roster initialisation."""

    seed: int
    generated_at: int  # epoch milliseconds used as "now" for tracking data
    arrived: tuple[PersonRecord, ...]
    not_arrived: tuple[UnresolvedPersonRecord, ...]

    @property
    def expected_count(self) -> int:
        return len(self.arrived) + len(self.not_arrived)

    def deep_copy(self) -> Roster:
        """Return a roster whose records share no mutable state with this one."""
        return Roster(
            seed=self.seed,
            generated_at=self.generated_at,
            arrived=tuple(p.model_copy(deep=True) for p in self.arrived),
            not_arrived=tuple(p.model_copy(deep=True) for p in self.not_arrived),
        )


def _now_ms() -> int:
    return int(time.time() * 1000)


def _round_half_up(value: float) -> int:
    # WHY: round() is banker's rounding; the dashboard data uses half-up.
    return math.floor(value + 0.5)


def generate_population(rng: XorShift32, size: int) -> list[PersonRecord]:
    """Generate ``size`` people in id order.

    Field draws happen in a fixed order per person (name, position, room,
    dept, shift, phone), so the output is a pure function of the
    generator state on entry.

    Raises:
        ValueError: If ``size`` is negative.
    """
    if size < 0:
        raise ValueError(f"Population size must be >= 0, got {size}")

    people: list[PersonRecord] = []
    for i in range(size):
        people.append(
            PersonRecord(
                id=i + 1,
                group=1 if i % 2 == 0 else 2,
                name=rng.pick(NAMES),
                position=rng.pick(POSITIONS),
                room=rng.pick(ROOMS),
                dept=rng.pick(DEPTS),
                shift=rng.pick(SHIFTS),
                phone=rng.build_phone(),
                avatar=AVATAR_PATH,
            )
        )
    return people


def partition_arrivals(
    population: Sequence[PersonRecord],
    arrived_count: int,
    not_arrived_count: int,
) -> tuple[list[PersonRecord], list[PersonRecord]]:
    """Split the population positionally into (arrived, not_arrived).

    Arrival is decided by generation position only, not by any check-in
    event.

    Raises:
        ValueError: If a count is negative or the counts don't cover the
            population exactly.
    """
    if arrived_count < 0 or not_arrived_count < 0:
        raise ValueError(
            f"Counts must be >= 0 (arrived={arrived_count}, not_arrived={not_arrived_count})"
        )
    if arrived_count + not_arrived_count != len(population):
        raise ValueError(
            f"arrived ({arrived_count}) + not_arrived ({not_arrived_count}) "
            f"must equal population size ({len(population)})"
        )

    arrived = list(population[:arrived_count])
    not_arrived = list(population[arrived_count:arrived_count + not_arrived_count])
    return arrived, not_arrived


def augment_with_tracking(
    rng: XorShift32,
    not_arrived: Sequence[PersonRecord],
    now_ms: int,
    reference: tuple[float, float] = REFERENCE_POINT,
) -> list[UnresolvedPersonRecord]:
    """Attach a last-known position, confidence, area and track to each person.

    Records are independent of each other; only the shared generator
    state links them.

    Args:
        rng: Generator shared with the population pass.
        not_arrived: People to decorate, in order.
        now_ms: Generation time in epoch milliseconds.
        reference: (lon, lat) the positions are jittered around.

    Returns:
        New ``UnresolvedPersonRecord`` instances in input order.
    """
    ref_lon, ref_lat = reference
    augmented: list[UnresolvedPersonRecord] = []

    for person in not_arrived:
        base_lon = ref_lon + (rng.next() - 0.5) * POSITION_JITTER_DEG
        base_lat = ref_lat + (rng.next() - 0.5) * POSITION_JITTER_DEG
        last_time = now_ms - math.floor(rng.next() * LAST_SEEN_WINDOW_MS)
        confidence = _round_half_up(rng.next() * 100) / 100
        last_area = rng.pick(AREAS)

        # Earliest sample first; the final sample is stamped last_time.
        track: list[TrackSample] = []
        for i in range(TRACK_LENGTH):
            factor = (i + 1) * TRACK_STEP_DEG
            lon = base_lon - factor * (rng.next() - 0.5)
            lat = base_lat - factor * (rng.next() - 0.5)
            track.append(
                TrackSample(
                    lon=lon,
                    lat=lat,
                    time=last_time - (TRACK_LENGTH - 1 - i) * TRACK_INTERVAL_MS,
                )
            )

        augmented.append(
            UnresolvedPersonRecord(
                **person.model_dump(),
                last_lon=base_lon,
                last_lat=base_lat,
                last_time=last_time,
                confidence=confidence,
                last_area=last_area,
                track=track,
            )
        )

    return augmented


def initialize_roster(
    seed: int = DEFAULT_SEED,
    expected_count: int = EXPECTED_COUNT,
    arrived_count: int = ARRIVED_COUNT,
    *,
    now_ms: int | None = None,
    reference: tuple[float, float] = REFERENCE_POINT,
) -> Roster:
    """Run the full generation pipeline once.

    Called by: MockPeopleProvider (at app startup) and the dump_roster CLI.

    Args:
        seed: Non-zero xorshift seed.
        expected_count: Total population size.
        arrived_count: Leading slice treated as arrived; the rest are
            not-arrived.
        now_ms: Generation time in epoch ms. Defaults to the wall clock;
            pass a fixed value for byte-identical output.
        reference: (lon, lat) for the tracking jitter.

    Raises:
        ValueError: On a zero seed or counts that don't fit.
    """
    if expected_count < 0:
        raise ValueError(f"expected_count must be >= 0, got {expected_count}")
    if not 0 <= arrived_count <= expected_count:
        raise ValueError(
            f"arrived_count must be within 0..{expected_count}, got {arrived_count}"
        )

    generated_at = _now_ms() if now_ms is None else now_ms
    rng = XorShift32(seed)

    population = generate_population(rng, expected_count)
    arrived, not_arrived = partition_arrivals(
        population, arrived_count, expected_count - arrived_count
    )
    unresolved = augment_with_tracking(rng, not_arrived, generated_at, reference)

    # Looked up per call: the CLI reconfigures output after app import.
    structlog.get_logger().info(
        "roster_initialized",
        seed=seed,
        expected=expected_count,
        arrived=len(arrived),
        not_arrived=len(unresolved),
        generated_at=generated_at,
    )
    return Roster(
        seed=seed,
        generated_at=generated_at,
        arrived=tuple(arrived),
        not_arrived=tuple(unresolved),
    )
