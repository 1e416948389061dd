"""CLI dump of the seeded mock roster as JSON.

Useful for front-end fixtures and for diffing two seeds. Pass ``--now-ms``
to get byte-identical output across runs.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

import structlog

from rollcall.config import get_settings
from rollcall.mock.factory import Roster, initialize_roster


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Print the deterministic Rollcall roster as JSON.",
    )
    parser.add_argument("--seed", type=int, default=settings.mock_seed, help="xorshift seed (non-zero).")
    parser.add_argument(
        "--expected",
        type=int,
        default=settings.mock_expected_count,
        help="Total population size.",
    )
    parser.add_argument(
        "--arrived",
        type=int,
        default=settings.mock_arrived_count,
        help="Leading slice of the population treated as arrived.",
    )
    parser.add_argument(
        "--now-ms",
        type=int,
        default=None,
        help="Generation time in epoch ms (defaults to the wall clock).",
    )
    parser.add_argument(
        "--subset",
        choices=("all", "arrived", "not-arrived"),
        default="all",
        help="Which part of the roster to print.",
    )
    return parser


def render_roster(roster: Roster, subset: str = "all") -> dict | list:
    arrived = [person.model_dump(by_alias=True) for person in roster.arrived]
    not_arrived = [person.model_dump(by_alias=True) for person in roster.not_arrived]
    if subset == "arrived":
        return arrived
    if subset == "not-arrived":
        return not_arrived
    return {
        "seed": roster.seed,
        "generatedAt": roster.generated_at,
        "arrived": arrived,
        "notArrived": not_arrived,
    }


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    # stdout carries the JSON payload; logs go to stderr.
    structlog.configure(logger_factory=structlog.PrintLoggerFactory(file=sys.stderr))
    settings = get_settings()
    roster = initialize_roster(
        seed=args.seed,
        expected_count=args.expected,
        arrived_count=args.arrived,
        now_ms=args.now_ms,
        reference=(settings.reference_lon, settings.reference_lat),
    )
    print(json.dumps(render_roster(roster, args.subset), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
