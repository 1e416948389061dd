"""Tests for the roster dump CLI (scripts/dump_roster.py)."""

from __future__ import annotations

import json

import pytest
import structlog

from scripts.dump_roster import main

NOW_MS = "1760000000000"


@pytest.fixture(autouse=True)
def _reset_structlog():
    """main() reconfigures structlog; undo it so other modules see defaults."""
    yield
    structlog.reset_defaults()


def _run(capsys: pytest.CaptureFixture[str], *args: str):
    assert main(["--now-ms", NOW_MS, *args]) == 0
    return json.loads(capsys.readouterr().out)


def test_dump_all(capsys):
    payload = _run(capsys)
    assert payload["seed"] == 42
    assert payload["generatedAt"] == int(NOW_MS)
    assert len(payload["arrived"]) == 72
    assert len(payload["notArrived"]) == 8


def test_dump_not_arrived_subset(capsys):
    payload = _run(capsys, "--subset", "not-arrived")
    assert [p["id"] for p in payload] == list(range(73, 81))
    assert "lastArea" in payload[0]


def test_dump_is_reproducible(capsys):
    first = _run(capsys, "--seed", "9", "--expected", "20", "--arrived", "18")
    second = _run(capsys, "--seed", "9", "--expected", "20", "--arrived", "18")
    assert first == second
    assert len(first["notArrived"]) == 2


def test_logs_go_to_stderr_after_app_config(capsys):
    """The app's cached stdout logging must not leak into the JSON payload."""
    import rollcall.main  # noqa: F401  (applies the app's structlog config)
    from rollcall.mock.factory import initialize_roster

    initialize_roster(expected_count=4, arrived_count=2, now_ms=int(NOW_MS))
    capsys.readouterr()

    assert main(["--now-ms", NOW_MS, "--expected", "4", "--arrived", "2"]) == 0
    captured = capsys.readouterr()
    assert json.loads(captured.out)["seed"] == 42
    assert "roster_initialized" in captured.err


def test_invalid_counts_fail_fast(capsys):
    with pytest.raises(ValueError):
        main(["--expected", "5", "--arrived", "6"])
