"""Shared fixtures and lap-history factories."""

from __future__ import annotations

import logging
import math

import pytest

from pilot_analytics.models import (
    GroupLap,
    MetricSummary,
    Race,
    RaceLapGroup,
    TimelineLap,
)

BASE_TIMESTAMP_MS = 1_700_000_000_000


# ── Factories ────────────────────────────────────────────────────────────────


def _make_timeline_lap(
    lap_id: str,
    race_id: str = "race-1",
    lap_number: int = 1,
    lap_duration: float | None = 30.0,
    overall_index: int = 0,
    start_timestamp_ms: int | None = None,
    detection_timestamp_ms: int | None = None,
    race_label: str | None = None,
) -> TimelineLap:
    return TimelineLap(
        id=lap_id,
        race_id=race_id,
        race_label=race_label,
        lap_number=lap_number,
        lap_duration=lap_duration,
        overall_index=overall_index,
        start_timestamp_ms=start_timestamp_ms,
        detection_timestamp_ms=detection_timestamp_ms,
    )


def _make_group(
    race_id: str,
    durations: list[float | None],
    holeshot: float | None = 5.0,
    target_laps: int | None = None,
    label: str | None = None,
    order: int = 0,
) -> RaceLapGroup:
    return RaceLapGroup(
        race=Race(
            id=race_id,
            label=label or f"Race {race_id}",
            order=order,
            target_laps=target_laps,
        ),
        holeshot=(
            GroupLap(id=f"{race_id}-hs", lap_number=0, lap_duration=holeshot)
            if holeshot is not None
            else None
        ),
        laps=[
            GroupLap(id=f"{race_id}-l{n}", lap_number=n, lap_duration=d)
            for n, d in enumerate(durations, start=1)
        ],
    )


def _make_history(
    races: list[tuple[str, list[float | None]]],
    targets: dict[str, int] | None = None,
    holeshot: float | None = 5.0,
    with_timestamps: bool = True,
) -> tuple[list[TimelineLap], list[RaceLapGroup]]:
    """Build a timeline and matching lap groups from (race_id, durations) pairs.

    Timed laps only; lap ids are ``<race_id>-l<n>`` in both structures.
    """
    targets = targets or {}
    timeline: list[TimelineLap] = []
    groups: list[RaceLapGroup] = []
    clock = BASE_TIMESTAMP_MS
    overall_index = 0
    for order, (race_id, durations) in enumerate(races):
        groups.append(
            _make_group(
                race_id, durations, holeshot=holeshot,
                target_laps=targets.get(race_id), order=order,
            )
        )
        for n, duration in enumerate(durations, start=1):
            timeline.append(
                _make_timeline_lap(
                    f"{race_id}-l{n}",
                    race_id=race_id,
                    lap_number=n,
                    lap_duration=duration,
                    overall_index=overall_index,
                    start_timestamp_ms=clock if with_timestamps else None,
                    race_label=f"Race {race_id}",
                )
            )
            if duration is not None and math.isfinite(duration):
                clock += int(duration * 1000)
            overall_index += 1
        clock += 60_000
    return timeline, groups


@pytest.fixture
def make_timeline_lap():
    """Factory fixture for creating timeline laps."""
    return _make_timeline_lap


@pytest.fixture
def make_group():
    """Factory fixture for creating race lap groups."""
    return _make_group


@pytest.fixture
def make_history():
    """Factory fixture for creating a timeline with its lap groups."""
    return _make_history


# ── Sample data fixtures ─────────────────────────────────────────────────────


@pytest.fixture
def two_race_history() -> tuple[list[TimelineLap], list[RaceLapGroup]]:
    """Race A: 3 laps (target 2); race B: 4 laps (target 3)."""
    return _make_history(
        [("A", [20.0, 19.0, 21.0]), ("B", [18.5, 19.5, 18.0, 22.0])],
        targets={"A": 2, "B": 3},
    )


@pytest.fixture
def sample_metrics() -> MetricSummary:
    return MetricSummary.model_validate(
        {
            "best_lap_time_seconds": 18.0,
            "fastest_consecutive": {"lap_window": 2, "total_seconds": 36.5},
        }
    )


@pytest.fixture(autouse=True)
def _isolate_service_log(tmp_path):
    """Send the service log to tmp_path and reset the cached logger."""
    import pilot_analytics.service_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("pilot_analytics.service")
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "service_calls.log")

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
