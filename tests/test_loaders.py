"""Tests for payload validation and the static repository."""

from __future__ import annotations

import pytest

from pilot_analytics import (
    PilotAnalyticsValidationError,
    PilotNotFoundError,
    StaticPilotRepository,
    load_lap_groups,
    load_metrics,
    load_timeline,
)
from pilot_analytics.models import MetricSummary, RaceLapGroup, TimelineLap

TIMELINE_PAYLOAD = [
    {"id": "a1", "race_id": "A", "lap_number": 1, "lap_duration": 20.0, "overall_index": 0},
    {"id": "a2", "race_id": "A", "lap_number": 2, "lap_duration": 19.0, "overall_index": 1},
]

GROUPS_PAYLOAD = [
    {
        "race": {"id": "A", "label": "Heat A", "target_laps": 2},
        "holeshot": {"id": "a0", "lap_number": 0, "lap_duration": 5.0},
        "laps": [
            {"id": "a1", "lap_number": 1, "lap_duration": 20.0},
            {"id": "a2", "lap_number": 2, "lap_duration": 19.0},
        ],
    }
]


class TestLoaders:
    def test_load_timeline(self) -> None:
        laps = load_timeline(TIMELINE_PAYLOAD)
        assert len(laps) == 2
        assert all(isinstance(lap, TimelineLap) for lap in laps)

    def test_load_lap_groups(self) -> None:
        groups = load_lap_groups(GROUPS_PAYLOAD)
        assert len(groups) == 1
        assert isinstance(groups[0], RaceLapGroup)
        assert groups[0].holeshot.lap_duration == 5.0

    def test_empty_payloads(self) -> None:
        assert load_timeline([]) == []
        assert load_lap_groups([]) == []

    def test_invalid_timeline_raises(self) -> None:
        with pytest.raises(PilotAnalyticsValidationError, match="TimelineLap"):
            load_timeline([{"id": "a1", "lap_duration": "fast"}])

    def test_invalid_metrics_raises(self) -> None:
        with pytest.raises(PilotAnalyticsValidationError, match="MetricSummary"):
            load_metrics({"best_lap_time_seconds": "quick"})

    def test_missing_duration_loads(self) -> None:
        laps = load_timeline(
            [
                {"id": "a1", "race_id": "A", "lap_number": 1, "lap_duration": None, "overall_index": 0},
                {"id": "a2", "race_id": "A", "lap_number": 2, "overall_index": 1},
            ]
        )
        assert [lap.lap_duration for lap in laps] == [None, None]
        groups = load_lap_groups(
            [{"race": {"id": "A", "label": "Heat A"}, "holeshot": {"id": "a0", "lap_number": 0}}]
        )
        assert groups[0].holeshot.lap_duration is None

    def test_missing_metrics(self) -> None:
        assert load_metrics(None) == MetricSummary()

    def test_validation_error_is_chained(self) -> None:
        with pytest.raises(PilotAnalyticsValidationError) as excinfo:
            load_lap_groups([{"race": {}}])
        assert excinfo.value.__cause__ is not None


class TestStaticPilotRepository:
    @pytest.fixture
    def repo(self) -> StaticPilotRepository:
        return StaticPilotRepository(
            {
                "pilot-1": {
                    "timeline": TIMELINE_PAYLOAD,
                    "lap_groups": GROUPS_PAYLOAD,
                    "metrics": {"best_lap_time_seconds": 19.0},
                },
                "rookie": {},
            }
        )

    def test_returns_models(self, repo) -> None:
        assert len(repo.get_timeline("pilot-1")) == 2
        assert repo.get_lap_groups("pilot-1")[0].race.label == "Heat A"
        assert repo.get_metrics("pilot-1").best_lap_time_seconds == 19.0

    def test_pilot_without_laps(self, repo) -> None:
        assert repo.get_timeline("rookie") == []
        assert repo.get_lap_groups("rookie") == []
        assert repo.get_metrics("rookie") == MetricSummary()

    def test_unknown_pilot(self, repo) -> None:
        with pytest.raises(PilotNotFoundError) as excinfo:
            repo.get_timeline("ghost")
        assert excinfo.value.pilot_id == "ghost"
