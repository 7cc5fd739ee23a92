"""Source-agnostic access to a pilot's lap history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pilot_analytics.exceptions import PilotNotFoundError
from pilot_analytics.loaders import load_lap_groups, load_metrics, load_timeline
from pilot_analytics.models.lap import TimelineLap
from pilot_analytics.models.metrics import MetricSummary
from pilot_analytics.models.race import RaceLapGroup


class PilotDataRepository(ABC):
    """Interface the host implements to hand a finalized lap history over."""

    @abstractmethod
    def get_timeline(self, pilot_id: str) -> list[TimelineLap]: ...

    @abstractmethod
    def get_lap_groups(self, pilot_id: str) -> list[RaceLapGroup]: ...

    @abstractmethod
    def get_metrics(self, pilot_id: str) -> MetricSummary: ...


class StaticPilotRepository(PilotDataRepository):
    """Repository over raw payloads already held in memory.

    Usage:
        repo = StaticPilotRepository({
            "pilot-1": {"timeline": [...], "lap_groups": [...], "metrics": {...}},
        })
        laps = repo.get_timeline("pilot-1")
    """

    def __init__(self, payloads: dict[str, dict[str, Any]]) -> None:
        self._payloads = payloads

    def _payload(self, pilot_id: str) -> dict[str, Any]:
        try:
            return self._payloads[pilot_id]
        except KeyError:
            raise PilotNotFoundError(pilot_id) from None

    def get_timeline(self, pilot_id: str) -> list[TimelineLap]:
        return load_timeline(self._payload(pilot_id).get("timeline", []))

    def get_lap_groups(self, pilot_id: str) -> list[RaceLapGroup]:
        return load_lap_groups(self._payload(pilot_id).get("lap_groups", []))

    def get_metrics(self, pilot_id: str) -> MetricSummary:
        return load_metrics(self._payload(pilot_id).get("metrics"))
