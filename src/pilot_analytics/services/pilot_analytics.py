"""Pilot analytics service — the full lap-history pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..exceptions import PilotAnalyticsError
from ..models.lap import TimelineLap
from ..models.metrics import MetricSummary
from ..models.race import RaceLapGroup
from ..repository import PilotDataRepository
from ..service_logging import log_service_call
from .chart_structure import ChartStructure, build_chart_structure
from .lap_points import LapPoint, build_lap_points
from .new_best import MarkerLine, NewBestIndices, build_marker_lines, detect_new_bests
from .overlays import OverlaySeries, build_overlay_series
from .slot_details import LinkResolver, SlotDetails, describe_slot


@dataclass(frozen=True)
class PilotAnalytics:
    lap_points: tuple[LapPoint, ...]
    overlays: OverlaySeries
    structure: ChartStructure
    new_bests: NewBestIndices
    marker_lines: tuple[MarkerLine, ...]

    @property
    def is_empty(self) -> bool:
        return not self.lap_points


class PilotAnalyticsService:
    """Derives lap points, running-best overlays and chart structure for one pilot.

    The pipeline methods are pure functions of their arguments. Only the
    repository-facing calls (``fetch_pilot_data``, ``analyze_pilot``) are
    logged, and the link resolver is only consulted by ``describe_slot``.
    """

    def __init__(
        self,
        repo: PilotDataRepository | None = None,
        resolve_link: LinkResolver | None = None,
    ) -> None:
        self._repo = repo
        self._resolve_link = resolve_link

    @log_service_call
    def fetch_pilot_data(
        self,
        pilot_id: str,
    ) -> tuple[list[TimelineLap], list[RaceLapGroup], MetricSummary]:
        """Fetch timeline, lap groups and metrics for a pilot."""
        if self._repo is None:
            raise PilotAnalyticsError("No repository configured")
        timeline = self._repo.get_timeline(pilot_id)
        lap_groups = self._repo.get_lap_groups(pilot_id)
        metrics = self._repo.get_metrics(pilot_id)
        return timeline, lap_groups, metrics

    def build_lap_points(
        self,
        timeline: Sequence[TimelineLap],
        lap_groups: Sequence[RaceLapGroup],
        best_lap_time_seconds: float | None,
    ) -> tuple[LapPoint, ...]:
        """Normalise the timeline into ordered lap points."""
        return build_lap_points(timeline, lap_groups, best_lap_time_seconds)

    def build_overlays(
        self,
        lap_points: Sequence[LapPoint],
        lap_groups: Sequence[RaceLapGroup],
        consecutive_window: int | None,
    ) -> OverlaySeries:
        """Compute the best-lap, consecutive and race-total overlays."""
        return build_overlay_series(lap_points, lap_groups, consecutive_window)

    def build_structure(
        self,
        lap_points: Sequence[LapPoint],
        overlays: OverlaySeries,
    ) -> ChartStructure:
        """Lay the lap points out as chart slots."""
        return build_chart_structure(lap_points, overlays)

    def detect_new_bests(self, structure: ChartStructure) -> NewBestIndices:
        """Find the slots where each record was set."""
        return detect_new_bests(structure)

    def analyze(
        self,
        timeline: Sequence[TimelineLap],
        lap_groups: Sequence[RaceLapGroup],
        metrics: MetricSummary,
    ) -> PilotAnalytics:
        """Run the whole pipeline on an assembled lap history."""
        lap_points = self.build_lap_points(
            timeline, lap_groups, metrics.best_lap_time_seconds,
        )
        overlays = self.build_overlays(
            lap_points, lap_groups, metrics.consecutive_window,
        )
        structure = self.build_structure(lap_points, overlays)
        new_bests = self.detect_new_bests(structure)
        return PilotAnalytics(
            lap_points=lap_points,
            overlays=overlays,
            structure=structure,
            new_bests=new_bests,
            marker_lines=tuple(build_marker_lines(new_bests)),
        )

    @log_service_call
    def analyze_pilot(self, pilot_id: str) -> PilotAnalytics:
        """Fetch a pilot's history from the repository and analyze it."""
        timeline, lap_groups, metrics = self.fetch_pilot_data(pilot_id)
        return self.analyze(timeline, lap_groups, metrics)

    def describe_slot(
        self,
        analytics: PilotAnalytics,
        index: int,
        timeline: Sequence[TimelineLap],
    ) -> SlotDetails | None:
        """Describe one slot, resolving its stream link through the host."""
        return describe_slot(
            analytics.structure, index, timeline, analytics.new_bests, self._resolve_link,
        )
