"""Service layer — lap-history analytics for a single pilot."""

from .chart_structure import (
    ChartSlot,
    ChartStructure,
    RaceIndexRange,
    SlotOverlays,
    build_chart_structure,
)
from .common import is_finite, running_minimum
from .lap_points import LapPoint, build_lap_points
from .layout import (
    OverlayVisibility,
    ValueDomain,
    assign_race_colors,
    compute_value_domain,
    overlay_colors,
    race_color,
    race_label_positions,
)
from .new_best import MarkerLine, NewBestIndices, build_marker_lines, detect_new_bests
from .overlays import (
    OverlayPoint,
    OverlaySeries,
    build_best_lap_series,
    build_consecutive_series,
    build_overlay_series,
    build_race_total_series,
    compute_completion_times,
)
from .pilot_analytics import PilotAnalytics, PilotAnalyticsService
from .slot_details import LinkResolver, SlotDetails, describe_slot

__all__ = [
    "ChartSlot",
    "ChartStructure",
    "LapPoint",
    "LinkResolver",
    "MarkerLine",
    "NewBestIndices",
    "OverlayPoint",
    "OverlaySeries",
    "OverlayVisibility",
    "PilotAnalytics",
    "PilotAnalyticsService",
    "RaceIndexRange",
    "SlotDetails",
    "SlotOverlays",
    "ValueDomain",
    "assign_race_colors",
    "build_best_lap_series",
    "build_chart_structure",
    "build_consecutive_series",
    "build_lap_points",
    "build_marker_lines",
    "build_overlay_series",
    "build_race_total_series",
    "compute_completion_times",
    "compute_value_domain",
    "describe_slot",
    "detect_new_bests",
    "is_finite",
    "overlay_colors",
    "race_color",
    "race_label_positions",
    "running_minimum",
]
