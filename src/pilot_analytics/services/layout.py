"""Chart layout helpers: race colors, axis labels and the value domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..constants import (
    BAR_PALETTE,
    BEST_LAP,
    CONSECUTIVE,
    DEFAULT_BAR_COLOR,
    OVERLAY_COLORS,
    RACE_TOTAL,
    VALUE_DOMAIN_PADDING,
)
from ..models.race import RaceLapGroup
from .chart_structure import ChartStructure
from .common import is_finite
from .lap_points import LapPoint
from .overlays import OverlaySeries


@dataclass(frozen=True)
class OverlayVisibility:
    best_lap: bool = False
    consecutive: bool = False
    race_total: bool = False

    def is_visible(self, category: str) -> bool:
        return {
            BEST_LAP: self.best_lap,
            CONSECUTIVE: self.consecutive,
            RACE_TOTAL: self.race_total,
        }[category]


@dataclass(frozen=True)
class ValueDomain:
    min: float
    max: float


def assign_race_colors(lap_groups: Sequence[RaceLapGroup]) -> dict[str, str]:
    """Assign each race a bar color, cycling through the palette in group order."""
    colors: dict[str, str] = {}
    for index, group in enumerate(lap_groups):
        colors[group.race.id] = BAR_PALETTE[index % len(BAR_PALETTE)]
    return colors


def race_color(colors: dict[str, str], race_id: str) -> str:
    """Bar color for *race_id*, white for a race without an assigned color."""
    return colors.get(race_id, DEFAULT_BAR_COLOR)


def overlay_colors(visibility: OverlayVisibility) -> dict[str, str]:
    """Line color of every visible overlay, keyed by category."""
    return {
        category: color
        for category, color in OVERLAY_COLORS.items()
        if visibility.is_visible(category)
    }


def race_label_positions(structure: ChartStructure) -> dict[int, str]:
    """Map the middle slot of every race to that race's label."""
    positions: dict[int, str] = {}
    for race_id in structure.race_order:
        race_range = structure.race_index_ranges[race_id]
        middle = (race_range.start + race_range.end) // 2
        slot = structure.slots[middle]
        if slot.lap is not None:
            positions[middle] = slot.lap.race_label
    return positions


def compute_value_domain(
    lap_points: Sequence[LapPoint],
    overlays: OverlaySeries,
    visibility: OverlayVisibility,
) -> ValueDomain:
    """Return the y-axis domain for the lap bars and the visible overlays.

    The lower bound is always 0; the upper bound is padded by 10% of the
    value span, or 10% of the maximum when every value is equal.
    """
    values = [point.lap_time for point in lap_points]
    if visibility.best_lap:
        values += [p.value for p in overlays.best_lap if p.value is not None]
    if visibility.consecutive:
        values += [p.value for p in overlays.consecutive if p.value is not None]
    if visibility.race_total:
        values += [p.value for p in overlays.race_total if p.value is not None]
    values = [value for value in values if is_finite(value)]

    if not values:
        return ValueDomain(min=0.0, max=1.0)

    low = min(values)
    high = max(values)
    span = high - low
    if span == 0:
        padding = high * VALUE_DOMAIN_PADDING or 1.0
    else:
        padding = span * VALUE_DOMAIN_PADDING
    return ValueDomain(min=0.0, max=high + padding)
