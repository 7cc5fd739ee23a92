"""Slot layout of lap points, with a gap slot between consecutive races."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

from ..constants import GAP_KEY_PREFIX
from .common import is_finite
from .lap_points import LapPoint
from .overlays import OverlayPoint, OverlaySeries


@dataclass(frozen=True)
class SlotOverlays:
    best_lap: float | None = None
    consecutive: float | None = None
    race_total: float | None = None


@dataclass(frozen=True)
class ChartSlot:
    key: str
    lap: LapPoint | None
    bar_value: float | None
    overlays: SlotOverlays

    @property
    def is_gap(self) -> bool:
        return self.lap is None


@dataclass(frozen=True)
class RaceIndexRange:
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class ChartStructure:
    slots: tuple[ChartSlot, ...]
    # Read-only view; derived from slots, so left out of the hash
    race_index_ranges: Mapping[str, RaceIndexRange] = field(hash=False)
    race_order: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "race_index_ranges", MappingProxyType(dict(self.race_index_ranges)),
        )

    def range_for(self, race_id: str) -> RaceIndexRange | None:
        return self.race_index_ranges.get(race_id)


def _value_at(series: Sequence[OverlayPoint], index: int) -> float | None:
    if index < len(series):
        return series[index].value
    return None


def _gap_slot(previous_race_id: str, race_id: str, index: int) -> ChartSlot:
    return ChartSlot(
        key=f"{GAP_KEY_PREFIX}-{previous_race_id}-{race_id}-{index}",
        lap=None,
        bar_value=None,
        overlays=SlotOverlays(),
    )


def build_chart_structure(
    lap_points: Sequence[LapPoint],
    overlays: OverlaySeries,
) -> ChartStructure:
    """Lay lap points out as chart slots and record each race's slot range.

    One gap slot is inserted wherever the race changes between two
    neighbouring lap points. Overlay values are taken from the same index as
    the lap point; a short overlay series yields None.
    """
    slots: list[ChartSlot] = []
    starts: dict[str, int] = {}
    ends: dict[str, int] = {}
    race_order: list[str] = []
    previous_race_id: str | None = None

    for index, point in enumerate(lap_points):
        if previous_race_id is not None and previous_race_id != point.race_id:
            slots.append(_gap_slot(previous_race_id, point.race_id, index))

        slot_index = len(slots)
        slots.append(
            ChartSlot(
                key=point.id,
                lap=point,
                bar_value=point.lap_time if is_finite(point.lap_time) else None,
                overlays=SlotOverlays(
                    best_lap=_value_at(overlays.best_lap, index),
                    consecutive=_value_at(overlays.consecutive, index),
                    race_total=_value_at(overlays.race_total, index),
                ),
            )
        )

        if point.race_id not in starts:
            starts[point.race_id] = slot_index
            race_order.append(point.race_id)
        ends[point.race_id] = slot_index
        previous_race_id = point.race_id

    ranges = {
        race_id: RaceIndexRange(start=starts[race_id], end=ends[race_id])
        for race_id in race_order
    }
    return ChartStructure(
        slots=tuple(slots),
        race_index_ranges=ranges,
        race_order=tuple(race_order),
    )
