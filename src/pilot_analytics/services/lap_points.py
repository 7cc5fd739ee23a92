"""Normalisation of the pilot timeline into ordered lap points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..models.lap import TimelineLap
from ..models.race import RaceLapGroup
from .common import is_finite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LapPoint:
    id: str
    order: float
    time_seconds: float | None
    lap_time: float | None
    race_id: str
    race_label: str
    lap_number: int
    delta_best: float | None


def first_timestamp(timeline: Sequence[TimelineLap]) -> int | None:
    """Return the start timestamp of the first lap that has one."""
    for lap in timeline:
        if lap.start_timestamp_ms is not None:
            return lap.start_timestamp_ms
    return None


def race_offsets(lap_groups: Sequence[RaceLapGroup]) -> dict[str, float]:
    """Map each race id to its ordering offset (0, 1, 2, ... in group order).

    A race id listed more than once takes the offset of its last group.
    """
    offsets: dict[str, float] = {}
    for offset, group in enumerate(lap_groups):
        offsets[group.race.id] = float(offset)
    return offsets


def build_lap_points(
    timeline: Sequence[TimelineLap],
    lap_groups: Sequence[RaceLapGroup],
    best_lap_time_seconds: float | None,
) -> tuple[LapPoint, ...]:
    """Build one lap point per timeline lap, preserving timeline order.

    ``order`` is the lap's overall index shifted by one slot per preceding
    race, so the laps of consecutive races never share a display position.
    """
    if not timeline:
        return ()

    zero = first_timestamp(timeline)
    offsets = race_offsets(lap_groups)
    labels = {group.race.id: group.race.label for group in lap_groups}
    best_known = is_finite(best_lap_time_seconds)

    points: list[LapPoint] = []
    for lap in timeline:
        offset = offsets.get(lap.race_id)
        if offset is None:
            logger.warning(
                "Lap %s references unknown race %s; using offset 0",
                lap.id, lap.race_id,
            )
            offset = 0.0

        time_seconds = None
        if lap.start_timestamp_ms is not None and zero is not None:
            time_seconds = (lap.start_timestamp_ms - zero) / 1000

        delta_best = None
        if best_known and is_finite(lap.lap_duration):
            delta_best = lap.lap_duration - best_lap_time_seconds

        points.append(
            LapPoint(
                id=lap.id,
                order=lap.overall_index + 1 + offset,
                time_seconds=time_seconds,
                lap_time=lap.lap_duration,
                race_id=lap.race_id,
                race_label=lap.race_label or labels.get(lap.race_id, lap.race_id),
                lap_number=lap.lap_number,
                delta_best=delta_best,
            )
        )
    return tuple(points)
