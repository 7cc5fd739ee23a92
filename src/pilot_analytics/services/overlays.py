"""Running-best overlay series aligned to lap points."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence

from ..models.race import RaceLapGroup
from .common import is_finite, running_minimum
from .lap_points import LapPoint


@dataclass(frozen=True)
class OverlayPoint:
    order: float
    time_seconds: float | None
    value: float | None


@dataclass(frozen=True)
class OverlaySeries:
    best_lap: tuple[OverlayPoint, ...]
    consecutive: tuple[OverlayPoint, ...]
    race_total: tuple[OverlayPoint, ...]


def _to_overlay(
    lap_points: Sequence[LapPoint],
    values: Sequence[float | None],
) -> tuple[OverlayPoint, ...]:
    return tuple(
        OverlayPoint(order=point.order, time_seconds=point.time_seconds, value=value)
        for point, value in zip(lap_points, values)
    )


def build_best_lap_series(lap_points: Sequence[LapPoint]) -> tuple[OverlayPoint, ...]:
    """Return the running best single lap at every lap point."""
    values = running_minimum(lap_points, lambda point: point.lap_time)
    return _to_overlay(lap_points, values)


def window_sums(
    lap_points: Sequence[LapPoint],
    window: int,
) -> list[float | None]:
    """Sum of the last *window* lap times at each point.

    None until the window fills, and None while the window holds a missing
    or non-finite lap time.
    """
    buffer: deque[float | None] = deque(maxlen=window)
    sums: list[float | None] = []
    for point in lap_points:
        buffer.append(point.lap_time)
        if len(buffer) == window and all(is_finite(value) for value in buffer):
            sums.append(sum(buffer))
        else:
            sums.append(None)
    return sums


def build_consecutive_series(
    lap_points: Sequence[LapPoint],
    window: int | None,
) -> tuple[OverlayPoint, ...]:
    """Return the best sum of *window* consecutive laps seen so far.

    A window of 0 or 1 disables the overlay and every value is None.
    """
    if not window or window <= 1:
        return _to_overlay(lap_points, [None] * len(lap_points))

    values = running_minimum(window_sums(lap_points, window), lambda value: value)
    return _to_overlay(lap_points, values)


def compute_completion_times(lap_groups: Sequence[RaceLapGroup]) -> dict[str, float]:
    """Map the completion lap id of every finished race to its total race time.

    Total race time is the holeshot plus the first ``target_laps`` timed laps.
    Races without a positive target, without a holeshot, or short of the
    target contribute nothing, and so does a race with a missing or
    non-finite duration among the counted laps.
    """
    completions: dict[str, float] = {}
    for group in lap_groups:
        if not group.is_complete:
            continue
        target = group.race.target_laps
        counted = group.laps[:target]
        durations = [group.holeshot.lap_duration] + [lap.lap_duration for lap in counted]
        if not all(is_finite(duration) for duration in durations):
            continue
        total = sum(durations)
        if not is_finite(total):
            continue
        completions[counted[-1].id] = total
    return completions


def build_race_total_series(
    lap_points: Sequence[LapPoint],
    completion_times: dict[str, float],
) -> tuple[OverlayPoint, ...]:
    """Return the best completed race total, carried forward between completions."""
    values = running_minimum(lap_points, lambda point: completion_times.get(point.id))
    return _to_overlay(lap_points, values)


def build_overlay_series(
    lap_points: Sequence[LapPoint],
    lap_groups: Sequence[RaceLapGroup],
    consecutive_window: int | None,
) -> OverlaySeries:
    """Compute the three overlays for a set of lap points."""
    return OverlaySeries(
        best_lap=build_best_lap_series(lap_points),
        consecutive=build_consecutive_series(lap_points, consecutive_window),
        race_total=build_race_total_series(
            lap_points, compute_completion_times(lap_groups),
        ),
    )
