"""Lap models (pilot timeline laps and laps inside a race group)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TimelineLap(BaseModel):
    """One lap of a pilot's chronological timeline, across all races."""

    model_config = ConfigDict(frozen=True)

    id: str
    race_id: str
    race_label: str | None = None
    lap_number: int
    lap_duration: float | None = None
    start_timestamp_ms: int | None = None
    detection_timestamp_ms: int | None = None
    overall_index: int

    @property
    def is_holeshot(self) -> bool:
        """True for the start lap (lap number 0)."""
        return self.lap_number == 0

    @property
    def timestamp_ms(self) -> int | None:
        """Start timestamp, falling back to the detection timestamp."""
        if self.start_timestamp_ms is not None:
            return self.start_timestamp_ms
        return self.detection_timestamp_ms


class GroupLap(BaseModel):
    """A lap as listed inside a race group."""

    model_config = ConfigDict(frozen=True)

    id: str
    lap_number: int
    lap_duration: float | None = None
    start_timestamp_ms: int | None = None
    detection_timestamp_ms: int | None = None
