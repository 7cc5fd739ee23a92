"""Pilot metric summary models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FastestConsecutive(BaseModel):
    """Best stretch of consecutive laps, as reported by the host."""

    model_config = ConfigDict(frozen=True)

    lap_window: int
    total_seconds: float | None = None
    start_lap_id: str | None = None


class MetricSummary(BaseModel):
    """Headline metrics for one pilot."""

    model_config = ConfigDict(frozen=True)

    best_lap_time_seconds: float | None = None
    fastest_consecutive: FastestConsecutive | None = None

    @property
    def consecutive_window(self) -> int:
        """Lap window of the consecutive overlay, 0 when disabled."""
        if self.fastest_consecutive is None:
            return 0
        return self.fastest_consecutive.lap_window or 0
