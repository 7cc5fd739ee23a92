"""Race and race lap group models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pilot_analytics.models.lap import GroupLap


class Race(BaseModel):
    """Race a pilot took part in."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    order: int = 0
    target_laps: int | None = None


class Channel(BaseModel):
    """Video/radio channel the pilot flew on."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str | None = None
    color: str | None = None


class RaceLapGroup(BaseModel):
    """Laps of one race: the holeshot plus the timed laps in order."""

    model_config = ConfigDict(frozen=True)

    race: Race
    holeshot: GroupLap | None = None
    laps: list[GroupLap] = []
    channel: Channel | None = None

    @property
    def is_complete(self) -> bool:
        """True when the race reached its required lap count."""
        target = self.race.target_laps
        if not target or target <= 0 or self.holeshot is None:
            return False
        return len(self.laps) >= target
