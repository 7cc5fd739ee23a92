"""Stream playback link model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StreamLink(BaseModel):
    """Playback link for a moment in a recorded stream."""

    model_config = ConfigDict(frozen=True)

    href: str
    label: str
    offset_seconds: int = 0
