"""Descriptive text for a single chart slot (tooltip content)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from ..constants import STATUS_MESSAGES
from ..formatters import format_delta, format_seconds, format_timestamp
from ..models.lap import TimelineLap
from ..models.stream import StreamLink
from .chart_structure import ChartStructure
from .new_best import NewBestIndices

LinkResolver = Callable[[int | None], StreamLink | None]


@dataclass(frozen=True)
class SlotDetails:
    title: str
    lap_label: str
    lap_time_label: str
    delta_label: str
    time_label: str
    stream_link: StreamLink | None
    statuses: tuple[str, ...]

    @property
    def stream_label(self) -> str | None:
        """'Watch <label>' with the playback offset, if a link exists."""
        if self.stream_link is None:
            return None
        offset = self.stream_link.offset_seconds
        suffix = f" (+{offset}s)" if offset > 0 else ""
        return f"Watch {self.stream_link.label}{suffix}"

    def lines(self) -> list[str]:
        """Plain-text lines in display order."""
        time_line = self.time_label
        if self.stream_label is not None:
            time_line = f"{time_line} — {self.stream_label}"
        return [
            self.title,
            self.lap_label,
            self.lap_time_label,
            f"Δ best: {self.delta_label}",
            time_line,
            *self.statuses,
        ]


def _no_link(timestamp_ms: int | None) -> StreamLink | None:
    return None


def describe_slot(
    structure: ChartStructure,
    index: int,
    timeline: Sequence[TimelineLap],
    new_bests: NewBestIndices,
    resolve_link: LinkResolver | None = None,
) -> SlotDetails | None:
    """Describe the lap at slot *index*, or None for gaps and bad indices.

    The timestamp comes from the source timeline lap (start time, else
    detection time) and is handed to *resolve_link* once.
    """
    if index < 0 or index >= len(structure.slots):
        return None
    lap = structure.slots[index].lap
    if lap is None:
        return None

    source = next((item for item in timeline if item.id == lap.id), None)
    timestamp = source.timestamp_ms if source is not None else None
    stream_link = (resolve_link or _no_link)(timestamp)

    return SlotDetails(
        title=lap.race_label,
        lap_label=f"Lap {lap.lap_number}",
        lap_time_label=format_seconds(lap.lap_time),
        delta_label=format_delta(lap.delta_best),
        time_label=format_timestamp(timestamp),
        stream_link=stream_link,
        statuses=tuple(STATUS_MESSAGES[c] for c in new_bests.categories_at(index)),
    )
