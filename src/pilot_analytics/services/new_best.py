"""Detection of the slots where a running-best record was broken."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants import BEST_LAP, CATEGORY_PRECEDENCE, CONSECUTIVE, MARKER_COLORS, RACE_TOTAL
from .chart_structure import ChartStructure


@dataclass(frozen=True)
class NewBestIndices:
    best_lap: frozenset[int]
    consecutive: frozenset[int]
    race_total: frozenset[int]

    def indices_for(self, category: str) -> frozenset[int]:
        return {
            BEST_LAP: self.best_lap,
            CONSECUTIVE: self.consecutive,
            RACE_TOTAL: self.race_total,
        }[category]

    def categories_at(self, index: int) -> list[str]:
        """Every record set at *index*, in precedence order."""
        return [c for c in CATEGORY_PRECEDENCE if index in self.indices_for(c)]

    def highlight_at(self, index: int) -> str | None:
        """The single record used to highlight the bar at *index*."""
        categories = self.categories_at(index)
        return categories[0] if categories else None


@dataclass(frozen=True)
class MarkerLine:
    index: int
    category: str
    color: str


def detect_new_bests(structure: ChartStructure) -> NewBestIndices:
    """Replay the slots and collect where each metric strictly improved.

    Only slots carrying a lap with a finite bar value take part. The three checks
    are independent, so one slot may appear in several sets.
    """
    best_lap = math.inf
    best_consecutive = math.inf
    best_race_total = math.inf
    lap_indices: set[int] = set()
    consecutive_indices: set[int] = set()
    race_total_indices: set[int] = set()

    for index, slot in enumerate(structure.slots):
        if slot.lap is None or slot.bar_value is None:
            continue

        if slot.bar_value < best_lap:
            best_lap = slot.bar_value
            lap_indices.add(index)

        consecutive = slot.overlays.consecutive
        if consecutive is not None and consecutive < best_consecutive:
            best_consecutive = consecutive
            consecutive_indices.add(index)

        race_total = slot.overlays.race_total
        if race_total is not None and race_total < best_race_total:
            best_race_total = race_total
            race_total_indices.add(index)

    return NewBestIndices(
        best_lap=frozenset(lap_indices),
        consecutive=frozenset(consecutive_indices),
        race_total=frozenset(race_total_indices),
    )


def build_marker_lines(new_bests: NewBestIndices) -> list[MarkerLine]:
    """Return one vertical marker per record slot, without duplicates.

    A slot already marked for a higher-precedence record is not marked
    again; the underlying index sets are left untouched.
    """
    lines: list[MarkerLine] = []
    marked: set[int] = set()
    for category in CATEGORY_PRECEDENCE:
        for index in sorted(new_bests.indices_for(category)):
            if index in marked:
                continue
            lines.append(
                MarkerLine(index=index, category=category, color=MARKER_COLORS[category])
            )
        marked.update(new_bests.indices_for(category))
    return lines
