"""Basic usage example for the pilot analytics pipeline."""

from pilot_analytics import PilotAnalyticsService, StaticPilotRepository
from pilot_analytics.models import StreamLink
from pilot_analytics.services import (
    OverlayVisibility,
    assign_race_colors,
    compute_value_domain,
    overlay_colors,
    race_color,
    race_label_positions,
)

START_MS = 1_700_000_000_000


def _race(race_id: str, label: str, durations: list[float], first_index: int, clock: int):
    laps = []
    timeline = []
    for n, duration in enumerate(durations, start=1):
        lap_id = f"{race_id}-{n}"
        laps.append({"id": lap_id, "lap_number": n, "lap_duration": duration})
        timeline.append(
            {
                "id": lap_id,
                "race_id": race_id,
                "race_label": label,
                "lap_number": n,
                "lap_duration": duration,
                "start_timestamp_ms": clock,
                "overall_index": first_index + n - 1,
            }
        )
        clock += int(duration * 1000)
    group = {
        "race": {"id": race_id, "label": label, "target_laps": 3},
        "holeshot": {"id": f"{race_id}-0", "lap_number": 0, "lap_duration": 4.8},
        "laps": laps,
    }
    return timeline, group, clock + 300_000


def _resolve_link(timestamp_ms: int | None) -> StreamLink | None:
    if timestamp_ms is None:
        return None
    offset = (timestamp_ms - START_MS) // 1000
    return StreamLink(href=f"https://example.com/vod?t={offset}", label="Main stream", offset_seconds=offset)


def main() -> None:
    timeline: list[dict] = []
    groups: list[dict] = []
    clock = START_MS
    for race_id, label, durations in [
        ("q1", "Qualifier 1", [31.2, 29.8, 30.4, 30.9]),
        ("q2", "Qualifier 2", [30.1, 29.5, 29.9]),
        ("final", "Final", [29.7, 29.2, 31.0, 28.9]),
    ]:
        laps, group, clock = _race(race_id, label, durations, len(timeline), clock)
        timeline += laps
        groups.append(group)

    repo = StaticPilotRepository(
        {
            "pilot-1": {
                "timeline": timeline,
                "lap_groups": groups,
                "metrics": {
                    "best_lap_time_seconds": 28.9,
                    "fastest_consecutive": {"lap_window": 3},
                },
            }
        }
    )
    service = PilotAnalyticsService(repo, resolve_link=_resolve_link)
    analytics = service.analyze_pilot("pilot-1")
    structure = analytics.structure

    print("=== Slots ===")
    for index, slot in enumerate(structure.slots):
        if slot.lap is None:
            print(f"  {index:2d}  -- gap --")
            continue
        o = slot.overlays
        print(
            f"  {index:2d}  {slot.lap.race_label:<12} lap {slot.lap.lap_number}  "
            f"{slot.lap.lap_time:6.3f}  best={o.best_lap}  consec={o.consecutive}  race={o.race_total}"
        )

    print("\n=== Race ranges ===")
    for race_id in structure.race_order:
        r = structure.race_index_ranges[race_id]
        print(f"  {race_id}: {r.start}..{r.end}")

    print("\n=== Records ===")
    print(f"  best lap:    {sorted(analytics.new_bests.best_lap)}")
    print(f"  consecutive: {sorted(analytics.new_bests.consecutive)}")
    print(f"  race total:  {sorted(analytics.new_bests.race_total)}")
    print(f"  markers:     {[(m.index, m.category) for m in analytics.marker_lines]}")

    print("\n=== Layout ===")
    colors = assign_race_colors(repo.get_lap_groups("pilot-1"))
    bar_colors = {race_id: race_color(colors, race_id) for race_id in structure.race_order}
    print(f"  colors: {bar_colors}")
    visibility = OverlayVisibility(best_lap=True)
    print(f"  lines:  {overlay_colors(visibility)}")
    print(f"  labels: {race_label_positions(structure)}")
    domain = compute_value_domain(
        analytics.lap_points, analytics.overlays, visibility,
    )
    print(f"  y-axis: {domain.min}..{domain.max:.3f}")

    print("\n=== Slot 1 ===")
    details = service.describe_slot(analytics, 1, repo.get_timeline("pilot-1"))
    if details is not None:
        for line in details.lines():
            print(f"  {line}")


if __name__ == "__main__":
    main()
