"""Shared constants for pilot analytics."""

from __future__ import annotations

BEST_LAP = "best_lap"
CONSECUTIVE = "consecutive"
RACE_TOTAL = "race_total"

# Marker precedence when one slot sets several records
CATEGORY_PRECEDENCE: tuple[str, ...] = (BEST_LAP, CONSECUTIVE, RACE_TOTAL)

OVERLAY_COLORS: dict[str, str] = {
    BEST_LAP: "#9ba3ff",
    CONSECUTIVE: "#ffb347",
    RACE_TOTAL: "#71e0c9",
}

MARKER_COLORS: dict[str, str] = {
    BEST_LAP: "#71e0c9",
    CONSECUTIVE: "#ffb347",
    RACE_TOTAL: "#71e0c9",
}

STATUS_MESSAGES: dict[str, str] = {
    BEST_LAP: "New best lap!",
    CONSECUTIVE: "New best consecutive!",
    RACE_TOTAL: "New best race total!",
}

BAR_PALETTE: list[str] = [
    "#9ba3ff",
    "#9bd2ff",
    "#ffade2",
    "#beffc9",
    "#ffd6a5",
    "#a5d6ff",
    "#ffb3ba",
    "#baffc9",
]

DEFAULT_BAR_COLOR = "#ffffff"

GAP_KEY_PREFIX = "gap"

VALUE_DOMAIN_PADDING = 0.1

LOG_DIR_ENV_VAR = "PILOT_ANALYTICS_LOG_DIR"
