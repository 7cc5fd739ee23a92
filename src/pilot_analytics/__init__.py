"""pilot_analytics — running-best lap analytics for a single pilot."""

from pilot_analytics.exceptions import (
    PilotAnalyticsError,
    PilotAnalyticsValidationError,
    PilotNotFoundError,
)
from pilot_analytics.loaders import load_lap_groups, load_metrics, load_timeline
from pilot_analytics.repository import PilotDataRepository, StaticPilotRepository
from pilot_analytics.services import PilotAnalytics, PilotAnalyticsService

__all__ = [
    "PilotAnalytics",
    "PilotAnalyticsError",
    "PilotAnalyticsService",
    "PilotAnalyticsValidationError",
    "PilotDataRepository",
    "PilotNotFoundError",
    "StaticPilotRepository",
    "load_lap_groups",
    "load_metrics",
    "load_timeline",
]

__version__ = "0.1.0"
