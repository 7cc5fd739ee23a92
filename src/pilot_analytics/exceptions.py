"""Custom exceptions for pilot analytics."""

from __future__ import annotations


class PilotAnalyticsError(Exception):
    """Base exception for all pilot analytics errors."""


class PilotAnalyticsValidationError(PilotAnalyticsError):
    """Raised when an input payload fails model validation."""


class PilotNotFoundError(PilotAnalyticsError):
    """Raised when a repository has no data for the requested pilot."""

    def __init__(self, pilot_id: str) -> None:
        self.pilot_id = pilot_id
        super().__init__(f"No lap data for pilot {pilot_id!r}")
