"""Validation of raw host payloads into input models."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter

from pilot_analytics.exceptions import PilotAnalyticsValidationError
from pilot_analytics.models.lap import TimelineLap
from pilot_analytics.models.metrics import MetricSummary
from pilot_analytics.models.race import RaceLapGroup


T = TypeVar("T")


def _validate_list(model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise PilotAnalyticsValidationError(
            f"Failed to validate {model_type.__name__} payload: {exc}"
        ) from exc


def load_timeline(data: list[dict[str, Any]]) -> list[TimelineLap]:
    """Validate a chronological lap timeline."""
    return _validate_list(TimelineLap, data)


def load_lap_groups(data: list[dict[str, Any]]) -> list[RaceLapGroup]:
    """Validate race lap groups, keeping their order."""
    return _validate_list(RaceLapGroup, data)


def load_metrics(data: dict[str, Any] | None) -> MetricSummary:
    """Validate a metric summary; a missing summary means no known metrics."""
    if data is None:
        return MetricSummary()
    try:
        return MetricSummary.model_validate(data)
    except Exception as exc:
        raise PilotAnalyticsValidationError(
            f"Failed to validate MetricSummary payload: {exc}"
        ) from exc
