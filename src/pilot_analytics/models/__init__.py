"""Input models for pilot analytics."""

from pilot_analytics.models.lap import GroupLap, TimelineLap
from pilot_analytics.models.metrics import FastestConsecutive, MetricSummary
from pilot_analytics.models.race import Channel, Race, RaceLapGroup
from pilot_analytics.models.stream import StreamLink

__all__ = [
    "Channel",
    "FastestConsecutive",
    "GroupLap",
    "MetricSummary",
    "Race",
    "RaceLapGroup",
    "StreamLink",
    "TimelineLap",
]
