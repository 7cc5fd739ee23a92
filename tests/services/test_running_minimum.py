"""Tests for services/common.py — the shared running-minimum reducer."""

from __future__ import annotations

import math

import pytest

from pilot_analytics.services.common import is_finite, running_minimum


class TestIsFinite:
    @pytest.mark.parametrize("value", [0.0, -3.5, 42])
    def test_finite(self, value) -> None:
        assert is_finite(value) is True

    @pytest.mark.parametrize("value", [None, math.inf, -math.inf, math.nan])
    def test_not_finite(self, value) -> None:
        assert is_finite(value) is False


class TestRunningMinimum:
    def test_prefix_minimum(self) -> None:
        assert running_minimum([3.0, 5.0, 2.0, 4.0], lambda v: v) == [3.0, 3.0, 2.0, 2.0]

    def test_none_until_first_value(self) -> None:
        assert running_minimum([None, None, 7.0, None], lambda v: v) == [None, None, 7.0, 7.0]

    def test_ignores_non_finite(self) -> None:
        values = [math.nan, 9.0, math.inf, 8.0, -math.inf]
        assert running_minimum(values, lambda v: v) == [None, 9.0, 9.0, 8.0, 8.0]

    def test_uses_extractor(self) -> None:
        laps = [{"t": 4.0}, {"t": 3.0}, {"t": 6.0}]
        assert running_minimum(laps, lambda lap: lap["t"]) == [4.0, 3.0, 3.0]

    def test_empty(self) -> None:
        assert running_minimum([], lambda v: v) == []
