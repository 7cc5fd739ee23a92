"""Shared pure functions for the service layer."""

from __future__ import annotations

import math
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def is_finite(value: float | None) -> bool:
    """Return True for a real, finite number."""
    return value is not None and math.isfinite(value)


def running_minimum(
    items: Iterable[T],
    extract: Callable[[T], float | None],
) -> list[float | None]:
    """Fold *items* into their running minimum, one output per item.

    *extract* returns the candidate value for an item, or None when the item
    carries none. Missing and non-finite candidates never update the minimum.
    Positions before the first finite candidate are None.
    """
    best = math.inf
    out: list[float | None] = []
    for item in items:
        candidate = extract(item)
        if is_finite(candidate) and candidate < best:
            best = candidate
        out.append(best if math.isfinite(best) else None)
    return out
