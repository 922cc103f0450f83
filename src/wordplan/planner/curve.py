"""Illustrative forgetting-curve series for charting.

The values are fixed constants for display; nothing here feeds back into
plan construction.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from .types import CurvePoint

CURVE_DAYS = 30
NATURAL_DECAY_DAYS = 7.0
REVIEWED_DECAY_DAYS = 21.0
NATURAL_FLOOR = 5.0
REVIEWED_FLOOR = 60.0
REVIEWED_PLATEAU = 95.0
MARKER_DAYS: Tuple[int, ...] = (1, 2, 4, 7, 15, 30)


def retention_without_review(day: float) -> float:
    return max(100.0 * math.exp(-day / NATURAL_DECAY_DAYS), NATURAL_FLOOR)


def retention_with_review(day: float) -> float:
    """Retention when reviews happen on schedule.

    Whole days sit on the 95% plateau. The 21-day decay only applies to
    fractional days, which the chart never samples.
    """
    if day == 0:
        value = 100.0
    elif float(day).is_integer():
        value = REVIEWED_PLATEAU
    else:
        value = 100.0 * math.exp(-day / REVIEWED_DECAY_DAYS)
    return max(value, REVIEWED_FLOOR)


def forgetting_curve(days: int = CURVE_DAYS) -> List[CurvePoint]:
    """Return `days + 1` points for day 0..days."""
    return [
        CurvePoint(
            day=day,
            retention_without_review=retention_without_review(day),
            retention_with_review=retention_with_review(day),
        )
        for day in range(days + 1)
    ]


def review_markers(days: int = CURVE_DAYS) -> List[CurvePoint]:
    """Points on the reviewed curve where the chart marks a review session."""
    return [
        CurvePoint(
            day=day,
            retention_without_review=retention_without_review(day),
            retention_with_review=retention_with_review(day),
        )
        for day in MARKER_DAYS
        if day <= days
    ]
