"""Review-day selection for a study plan.

Two regimes share one entry point, `review_days_for`:

- short plans (<= SHORT_PLAN_MAX_DAYS days) read a hand-tuned table
- longer plans step back from the current day by the golden intervals
"""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

SHORT_PLAN_MAX_DAYS = 10
GOLDEN_INTERVALS: Tuple[int, ...] = (1, 2, 4, 7, 15)
MAX_REVIEW_SOURCES = 4

# 短期計画用の固定テーブル。規則から導出できない調整値なのでデータとして保持する。
SHORT_PLAN_TABLE: Dict[int, Tuple[int, ...]] = {
    1: (),
    2: (1,),
    3: (1, 2),
    4: (2, 3),
    5: (1, 3, 4),
    6: (2, 4, 5),
    7: (3, 5, 6),
    8: (1, 4, 6, 7),
    9: (2, 5, 7, 8),
    10: (3, 6, 8, 9),
}

ReviewStrategy = Callable[[int], List[int]]


def short_plan_review_days(current_day: int) -> List[int]:
    return list(SHORT_PLAN_TABLE.get(current_day, ()))


def golden_interval_review_days(current_day: int) -> List[int]:
    """Days `current_day - k` for each golden interval k, closest first, at most 4."""
    if current_day <= 1:
        return []
    candidates = [current_day - k for k in GOLDEN_INTERVALS if current_day - k >= 1]
    return candidates[:MAX_REVIEW_SOURCES]


def strategy_for(total_days: int) -> ReviewStrategy:
    if total_days <= SHORT_PLAN_MAX_DAYS:
        return short_plan_review_days
    return golden_interval_review_days


def review_days_for(current_day: int, total_days: int) -> List[int]:
    """Return the prior days whose new words are reviewed on `current_day`.

    Depends only on the two arguments; every returned day is in [1, current_day).
    """
    return strategy_for(total_days)(current_day)
