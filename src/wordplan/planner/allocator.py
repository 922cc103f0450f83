from __future__ import annotations

from typing import List


def allocate(total_words: int, plan_days: int) -> List[int]:
    """Split `total_words` evenly across `plan_days`, front-loading the remainder.

    The first `total_words % plan_days` days receive one extra word so the
    allocation sums to `total_words` exactly.
    """
    base, remainder = divmod(total_words, plan_days)
    return [base + 1 if i < remainder else base for i in range(plan_days)]
