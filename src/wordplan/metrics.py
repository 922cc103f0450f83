from __future__ import annotations

import threading
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Deque, Dict


@dataclass
class RequestStats:
    latencies_ms: Deque[float]
    errors: int
    total: int


@dataclass
class PlanStats:
    plans_built: int = 0
    plans_with_review: int = 0
    days_planned: int = 0
    words_planned: int = 0
    rejected_inputs: int = 0


class MetricsRegistry:
    """In-memory metrics registry.

    - Per-path rolling latency window for p95 calculation
    - Error counters per path
    - Planner counters (plans built, days/words planned, rejected inputs)
    """

    def __init__(self, window_size: int = 200) -> None:
        self._window_size = window_size
        self._lock = threading.Lock()
        self._per_path: Dict[str, RequestStats] = defaultdict(
            lambda: RequestStats(latencies_ms=deque(maxlen=self._window_size), errors=0, total=0)
        )
        self._plans = PlanStats()

    def record(self, path: str, latency_ms: float, *, is_error: bool = False) -> None:
        with self._lock:
            stats = self._per_path[path]
            stats.latencies_ms.append(latency_ms)
            stats.total += 1
            if is_error:
                stats.errors += 1

    def record_plan(self, *, plan_days: int, total_words: int, include_review: bool) -> None:
        with self._lock:
            self._plans.plans_built += 1
            self._plans.days_planned += plan_days
            self._plans.words_planned += total_words
            if include_review:
                self._plans.plans_with_review += 1

    def record_rejected_input(self) -> None:
        with self._lock:
            self._plans.rejected_inputs += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            paths: Dict[str, Dict[str, float | int]] = {}
            for path, stats in self._per_path.items():
                p95 = calculate_p95(list(stats.latencies_ms)) if stats.latencies_ms else 0.0
                paths[path] = {
                    "p95_ms": round(p95, 2),
                    "count": stats.total,
                    "errors": stats.errors,
                }
            plans = {
                "plans_built": self._plans.plans_built,
                "plans_with_review": self._plans.plans_with_review,
                "days_planned": self._plans.days_planned,
                "words_planned": self._plans.words_planned,
                "rejected_inputs": self._plans.rejected_inputs,
            }
            return {"paths": paths, "plans": plans}

    def reset(self) -> None:
        with self._lock:
            self._per_path.clear()
            self._plans = PlanStats()


def calculate_p95(values: list[float]) -> float:
    if not values:
        return 0.0
    sorted_vals = sorted(values)
    k = int(0.95 * (len(sorted_vals) - 1))
    return sorted_vals[k]


registry = MetricsRegistry()
