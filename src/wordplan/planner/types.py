from __future__ import annotations

from dataclasses import dataclass, field
from operator import index as as_index
from typing import Iterator, Tuple


@dataclass(frozen=True)
class PlanRequest:
    """Validated planner input.

    `total_words >= plan_days >= 1` is assumed to hold; use
    `wordplan.validation.validate_plan_inputs` to build one from raw values.
    """

    total_words: int
    plan_days: int
    include_review: bool = True


@dataclass(frozen=True)
class ReviewSource:
    source_day: int
    words_reviewed: int


@dataclass(frozen=True)
class PlanDay:
    day: int
    new_words: int
    review_words: int
    total_daily: int
    review_sources: Tuple[ReviewSource, ...] = ()
    note: str = ""


@dataclass(frozen=True)
class StudyPlan:
    """Ordered, read-only sequence of plan days with aggregate totals."""

    days: Tuple[PlanDay, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[PlanDay]:
        return iter(self.days)

    def __getitem__(self, index: int) -> PlanDay:
        """0-based access to a single day; slices are not supported."""
        return self.days[as_index(index)]

    def day(self, day: int) -> PlanDay:
        """Return the entry for a 1-based plan day."""
        if day < 1 or day > len(self.days):
            raise IndexError(f"day {day} is outside the plan (1..{len(self.days)})")
        return self.days[day - 1]

    @property
    def total_new_words(self) -> int:
        return sum(d.new_words for d in self.days)

    @property
    def total_review_words(self) -> int:
        return sum(d.review_words for d in self.days)

    @property
    def total_workload(self) -> int:
        return sum(d.total_daily for d in self.days)

    @property
    def peak_daily(self) -> int:
        return max((d.total_daily for d in self.days), default=0)


@dataclass(frozen=True)
class CurvePoint:
    day: int
    retention_without_review: float
    retention_with_review: float
