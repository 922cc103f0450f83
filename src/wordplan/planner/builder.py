from __future__ import annotations

from typing import List, Sequence

from .allocator import allocate
from .scheduler import review_days_for
from .types import PlanDay, PlanRequest, ReviewSource, StudyPlan


def format_note(new_words: int, review_sources: Sequence[ReviewSource]) -> str:
    """Human-readable summary shown in the plan's note column."""
    if review_sources:
        parts = ", ".join(
            f"Day {src.source_day}: {src.words_reviewed} words" for src in review_sources
        )
        return f"Review sources: {parts}"
    return f"Review today's {new_words} new words after studying"


def resolve_review_sources(
    day: int, total_days: int, built: Sequence[PlanDay]
) -> List[ReviewSource]:
    """Map scheduled source days onto the new-word counts of already-built days.

    Source days outside [1, day) are skipped.
    """
    sources: List[ReviewSource] = []
    for source_day in review_days_for(day, total_days):
        if source_day < 1 or source_day >= day or source_day > len(built):
            continue
        sources.append(ReviewSource(source_day=source_day, words_reviewed=built[source_day - 1].new_words))
    return sources


def build_plan(request: PlanRequest) -> StudyPlan:
    """Build the day-by-day study plan for a validated request.

    新出語の配分を先に確定し、1 日目から順に復習元を解決していく。
    後続日の復習量は前日までに確定した新出語数を参照するため、順序が重要。
    """
    new_words_by_day = allocate(request.total_words, request.plan_days)
    built: List[PlanDay] = []

    for day in range(1, request.plan_days + 1):
        new_words = new_words_by_day[day - 1]
        sources: List[ReviewSource] = []
        if request.include_review and day > 1:
            sources = resolve_review_sources(day, request.plan_days, built)
        review_words = sum(src.words_reviewed for src in sources)
        built.append(
            PlanDay(
                day=day,
                new_words=new_words,
                review_words=review_words,
                total_daily=new_words + review_words,
                review_sources=tuple(sources),
                note=format_note(new_words, sources),
            )
        )

    return StudyPlan(days=tuple(built))
