from __future__ import annotations

from .planner.types import StudyPlan

TITLE = "Vocabulary Study Plan"
RULE = "-" * 25
COLUMNS = ("Day", "New words", "Review words", "Daily total")


def format_plan_text(plan: StudyPlan) -> str:
    """Render a plan as the tab-separated block users paste elsewhere.

    表と同じ列（日/新出/復習/合計）をタブ区切りで並べる。備考列は含めない。
    """
    lines = [TITLE, RULE, "\t".join(COLUMNS), RULE]
    for entry in plan:
        lines.append(f"Day {entry.day}\t{entry.new_words}\t{entry.review_words}\t{entry.total_daily}")
    return "\n".join(lines) + "\n"
