from .allocator import allocate
from .builder import build_plan, format_note
from .curve import forgetting_curve, review_markers
from .scheduler import GOLDEN_INTERVALS, SHORT_PLAN_MAX_DAYS, SHORT_PLAN_TABLE, review_days_for
from .types import CurvePoint, PlanDay, PlanRequest, ReviewSource, StudyPlan

__all__ = [
    "allocate",
    "build_plan",
    "format_note",
    "forgetting_curve",
    "review_markers",
    "review_days_for",
    "GOLDEN_INTERVALS",
    "SHORT_PLAN_MAX_DAYS",
    "SHORT_PLAN_TABLE",
    "CurvePoint",
    "PlanDay",
    "PlanRequest",
    "ReviewSource",
    "StudyPlan",
]
