from fastapi import APIRouter

from ..config import settings
from ..planner import SHORT_PLAN_MAX_DAYS


router = APIRouter()


@router.get("/config")
def get_runtime_config() -> dict[str, object]:
    """Expose runtime config needed by the frontend.

    フォーム側で同じ上限を事前チェックできるよう、入力上限と既定値を返す。
    """
    return {
        "max_total_words": settings.max_total_words,
        "max_plan_days": settings.max_plan_days,
        "default_include_review": settings.default_include_review,
        "short_plan_max_days": SHORT_PLAN_MAX_DAYS,
    }
