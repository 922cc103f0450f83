"""Boundary validation for plan requests.

フォーム入力（文字列・数値）を検証し、計画生成に渡せる `PlanRequest` へ変換する。
不正な入力はユーザー向けメッセージ付きの `InvalidPlanInput` で拒否する。
"""

from __future__ import annotations

from .config import settings
from .planner.types import PlanRequest

MSG_INVALID_NUMBER = "Please enter valid positive numbers."
MSG_TOO_FEW_WORDS = "Total words cannot be less than the number of plan days. Please adjust."


class InvalidPlanInput(ValueError):
    """Raised when raw plan input cannot be turned into a PlanRequest.

    `message` is safe to show to the user as-is.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


def _coerce_int(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            return int(text, 10)
        except ValueError:
            return None
    return None


def validate_plan_inputs(
    total_words: object,
    plan_days: object,
    include_review: bool | None = None,
) -> PlanRequest:
    """Validate raw values and return a PlanRequest.

    - non-numeric or non-positive values are rejected
    - `total_words` must be at least `plan_days` (one new word per day minimum)
    - both values are capped by `settings.max_total_words` / `settings.max_plan_days`
    """
    words = _coerce_int(total_words)
    days = _coerce_int(plan_days)
    if words is None or days is None or words <= 0 or days <= 0:
        field = "total_words" if words is None or words <= 0 else "plan_days"
        raise InvalidPlanInput(MSG_INVALID_NUMBER, field=field)

    if words < days:
        raise InvalidPlanInput(MSG_TOO_FEW_WORDS, field="total_words")

    if words > settings.max_total_words:
        raise InvalidPlanInput(
            f"Total words must not exceed {settings.max_total_words}.",
            field="total_words",
        )
    if days > settings.max_plan_days:
        raise InvalidPlanInput(
            f"Plan days must not exceed {settings.max_plan_days}.",
            field="plan_days",
        )

    if include_review is None:
        include_review = settings.default_include_review
    return PlanRequest(total_words=words, plan_days=days, include_review=bool(include_review))
