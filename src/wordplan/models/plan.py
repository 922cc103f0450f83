from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from ..planner.types import CurvePoint, PlanDay, PlanRequest, StudyPlan

# フォーム値をそのまま受け取り、型を含む検証は validate_plan_inputs に任せる。
RawNumber = StrictBool | StrictInt | StrictFloat | StrictStr | None


class PlanCreateRequest(BaseModel):
    """Request model for generating a study plan.

    総単語数と計画日数、復習を含めるかどうかを指定する。
    数値変換と範囲チェック（正の整数・総単語数 >= 日数）はルーター側で行い、
    ユーザー向けメッセージ付きの 400 を返す。
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"total_words": 100, "plan_days": 10, "include_review": True},
                {"total_words": 3000, "plan_days": 30},
            ]
        }
    )

    total_words: RawNumber = Field(default=None, description="Total vocabulary size / 総単語数")
    plan_days: RawNumber = Field(default=None, description="Number of study days / 計画日数")
    include_review: bool | None = Field(
        default=None,
        description="Include review sessions (server default when omitted) / 復習を含めるか",
    )


class ReviewSourceModel(BaseModel):
    source_day: int
    words_reviewed: int


class PlanDayModel(BaseModel):
    """One row of the plan table."""

    day: int
    new_words: int
    review_words: int
    total_daily: int
    review_sources: list[ReviewSourceModel] = []
    note: str

    @classmethod
    def from_day(cls, entry: PlanDay) -> "PlanDayModel":
        return cls(
            day=entry.day,
            new_words=entry.new_words,
            review_words=entry.review_words,
            total_daily=entry.total_daily,
            review_sources=[
                ReviewSourceModel(source_day=src.source_day, words_reviewed=src.words_reviewed)
                for src in entry.review_sources
            ],
            note=entry.note,
        )


class PlanSummary(BaseModel):
    total_new_words: int
    total_review_words: int
    total_workload: int
    peak_daily: int


class PlanRequestEcho(BaseModel):
    total_words: int
    plan_days: int
    include_review: bool


class StudyPlanResponse(BaseModel):
    """Response model for a generated plan.

    - request: 正規化後の入力
    - summary: 総新出語数・総復習語数・総負荷・1 日の最大負荷
    - days: 日ごとの計画（1 日目から順）
    """

    request: PlanRequestEcho
    summary: PlanSummary
    days: list[PlanDayModel]

    @classmethod
    def from_plan(cls, request: PlanRequest, plan: StudyPlan) -> "StudyPlanResponse":
        return cls(
            request=PlanRequestEcho(
                total_words=request.total_words,
                plan_days=request.plan_days,
                include_review=request.include_review,
            ),
            summary=PlanSummary(
                total_new_words=plan.total_new_words,
                total_review_words=plan.total_review_words,
                total_workload=plan.total_workload,
                peak_daily=plan.peak_daily,
            ),
            days=[PlanDayModel.from_day(entry) for entry in plan],
        )


class CurvePointModel(BaseModel):
    day: int
    retention_without_review: float
    retention_with_review: float

    @classmethod
    def from_point(cls, point: CurvePoint) -> "CurvePointModel":
        return cls(
            day=point.day,
            retention_without_review=round(point.retention_without_review, 2),
            retention_with_review=round(point.retention_with_review, 2),
        )


class ForgettingCurveResponse(BaseModel):
    """Illustrative retention series for the chart (not modeled learner data)."""

    points: list[CurvePointModel]
    markers: list[CurvePointModel]
