from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from ..export import format_plan_text
from ..logging import logger
from ..metrics import registry
from ..models.plan import PlanCreateRequest, StudyPlanResponse
from ..planner import build_plan
from ..planner.types import PlanRequest, StudyPlan
from ..validation import InvalidPlanInput, validate_plan_inputs

router = APIRouter(tags=["plan"])


def _build_from_payload(req: PlanCreateRequest) -> tuple[PlanRequest, StudyPlan]:
    """Validate the payload and build the plan, mapping bad input to 400."""
    try:
        plan_request = validate_plan_inputs(req.total_words, req.plan_days, req.include_review)
    except InvalidPlanInput as exc:
        registry.record_rejected_input()
        logger.warning(
            "plan_input_rejected",
            field=exc.field,
            total_words=req.total_words,
            plan_days=req.plan_days,
            reason=exc.message,
        )
        raise HTTPException(status_code=400, detail=exc.message) from exc

    plan = build_plan(plan_request)
    registry.record_plan(
        plan_days=plan_request.plan_days,
        total_words=plan_request.total_words,
        include_review=plan_request.include_review,
    )
    logger.info(
        "plan_built",
        total_words=plan_request.total_words,
        plan_days=plan_request.plan_days,
        include_review=plan_request.include_review,
        total_workload=plan.total_workload,
        peak_daily=plan.peak_daily,
    )
    return plan_request, plan


@router.post("", response_model=StudyPlanResponse, summary="学習計画を生成")
async def create_plan(req: PlanCreateRequest) -> StudyPlanResponse:
    """Generate a day-by-day plan of new words and review sessions."""
    plan_request, plan = _build_from_payload(req)
    return StudyPlanResponse.from_plan(plan_request, plan)


@router.post("/text", response_class=PlainTextResponse, summary="コピー用テキストとして計画を生成")
async def create_plan_text(req: PlanCreateRequest) -> PlainTextResponse:
    """Generate the plan as a tab-separated text block for copy & paste."""
    _, plan = _build_from_payload(req)
    return PlainTextResponse(format_plan_text(plan))
