from fastapi import APIRouter

from ..config import settings
from ..models.plan import CurvePointModel, ForgettingCurveResponse
from ..planner import forgetting_curve, review_markers

router = APIRouter(tags=["curve"])


@router.get("", response_model=ForgettingCurveResponse, summary="忘却曲線（チャート用の例示データ）")
async def get_curve() -> ForgettingCurveResponse:
    """Return the illustrative retention series and the review markers.

    チャート描画専用の固定値。計画生成には影響しない。
    """
    days = settings.curve_days
    return ForgettingCurveResponse(
        points=[CurvePointModel.from_point(p) for p in forgetting_curve(days)],
        markers=[CurvePointModel.from_point(p) for p in review_markers(days)],
    )
