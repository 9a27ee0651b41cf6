"""Statistics and strokes-gained API endpoints."""

from fastapi import APIRouter, Depends

from analytics.stats import compute_stats
from analytics.strokes_gained import compute_sg_totals
from api.dependencies import get_draft
from api.schemas import RoundAnalysisResponse
from models import Round, RoundStats, SgResult

router = APIRouter()


@router.post("/sg", response_model=SgResult)
async def strokes_gained(round_: Round):
    return compute_sg_totals(round_)


@router.post("/round", response_model=RoundStats)
async def round_stats(round_: Round):
    return compute_stats(round_)


@router.get("/draft", response_model=RoundAnalysisResponse)
async def draft_analysis(draft: Round = Depends(get_draft)):
    return RoundAnalysisResponse(
        round_id=draft.round_id,
        stats=compute_stats(draft),
        strokes_gained=compute_sg_totals(draft),
    )
