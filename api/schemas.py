"""API-specific request and response models."""

from pydantic import BaseModel
from typing import Optional

from models import RoundStats, SgResult


class NewRoundRequest(BaseModel):
    course: Optional[str] = None


class RoundAnalysisResponse(BaseModel):
    """Stats and strokes gained for one round."""
    round_id: str
    stats: RoundStats
    strokes_gained: SgResult
