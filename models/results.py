from enum import Enum
from pydantic import Field
from typing import Dict

from .base import BaseGolfModel


class ShotCategory(str, Enum):
    """Strokes-gained buckets."""
    OTT = "OTT"    # off the tee
    APP = "APP"    # approach
    ARG = "ARG"    # around the green
    PUTT = "PUTT"


class SgResult(BaseGolfModel):
    """Strokes gained per category for a round, rounded to 2 decimals."""
    ott: float = 0.0
    app: float = 0.0
    arg: float = 0.0
    putt: float = 0.0
    t2g: float = 0.0
    total: float = 0.0


class ShotSg(BaseGolfModel):
    """Strokes gained for one shot, unrounded."""
    hole: int
    shot: int
    category: ShotCategory
    exp_before: float
    exp_after: float
    sg: float


class RoundStats(BaseGolfModel):
    """Descriptive statistics for a round."""
    holes_total: int = 0
    holes_started: int = 0
    holes_finished: int = 0

    total_shots: int = 0
    putts: int = 0
    penalties: int = 0
    layups: int = 0

    fw_opportunities: int = 0
    fw_hits: int = 0
    fw_hit_pct: int = Field(0, ge=0, le=100)

    gir_opportunities: int = 0
    gir_hits: int = 0
    gir_pct: int = Field(0, ge=0, le=100)

    lie_after_counts: Dict[str, int] = Field(default_factory=dict)

    scramble_opportunities: int = 0
    scramble_hits: int = 0
    scramble_pct: int = Field(0, ge=0, le=100)

    driving_count: int = 0
    driving_avg: float = 0.0
    driving_max: int = 0
