from .base import BaseGolfModel
from .hole import Hole
from .lies import LieAfter, LieBefore
from .results import RoundStats, SgResult, ShotCategory, ShotSg
from .round import Round
from .shot import Shot

__all__ = [
    "BaseGolfModel",
    "Hole",
    "LieAfter",
    "LieBefore",
    "Round",
    "RoundStats",
    "SgResult",
    "ShotCategory",
    "ShotSg",
    "Shot",
]
