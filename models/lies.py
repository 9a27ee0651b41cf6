from enum import Enum
from typing import Any, Optional


class LieBefore(str, Enum):
    """Where the ball sits before a shot."""
    TEE = "Tee"
    FAIRWAY = "Fairway"
    ROUGH = "Rough"
    FRINGE = "Fringe"
    GREEN = "Green"
    BUNKER = "Bunker"
    LAYUP = "Layup"
    PENALTY = "Penalty"


class LieAfter(str, Enum):
    """Where the ball ends up after a shot."""
    FAIRWAY = "Fairway"
    ROUGH = "Rough"
    FRINGE = "Fringe"
    GREEN = "Green"
    BUNKER = "Bunker"
    LAYUP = "Layup"
    PENALTY = "Penalty"
    HOLED = "Holed"


# Lies that take a shot out of strokes-gained accounting.
IGNORED_LIES = frozenset({"Layup", "Penalty"})


def blank_to_none(value: Any) -> Optional[Any]:
    """Empty or whitespace-only lie strings mean "not set"."""
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, str):
        return value.strip()
    return value
