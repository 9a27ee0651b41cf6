import re
from datetime import date as date_type
from pydantic import AliasChoices, Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole

HOLES_PER_ROUND = 18
DEFAULT_COURSE = "MyCourse"

_WHITESPACE = re.compile(r"\s+")
# ASCII letters, digits, dashes and Thai characters survive sanitizing.
_DISALLOWED = re.compile(r"[^a-zA-Z0-9\-ก-๙]")


def sanitize_course_name(name: Optional[str]) -> str:
    """Turn a free-text course name into an id-safe token."""
    cleaned = _WHITESPACE.sub("-", (name or "").strip())
    return _DISALLOWED.sub("", cleaned)


def make_round_id(played_on: date_type, course: str) -> str:
    """`YYYYDDDD-course`, where DDDD is the zero-padded day of the year."""
    day_of_year = played_on.timetuple().tm_yday
    return f"{played_on.year}{day_of_year:04d}-{course}"


class Round(BaseGolfModel):
    """A round being recorded shot by shot. Holes are positional (index = number - 1)."""

    date: date_type
    course: str
    round_id: str = Field(..., validation_alias=AliasChoices("round_id", "roundId"))
    holes: List[Hole] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_hole_positions(self):
        if len(self.holes) > HOLES_PER_ROUND:
            raise ValueError(f"A round has at most {HOLES_PER_ROUND} holes, got {len(self.holes)}")
        for index, hole in enumerate(self.holes, start=1):
            if hole.number != index:
                raise ValueError(f"Hole at position {index} is numbered {hole.number}")
        return self

    @classmethod
    def new(cls, course: Optional[str] = None, today: Optional[date_type] = None) -> "Round":
        """Start an empty 18-hole round for `course`."""
        played_on = today or date_type.today()
        course_safe = sanitize_course_name(course) or sanitize_course_name(DEFAULT_COURSE)
        return cls(
            date=played_on,
            course=course_safe,
            round_id=make_round_id(played_on, course_safe),
            holes=[Hole(number=i) for i in range(1, HOLES_PER_ROUND + 1)],
        )

    def get_hole(self, hole_number: int) -> Optional[Hole]:
        """Get a hole by number. Assumes holes in order."""
        if 1 <= hole_number <= len(self.holes):
            return self.holes[hole_number - 1]
        return None

    def with_hole(self, hole: Hole) -> "Round":
        """Return a new round with `hole` replacing the hole of the same number."""
        if not 1 <= hole.number <= len(self.holes):
            raise ValueError(f"Round {self.round_id} has no hole {hole.number}")
        holes = list(self.holes)
        holes[hole.number - 1] = hole
        return self.updated(holes=holes)

    def total_shots(self) -> int:
        return sum(len(h.shots) for h in self.holes)
