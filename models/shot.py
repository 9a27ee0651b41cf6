from pydantic import AliasChoices, Field, field_validator, model_validator
from typing import Optional

from .base import BaseGolfModel
from .lies import IGNORED_LIES, LieAfter, LieBefore, blank_to_none


class Shot(BaseGolfModel):
    """A single recorded stroke: where it started and where it finished."""

    shot: int = Field(..., ge=1, validation_alias=AliasChoices("shot", "shot_number"))
    lie_before: Optional[LieBefore] = Field(
        None, validation_alias=AliasChoices("lie_before", "lieBefore")
    )
    dist_before: int = Field(
        0, ge=0, validation_alias=AliasChoices("dist_before", "distBefore")
    )
    lie_after: Optional[LieAfter] = Field(
        None, validation_alias=AliasChoices("lie_after", "lieAfter")
    )
    dist_after: int = Field(
        0, ge=0, validation_alias=AliasChoices("dist_after", "distAfter")
    )

    @field_validator('lie_before', 'lie_after', mode='before')
    @classmethod
    def empty_lie_is_unset(cls, v):
        return blank_to_none(v)

    @field_validator('dist_before', 'dist_after', mode='before')
    @classmethod
    def missing_distance_is_zero(cls, v):
        return 0 if v is None else v

    @model_validator(mode='after')
    def validate_holed_distance(self):
        if self.lie_after == LieAfter.HOLED and self.dist_after != 0:
            raise ValueError(f"Holed shot must finish at 0 yards, got {self.dist_after}")
        return self

    @property
    def is_holed(self) -> bool:
        return self.lie_after == LieAfter.HOLED

    @property
    def touches_penalty(self) -> bool:
        return self.lie_before == LieBefore.PENALTY or self.lie_after == LieAfter.PENALTY

    @property
    def is_ignored(self) -> bool:
        """Layup and penalty shots carry no strokes-gained value."""
        lies = {lie.value for lie in (self.lie_before, self.lie_after) if lie is not None}
        return bool(lies & IGNORED_LIES)
