from pydantic import AliasChoices, Field, model_validator
from typing import Any, List, Optional

from .base import BaseGolfModel
from .lies import LieAfter
from .shot import Shot


class Hole(BaseGolfModel):
    """One hole of a round and the shots played on it, in order."""

    number: int = Field(..., ge=1, le=18, validation_alias=AliasChoices("number", "hole"))
    par: Optional[int] = Field(None, ge=3, le=5)
    shots: List[Shot] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_shot_order(self):
        # Shot numbers run 1..n with nothing played after the ball is holed.
        for index, shot in enumerate(self.shots, start=1):
            if shot.shot != index:
                raise ValueError(
                    f"Hole {self.number}: expected shot {index}, got shot {shot.shot}"
                )
        for shot in self.shots[:-1]:
            if shot.is_holed:
                raise ValueError(
                    f"Hole {self.number}: shot {shot.shot} is holed but more shots follow"
                )
        return self

    @property
    def is_started(self) -> bool:
        return len(self.shots) > 0

    @property
    def is_finished(self) -> bool:
        return any(s.is_holed for s in self.shots)

    @property
    def first_shot(self) -> Optional[Shot]:
        return self.shots[0] if self.shots else None

    def first_green_shot(self) -> Optional[Shot]:
        """First shot whose ball came to rest on the green, if any."""
        for shot in self.shots:
            if shot.lie_after == LieAfter.GREEN:
                return shot
        return None

    # ================================================================
    # Editing (each returns a new Hole)
    # ================================================================

    def with_par(self, par: Optional[int]) -> "Hole":
        return self.updated(par=par)

    def add_shot(self) -> "Hole":
        """
        Append the next shot, starting where the previous one finished.

        Raises ValueError if the hole is already holed out.
        """
        if self.is_finished:
            raise ValueError(f"Hole {self.number} is finished; no more shots can be added")
        lie_before = None
        dist_before = 0
        if self.shots:
            prev = self.shots[-1]
            if prev.lie_after is not None:
                lie_before = prev.lie_after.value
            dist_before = prev.dist_after

        new_shot = Shot(
            shot=len(self.shots) + 1,
            lie_before=lie_before,
            dist_before=dist_before,
        )
        return self.updated(shots=[*self.shots, new_shot])

    def update_shot(self, index: int, **changes: Any) -> "Hole":
        """Edit the shot at `index` (0-based) and re-fill the next shot's start."""
        shots = list(self.shots)
        data = shots[index].model_dump()
        data.update(changes)
        if data.get("lie_after") == LieAfter.HOLED:
            data["dist_after"] = 0
        edited = Shot.model_validate(data)
        shots[index] = edited

        if index + 1 < len(shots):
            following = shots[index + 1].model_dump()
            if edited.lie_after is not None and not edited.is_holed:
                following["lie_before"] = edited.lie_after.value
            following["dist_before"] = edited.dist_after
            shots[index + 1] = Shot.model_validate(following)

        return self.updated(shots=shots)

    def delete_last_shot(self) -> "Hole":
        if not self.shots:
            return self
        return self.updated(shots=self.shots[:-1])
