from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional


class BaseGolfModel(BaseModel):
    """Shared configuration and methods.

    Round data is passed around as immutable snapshots, so every model is
    frozen. Edits go through `updated`, which returns a validated copy.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def updated(self, **changes: Any):
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)

    def try_update(self, **changes: Any):
        """Like `updated`, but returns (model, error message) instead of raising."""
        try:
            return self.updated(**changes), None
        except ValidationError as e:
            return self, e.errors()[0]['msg']
