"""Baseline expected-strokes tables used by the strokes-gained engine.

Each table maps a situation to the expected number of strokes needed to
finish the hole from there. OTT keys are hole par buckets, looked up with
the tee distance; APP, ARG and PUTT are keyed by distance to the hole in
yards. The default tables ship with the package in
`analytics/data/baselines.json`; set `SG_BASELINES_PATH` to load a different
file with the same shape.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import floor_lookup

logger = logging.getLogger(__name__)

DEFAULT_BASELINES_PATH = Path(__file__).with_name("data") / "baselines.json"
BASELINES_PATH_ENV = "SG_BASELINES_PATH"


class BaselineEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: float
    expected: float = Field(..., ge=0)


class BaselineTable(BaseModel):
    """Ordered (key, expected strokes) pairs, strictly ascending by key."""
    model_config = ConfigDict(frozen=True)

    entries: Tuple[BaselineEntry, ...]

    @field_validator('entries')
    @classmethod
    def validate_sorted(cls, v):
        if not v:
            raise ValueError("Baseline table must have at least one entry")
        keys = [e.key for e in v]
        for previous, current in zip(keys, keys[1:]):
            if current <= previous:
                raise ValueError(f"Baseline keys must be strictly ascending ({previous} then {current})")
        return v

    @classmethod
    def from_pairs(cls, pairs) -> "BaselineTable":
        return cls(entries=tuple(BaselineEntry(key=k, expected=e) for k, e in pairs))

    def pairs(self) -> List[Tuple[float, float]]:
        return [(e.key, e.expected) for e in self.entries]

    def lookup(self, value: float) -> float:
        return floor_lookup(value, self.pairs())


class BaselineTables(BaseModel):
    """The four category tables."""
    model_config = ConfigDict(frozen=True)

    ott: BaselineTable
    app: BaselineTable
    arg: BaselineTable
    putt: BaselineTable

    @field_validator('ott', 'app', 'arg', 'putt', mode='before')
    @classmethod
    def accept_entry_lists(cls, v):
        if isinstance(v, list):
            return {"entries": v}
        return v


def load_baselines(path: Optional[Path] = None) -> BaselineTables:
    """Read baseline tables from a JSON file."""
    source = Path(path) if path else DEFAULT_BASELINES_PATH
    with open(source) as f:
        data = json.load(f)
    tables = BaselineTables.model_validate(data)
    logger.info("Loaded strokes-gained baselines from %s", source)
    return tables


@lru_cache(maxsize=1)
def default_baselines() -> BaselineTables:
    """Process-wide tables, honoring SG_BASELINES_PATH."""
    override = os.environ.get(BASELINES_PATH_ENV)
    return load_baselines(Path(override) if override else None)
