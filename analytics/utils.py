from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence, Tuple

Entry = Tuple[float, float]


def floor_lookup(value: float, entries: Sequence[Entry]) -> float:
    """
    Expected value of the entry with the greatest key <= `value`.

    `entries` must be non-empty and sorted ascending by key. Values below the
    smallest key fall back to the first entry; nothing is extrapolated.
    """
    best = entries[0]
    for entry in entries:
        if entry[0] <= value:
            best = entry
        else:
            break
    return best[1]


def round_half_up(value: float, places: int = 0) -> float:
    """Round half away from zero on the value's shortest decimal form."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def pct(hits: int, opportunities: int) -> int:
    """Whole-number percentage; 0 when there were no opportunities."""
    if opportunities == 0:
        return 0
    return int(round_half_up(hits / opportunities * 100))
