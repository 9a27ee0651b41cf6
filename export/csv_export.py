"""Shot-log CSV export: one row per recorded shot."""

from __future__ import annotations

import csv
import io
from typing import List, Optional

from analytics.stats import is_gir
from models.hole import Hole
from models.round import Round

CSV_HEADER = [
    "Date",
    "Course",
    "RoundId",
    "Hole",
    "Par",
    "Shot",
    "LieBefore",
    "DistBeforeYd",
    "LieAfter",
    "DistAfterYd",
    "ScrambleTry",
    "ScrambleMade",
]


def _scramble_flags(hole: Hole) -> tuple[Optional[int], bool, bool]:
    """
    (first green shot number, scramble try, scramble made) for the export.

    A try is a hole with a par that reached the green outside regulation,
    whether or not it was finished; made also needs the hole finished in par.
    """
    green_shot = hole.first_green_shot()
    green_shot_no = green_shot.shot if green_shot else None
    scramble_try = hole.par is not None and green_shot_no is not None and not is_gir(hole)
    scramble_made = scramble_try and hole.is_finished and len(hole.shots) == hole.par
    return green_shot_no, scramble_try, scramble_made


def _hole_rows(round_obj: Round, hole: Hole) -> List[List[str]]:
    green_shot_no, scramble_try, scramble_made = _scramble_flags(hole)
    rows: List[List[str]] = []
    for shot in hole.shots:
        # Flags land on the row of the first shot that reached the green.
        on_green_row = shot.shot == green_shot_no
        rows.append(
            [
                round_obj.date.isoformat(),
                round_obj.course,
                round_obj.round_id,
                str(hole.number),
                str(hole.par) if hole.par is not None else "",
                str(shot.shot),
                shot.lie_before.value if shot.lie_before else "",
                str(shot.dist_before),
                shot.lie_after.value if shot.lie_after else "",
                str(shot.dist_after),
                "1" if scramble_try and on_green_row else "",
                "1" if scramble_made and on_green_row else "",
            ]
        )
    return rows


def round_to_csv(round_obj: Round) -> str:
    """Render the round's shots as CSV text (header included)."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for hole in round_obj.holes:
        writer.writerows(_hole_rows(round_obj, hole))
    return buffer.getvalue()


def csv_filename(round_obj: Round) -> str:
    return f"shots_{round_obj.round_id}.csv"
