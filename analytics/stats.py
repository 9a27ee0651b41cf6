from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional

from models.hole import Hole
from models.lies import LieAfter, LieBefore
from models.results import RoundStats
from models.round import Round

from .strokes_gained import compute_sg_totals
from .utils import pct, round_half_up

FAIRWAY_PARS = (4, 5)
SCORED_PARS = (3, 4, 5)


def _has_par(hole: Hole) -> bool:
    return hole.par in SCORED_PARS


def gir_target(par: int) -> int:
    """Last stroke on which reaching the green still counts as regulation."""
    return max(1, par - 2)


def is_gir(hole: Hole) -> bool:
    """
    Green in regulation.

    The first shot that finishes on the green decides: it must be within
    par - 2 strokes, with no penalty on any shot up to and including it.
    """
    if not _has_par(hole):
        return False

    penalty_before_green = False
    for shot in hole.shots:
        if shot.touches_penalty:
            penalty_before_green = True
        if shot.lie_after == LieAfter.GREEN:
            return shot.shot <= gir_target(hole.par) and not penalty_before_green
    return False


def is_fairway_opportunity(hole: Hole) -> bool:
    return hole.par in FAIRWAY_PARS and hole.is_started


def is_fairway_hit(hole: Hole) -> bool:
    return is_fairway_opportunity(hole) and hole.first_shot.lie_after == LieAfter.FAIRWAY


def is_scramble_opportunity(hole: Hole) -> bool:
    """Finished a hole with a par but missed the green in regulation."""
    return _has_par(hole) and hole.is_finished and not is_gir(hole)


def is_scramble_made(hole: Hole) -> bool:
    return is_scramble_opportunity(hole) and len(hole.shots) == hole.par


def drive_distance(hole: Hole) -> Optional[int]:
    """Yards gained by the tee shot on a par 4 or 5, if it went forward."""
    first = hole.first_shot
    if hole.par not in FAIRWAY_PARS or first is None:
        return None
    if first.lie_before != LieBefore.TEE:
        return None
    drive = first.dist_before - first.dist_after
    if not math.isfinite(drive) or drive <= 0:
        return None
    return drive


def compute_stats(round_obj: Round) -> RoundStats:
    """Compute descriptive statistics for a single round."""
    holes_started = 0
    holes_finished = 0
    total_shots = 0
    putts = 0
    penalties = 0
    layups = 0
    lie_after_counts: Dict[str, int] = {}

    fw_opportunities = 0
    fw_hits = 0
    gir_opportunities = 0
    gir_hits = 0
    scramble_opportunities = 0
    scramble_hits = 0
    drives: List[int] = []

    for hole in round_obj.holes:
        if hole.is_started:
            holes_started += 1
        if hole.is_finished:
            holes_finished += 1
        total_shots += len(hole.shots)

        for shot in hole.shots:
            if shot.lie_before == LieBefore.GREEN:
                putts += 1
            if shot.lie_after is not None:
                key = shot.lie_after.value
                lie_after_counts[key] = lie_after_counts.get(key, 0) + 1
            if shot.touches_penalty:
                penalties += 1
            if shot.lie_before == LieBefore.LAYUP:
                layups += 1

        if is_fairway_opportunity(hole):
            fw_opportunities += 1
            if is_fairway_hit(hole):
                fw_hits += 1

        if _has_par(hole):
            gir_opportunities += 1
            if is_gir(hole):
                gir_hits += 1

        if is_scramble_opportunity(hole):
            scramble_opportunities += 1
            if is_scramble_made(hole):
                scramble_hits += 1

        drive = drive_distance(hole)
        if drive is not None:
            drives.append(drive)

    driving_avg = round_half_up(sum(drives) / len(drives), 1) if drives else 0.0

    return RoundStats(
        holes_total=len(round_obj.holes),
        holes_started=holes_started,
        holes_finished=holes_finished,
        total_shots=total_shots,
        putts=putts,
        penalties=penalties,
        layups=layups,
        fw_opportunities=fw_opportunities,
        fw_hits=fw_hits,
        fw_hit_pct=pct(fw_hits, fw_opportunities),
        gir_opportunities=gir_opportunities,
        gir_hits=gir_hits,
        gir_pct=pct(gir_hits, gir_opportunities),
        lie_after_counts=lie_after_counts,
        scramble_opportunities=scramble_opportunities,
        scramble_hits=scramble_hits,
        scramble_pct=pct(scramble_hits, scramble_opportunities),
        driving_count=len(drives),
        driving_avg=driving_avg,
        driving_max=max(drives) if drives else 0,
    )


def sg_per_round(rounds: Iterable[Round], tables=None) -> List[Dict[str, object]]:
    """Return strokes-gained totals by round for plotting/reporting."""
    results: List[Dict[str, object]] = []
    for index, round_obj in enumerate(rounds, start=1):
        result = compute_sg_totals(round_obj, tables)
        results.append(
            {
                "round_index": index,
                "round_id": round_obj.round_id,
                **result.model_dump(),
            }
        )
    return results
