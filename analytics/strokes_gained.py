"""Shot classification and strokes-gained computation."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from models.hole import Hole
from models.lies import LieAfter, LieBefore
from models.results import SgResult, ShotCategory, ShotSg
from models.round import Round
from models.shot import Shot

from .baselines import BaselineTables, default_baselines
from .utils import round_half_up

OTT_MIN_PAR = 4
OTT_MIN_HOLE_LENGTH = 300  # yards; a tee shot's dist_before is the hole length
SHORT_GAME_MAX_DIST = 30   # yards

Rule = Tuple[Callable[[Shot, Optional[int]], bool], ShotCategory]

# Order is precedence: the first matching rule decides the category.
# Shots no rule claims are APP.
CATEGORY_RULES: List[Rule] = [
    (lambda s, par: s.lie_before == LieBefore.GREEN, ShotCategory.PUTT),
    (
        lambda s, par: (
            s.shot == 1
            and s.lie_before == LieBefore.TEE
            and (par or 0) >= OTT_MIN_PAR
            and s.dist_before >= OTT_MIN_HOLE_LENGTH
        ),
        ShotCategory.OTT,
    ),
    (lambda s, par: s.dist_before <= SHORT_GAME_MAX_DIST, ShotCategory.ARG),
]


def classify_shot(shot: Shot, par: Optional[int]) -> Optional[ShotCategory]:
    """Category of a shot, or None for layup and penalty shots."""
    if shot.is_ignored:
        return None
    for matches, category in CATEGORY_RULES:
        if matches(shot, par):
            return category
    return ShotCategory.APP


def expected_before(category: ShotCategory, dist_before: int, tables: BaselineTables) -> float:
    """Expected strokes to hole out from where the shot was played."""
    if category == ShotCategory.OTT:
        # Keys are par buckets; a tee shot's dist_before is the hole length.
        return tables.ott.lookup(dist_before)
    if category == ShotCategory.APP:
        return tables.app.lookup(dist_before)
    if category == ShotCategory.ARG:
        return tables.arg.lookup(dist_before)
    return tables.putt.lookup(dist_before)


def expected_after(
    lie_after: Optional[LieAfter],
    dist_after: int,
    tables: BaselineTables,
) -> float:
    """Expected strokes remaining once the shot came to rest."""
    if lie_after == LieAfter.HOLED:
        return 0.0
    if lie_after == LieAfter.GREEN:
        return tables.putt.lookup(dist_after)
    if dist_after <= SHORT_GAME_MAX_DIST:
        return tables.arg.lookup(dist_after)
    return tables.app.lookup(dist_after)


def shot_strokes_gained(
    hole: Hole,
    shot: Shot,
    tables: Optional[BaselineTables] = None,
) -> Optional[ShotSg]:
    """Strokes gained by one shot; None when the shot is not counted."""
    tables = tables or default_baselines()
    category = classify_shot(shot, hole.par)
    if category is None:
        return None

    before = expected_before(category, shot.dist_before, tables)
    after = expected_after(shot.lie_after, shot.dist_after, tables)
    return ShotSg(
        hole=hole.number,
        shot=shot.shot,
        category=category,
        exp_before=before,
        exp_after=after,
        sg=before - after - 1,
    )


def compute_shot_sg(round_obj: Round, tables: Optional[BaselineTables] = None) -> List[ShotSg]:
    """Per-shot strokes gained in hole/shot order, ignored shots left out."""
    tables = tables or default_baselines()
    results: List[ShotSg] = []
    for hole in round_obj.holes:
        for shot in hole.shots:
            shot_sg = shot_strokes_gained(hole, shot, tables)
            if shot_sg is not None:
                results.append(shot_sg)
    return results


def compute_sg_totals(round_obj: Round, tables: Optional[BaselineTables] = None) -> SgResult:
    """
    Strokes gained by category for a round.

    t2g and total are built from the rounded category values, so
    t2g == ott + app + arg and total == t2g + putt hold at 2 decimals.
    """
    totals = {category: 0.0 for category in ShotCategory}
    for shot_sg in compute_shot_sg(round_obj, tables):
        totals[shot_sg.category] += shot_sg.sg

    ott = round_half_up(totals[ShotCategory.OTT], 2)
    app = round_half_up(totals[ShotCategory.APP], 2)
    arg = round_half_up(totals[ShotCategory.ARG], 2)
    putt = round_half_up(totals[ShotCategory.PUTT], 2)
    t2g = round_half_up(ott + app + arg, 2)
    total = round_half_up(t2g + putt, 2)

    return SgResult(ott=ott, app=app, arg=arg, putt=putt, t2g=t2g, total=total)
