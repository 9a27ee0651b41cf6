from __future__ import annotations

from datetime import date
from pathlib import Path

from models.hole import Hole
from models.round import Round
from models.shot import Shot

from .stats import compute_stats
from .strokes_gained import compute_sg_totals
from .visualizations import (
    plot_lie_after_counts,
    plot_sg_by_category,
    plot_sg_per_round,
)

PARS = [4, 4, 3, 5, 4, 4, 3, 4, 5, 4, 3, 4, 5, 4, 4, 3, 4, 5]


def _play_hole(number: int, par: int, length: int, variant: int) -> Hole:
    """A scripted hole: tee shot, approach, maybe a chip, then putts."""
    shots = []
    if par == 3:
        lie = "Green" if variant % 2 == 0 else "Fringe"
        shots.append(dict(lie_before="Tee", dist_before=length, lie_after=lie, dist_after=8))
    else:
        lie = "Fairway" if variant % 3 else "Rough"
        remaining = max(length - 250, 90) if par == 4 else 260
        shots.append(dict(lie_before="Tee", dist_before=length, lie_after=lie, dist_after=remaining))
        if par == 5:
            shots.append(dict(lie_before=lie, dist_before=remaining, lie_after="Fairway", dist_after=95))
            lie, remaining = "Fairway", 95
        finish = "Green" if variant % 4 else "Bunker"
        shots.append(dict(lie_before=lie, dist_before=remaining, lie_after=finish, dist_after=12))

    if shots[-1]["lie_after"] != "Green":
        prev = shots[-1]
        shots.append(dict(lie_before=prev["lie_after"], dist_before=prev["dist_after"], lie_after="Green", dist_after=3))
    putt_from = shots[-1]["dist_after"]
    if variant % 5 == 0:
        shots.append(dict(lie_before="Green", dist_before=putt_from, lie_after="Green", dist_after=1))
        putt_from = 1
    shots.append(dict(lie_before="Green", dist_before=putt_from, lie_after="Holed", dist_after=0))

    return Hole(
        number=number,
        par=par,
        shots=[Shot(shot=i, **s) for i, s in enumerate(shots, start=1)],
    )


def _build_demo_round(seed: int, played_on: date) -> Round:
    base = Round.new("Demo Course", today=played_on)
    holes = []
    for number, par in enumerate(PARS, start=1):
        length = {3: 165, 4: 390, 5: 520}[par]
        holes.append(_play_hole(number, par, length, number + seed))
    return base.updated(holes=holes)


def _build_demo_rounds() -> list[Round]:
    return [
        _build_demo_round(0, date(2026, 2, 1)),
        _build_demo_round(1, date(2026, 2, 8)),
        _build_demo_round(2, date(2026, 2, 15)),
    ]


def main() -> None:
    rounds = _build_demo_rounds()
    output_dir = Path("analytics/output")
    output_dir.mkdir(parents=True, exist_ok=True)

    latest = rounds[-1]
    fig1, _ = plot_sg_by_category(compute_sg_totals(latest))
    fig1.savefig(output_dir / "sg_by_category.png", dpi=150)

    fig2, _ = plot_lie_after_counts(compute_stats(latest))
    fig2.savefig(output_dir / "lie_after_counts.png", dpi=150)

    fig3, _ = plot_sg_per_round(rounds)
    fig3.savefig(output_dir / "sg_per_round.png", dpi=150)

    print(f"Saved charts to: {output_dir.resolve()}")


if __name__ == "__main__":
    main()
