from datetime import date

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from analytics.demo import _build_demo_rounds  # noqa: E402
from analytics.stats import compute_stats  # noqa: E402
from analytics.strokes_gained import compute_sg_totals  # noqa: E402
from analytics.visualizations import (  # noqa: E402
    plot_lie_after_counts,
    plot_sg_by_category,
    plot_sg_per_round,
)
from models import Round  # noqa: E402


def test_demo_rounds_are_complete():
    rounds = _build_demo_rounds()
    assert len(rounds) == 3
    for round_obj in rounds:
        stats = compute_stats(round_obj)
        assert stats.holes_finished == 18
        assert stats.putts > 0


def test_plot_sg_by_category():
    rounds = _build_demo_rounds()
    fig, ax = plot_sg_by_category(compute_sg_totals(rounds[0]))
    assert len(ax.patches) == 4
    assert "Total" in ax.get_title()
    plt.close(fig)


def test_plot_lie_after_counts():
    stats = compute_stats(_build_demo_rounds()[0])
    fig, ax = plot_lie_after_counts(stats)
    assert len(ax.patches) == len(stats.lie_after_counts)
    plt.close(fig)


def test_plot_sg_per_round_labels():
    rounds = _build_demo_rounds()
    fig, ax = plot_sg_per_round(rounds)
    labels = [t.get_text() for t in ax.get_xticklabels()]
    assert labels == ["2026-02-01", "2026-02-08", "2026-02-15"]
    plt.close(fig)


def test_plot_empty_round():
    empty = Round.new("Empty", today=date(2026, 2, 1))
    fig, ax = plot_lie_after_counts(compute_stats(empty))
    assert len(ax.patches) == 0
    plt.close(fig)
