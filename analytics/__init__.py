from .baselines import BaselineTable, BaselineTables, default_baselines, load_baselines
from .stats import compute_stats, is_gir, sg_per_round
from .strokes_gained import classify_shot, compute_sg_totals, compute_shot_sg
from .utils import floor_lookup
from .visualizations import (
    plot_lie_after_counts,
    plot_sg_by_category,
    plot_sg_per_round,
)

__all__ = [
    "BaselineTable",
    "BaselineTables",
    "default_baselines",
    "load_baselines",
    "compute_stats",
    "compute_sg_totals",
    "compute_shot_sg",
    "classify_shot",
    "floor_lookup",
    "is_gir",
    "sg_per_round",
    "plot_sg_by_category",
    "plot_lie_after_counts",
    "plot_sg_per_round",
]
