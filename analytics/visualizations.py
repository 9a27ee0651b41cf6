from __future__ import annotations

from typing import Optional, Sequence

from models.results import RoundStats, SgResult
from models.round import Round

from .stats import sg_per_round

SG_CATEGORIES = [
    ("ott", "Off The Tee"),
    ("app", "Approach"),
    ("arg", "Around Green"),
    ("putt", "Putting"),
]


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def _default_labels(rounds: Sequence[Round]) -> list[str]:
    labels: list[str] = []
    for index, round_obj in enumerate(rounds, start=1):
        if round_obj.date:
            labels.append(round_obj.date.strftime("%Y-%m-%d"))
        else:
            labels.append(f"R{index}")
    return labels


def _apply_sparse_xticks(ax, labels: Sequence[str], max_labels: int = 12) -> None:
    """
    Keep x-axis readable when there are many rounds.

    Shows at most `max_labels` ticks while preserving order.
    """
    count = len(labels)
    if count <= max_labels:
        ax.set_xticks(range(count))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        return

    step = max(1, count // max_labels)
    tick_positions = list(range(0, count, step))
    if tick_positions[-1] != count - 1:
        tick_positions.append(count - 1)

    tick_labels = [labels[i] for i in tick_positions]
    ax.set_xticks(tick_positions)
    ax.set_xticklabels(tick_labels, rotation=45, ha="right")


def plot_sg_by_category(result: SgResult, title: str = "Strokes Gained By Category"):
    """Bar chart: SG per category, green for gains and red for losses."""
    plt = _load_plt()
    labels = [label for _, label in SG_CATEGORIES]
    values = [getattr(result, key) for key, _ in SG_CATEGORIES]
    colors = ["tab:green" if v >= 0 else "tab:red" for v in values]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(labels, values, color=colors)
    ax.set_title(f"{title} (Total {result.total:+.2f})")
    ax.set_ylabel("Strokes Gained")
    ax.axhline(0, color="black", linewidth=1, alpha=0.6)
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_lie_after_counts(stats: RoundStats):
    """Horizontal bars: where shots finished."""
    plt = _load_plt()
    items = sorted(stats.lie_after_counts.items(), key=lambda kv: kv[1], reverse=True)
    lies = [lie for lie, _ in items]
    counts = [count for _, count in items]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.barh(lies, counts)
    ax.invert_yaxis()
    ax.set_title("Lie After Breakdown")
    ax.set_xlabel("Shots")
    ax.grid(axis="x", alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_sg_per_round(rounds: Sequence[Round], labels: Optional[Sequence[str]] = None):
    """
    Combined chart:
    - stacked bars: SG per category per round
    - line: total SG per round
    """
    plt = _load_plt()
    rows = sg_per_round(rounds)
    x_labels = list(labels) if labels is not None else _default_labels(rounds)
    x = list(range(len(x_labels)))

    fig, ax = plt.subplots(figsize=(11, 5))
    pos_bottom = [0.0] * len(rows)
    neg_bottom = [0.0] * len(rows)
    for key, label in SG_CATEGORIES:
        values = [row[key] for row in rows]
        bottoms = [p if v >= 0 else n for v, p, n in zip(values, pos_bottom, neg_bottom)]
        ax.bar(x, values, bottom=bottoms, alpha=0.8, label=label)
        pos_bottom = [p + max(v, 0) for p, v in zip(pos_bottom, values)]
        neg_bottom = [n + min(v, 0) for n, v in zip(neg_bottom, values)]

    totals = [row["total"] for row in rows]
    ax.plot(x, totals, color="black", marker="o", linewidth=1.5, label="Total")
    ax.axhline(0, color="black", linewidth=1, alpha=0.6)
    ax.set_title("Strokes Gained Per Round")
    ax.set_xlabel("Round")
    ax.set_ylabel("Strokes Gained")
    _apply_sparse_xticks(ax, x_labels)
    ax.legend(loc="upper left", ncols=5, fontsize=8)
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax
