from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from dotenv import load_dotenv

from analytics.stats import compute_stats
from analytics.strokes_gained import compute_sg_totals
from analytics.visualizations import plot_lie_after_counts, plot_sg_by_category
from database.connection import DatabaseSettings
from database.db_manager import open_manager
from database.repositories import DEFAULT_DRAFT_KEY
from models.round import Round


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate strokes-gained and lie charts for the stored draft round."
    )
    parser.add_argument("--key", default=DEFAULT_DRAFT_KEY, help="Draft key in drafts.round_drafts")
    parser.add_argument(
        "--outdir",
        default="analytics/output",
        help="Directory where chart PNGs are written",
    )
    parser.add_argument(
        "--dsn",
        default=None,
        help="Optional PostgreSQL DSN. If omitted, uses DATABASE_URL or connection defaults.",
    )
    return parser.parse_args()


async def _load_draft(key: str, dsn: str | None) -> Round:
    async with open_manager(DatabaseSettings.from_env(dsn)) as db:
        draft = await db.drafts.load_draft(key)
    if draft is None:
        raise RuntimeError(f"No draft stored under key: {key}")
    return draft


async def main_async() -> None:
    load_dotenv()
    args = _parse_args()
    round_obj = await _load_draft(args.key, args.dsn)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []

    fig, _ = plot_sg_by_category(compute_sg_totals(round_obj), title=round_obj.round_id)
    sg_path = outdir / f"sg_{round_obj.round_id}.png"
    fig.savefig(sg_path, dpi=150)
    written.append(sg_path)

    stats = compute_stats(round_obj)
    if stats.lie_after_counts:
        fig, _ = plot_lie_after_counts(stats)
        lie_path = outdir / f"lies_{round_obj.round_id}.png"
        fig.savefig(lie_path, dpi=150)
        written.append(lie_path)
    else:
        print("Skipping lie-after chart: no finished shots recorded.")

    print(f"Generated {len(written)} chart(s) for {round_obj.round_id}:")
    for path in written:
        print(path.resolve())


def main() -> None:
    asyncio.run(main_async())


if __name__ == "__main__":
    main()
