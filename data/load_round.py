"""Validate a round JSON file, print its stats and store it as the draft.
    python3 data/load_round.py data/sample_round.json
    python3 data/load_round.py my_round.json --no-save
"""

import argparse
import asyncio
import json
import os
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from analytics.stats import compute_stats
from analytics.strokes_gained import compute_sg_totals
from database.connection import DatabaseSettings
from database.db_manager import open_manager
from database.repositories import DEFAULT_DRAFT_KEY
from models import Round


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a recorded round from JSON.")
    parser.add_argument("path", help="Round JSON (snake_case or camelCase keys)")
    parser.add_argument("--key", default=DEFAULT_DRAFT_KEY, help="Draft key to store under")
    parser.add_argument("--no-save", action="store_true", help="Only print stats")
    return parser.parse_args()


def read_round(path: str) -> Round:
    with open(path) as f:
        return Round.model_validate(json.load(f))


def print_summary(round_: Round) -> None:
    stats = compute_stats(round_)
    sg = compute_sg_totals(round_)

    print(f"Round {round_.round_id} ({round_.course}, {round_.date.isoformat()})")
    print(f"  Holes finished: {stats.holes_finished}/{stats.holes_total}, shots: {stats.total_shots}")
    print(f"  FW {stats.fw_hit_pct}% ({stats.fw_hits}/{stats.fw_opportunities})"
          f"  GIR {stats.gir_pct}% ({stats.gir_hits}/{stats.gir_opportunities})"
          f"  Scramble {stats.scramble_pct}% ({stats.scramble_hits}/{stats.scramble_opportunities})")
    print(f"  Putts {stats.putts}, penalties {stats.penalties}, layups {stats.layups}")
    if stats.driving_count:
        print(f"  Driving avg {stats.driving_avg} yd, max {stats.driving_max} yd ({stats.driving_count} drives)")
    print(f"  SG: OTT {sg.ott:+.2f}  APP {sg.app:+.2f}  ARG {sg.arg:+.2f}  PUTT {sg.putt:+.2f}"
          f"  T2G {sg.t2g:+.2f}  Total {sg.total:+.2f}")


async def save_round(round_: Round, key: str, dsn: str = None) -> None:
    async with open_manager(DatabaseSettings.from_env(dsn)) as db:
        await db.drafts.save_draft(round_, key)
    print(f"Saved as draft '{key}'")


def main():
    load_dotenv()
    args = _parse_args()

    try:
        round_ = read_round(args.path)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"Could not load {args.path}: {e}")
        sys.exit(1)

    print_summary(round_)

    if not args.no_save:
        asyncio.run(save_round(round_, args.key))


if __name__ == "__main__":
    main()
