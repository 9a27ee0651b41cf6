"""JSON round report: the recorded round plus its computed stats."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from analytics.baselines import BaselineTables
from analytics.stats import compute_stats
from analytics.strokes_gained import compute_sg_totals
from models.round import Round


def round_report(round_obj: Round, tables: Optional[BaselineTables] = None) -> Dict[str, Any]:
    """Round data with stats and strokes gained, as JSON-ready primitives."""
    return {
        "round": round_obj.model_dump(mode="json"),
        "stats": compute_stats(round_obj).model_dump(mode="json"),
        "strokes_gained": compute_sg_totals(round_obj, tables).model_dump(mode="json"),
    }


def round_to_json(round_obj: Round, tables: Optional[BaselineTables] = None, indent: int = 2) -> str:
    return json.dumps(round_report(round_obj, tables), indent=indent, ensure_ascii=False)


def json_filename(round_obj: Round) -> str:
    return f"round_{round_obj.round_id}.json"
