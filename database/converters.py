"""Conversion between draft rows and the Round model.

The draft payload is an opaque JSON blob; only Round validation gives it
meaning.
"""

import json
from typing import Any, Mapping

from pydantic import ValidationError

from models import Round
from database.exceptions import CorruptDraftError


def round_to_payload(round_: Round) -> str:
    """Round -> JSON text for the JSONB payload column."""
    return round_.model_dump_json()


def round_from_payload(payload: Any) -> Round:
    """JSONB payload (text or already-decoded) -> Round."""
    try:
        data = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
        return Round.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise CorruptDraftError(f"Stored draft is not a valid round: {e}") from e


def round_from_row(row: Mapping[str, Any]) -> Round:
    """drafts.round_drafts row -> Round."""
    return round_from_payload(row["payload"])
