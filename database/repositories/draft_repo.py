"""Load/save/clear of the in-progress round (the draft)."""

import asyncpg
import logging
from typing import Optional

from models import Round
from database.converters import round_from_row, round_to_payload
from database.exceptions import DatabaseError

logger = logging.getLogger(__name__)

DEFAULT_DRAFT_KEY = "draft-round"


class DraftRepositoryDB:
    """Async key-value storage of round drafts."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def load_draft(self, key: str = DEFAULT_DRAFT_KEY) -> Optional[Round]:
        """Get the stored draft, or None if there is none."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT key, payload FROM drafts.round_drafts WHERE key = $1", key
            )
            return round_from_row(row) if row else None

    async def save_draft(self, round_: Round, key: str = DEFAULT_DRAFT_KEY) -> Round:
        """Insert or replace the draft stored under `key`."""
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    """INSERT INTO drafts.round_drafts (key, payload, updated_at)
                       VALUES ($1, $2::jsonb, now())
                       ON CONFLICT (key)
                       DO UPDATE SET payload = EXCLUDED.payload, updated_at = now()""",
                    key, round_to_payload(round_),
                )
        except asyncpg.PostgresError as e:
            raise DatabaseError(f"Could not save draft {key}: {e}") from e
        logger.info("Saved draft %s (round %s)", key, round_.round_id)
        return round_

    async def clear_draft(self, key: str = DEFAULT_DRAFT_KEY) -> bool:
        """Delete the draft. Returns False if nothing was stored."""
        async with self._pool.acquire() as conn:
            result = await conn.execute(
                "DELETE FROM drafts.round_drafts WHERE key = $1", key
            )
        deleted = result == "DELETE 1"
        if deleted:
            logger.info("Cleared draft %s", key)
        return deleted
