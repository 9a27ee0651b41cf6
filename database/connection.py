"""asyncpg pool for the draft store.

Settings come from the environment (`DATABASE_URL`, `DB_POOL_MIN`,
`DB_POOL_MAX`). Starting the pool also creates the `drafts` schema from
`database/schema.sql`, so the API and the CLIs can use a fresh database.
"""

import asyncpg
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from database.exceptions import DatabaseError

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")
DRAFTS_TABLE = "drafts.round_drafts"


class DatabaseSettings(BaseModel):
    """Connection target and pool sizing for the draft store."""

    dsn: Optional[str] = None
    min_size: int = Field(1, ge=0)
    max_size: int = Field(5, ge=1)

    @model_validator(mode='after')
    def validate_pool_size(self):
        if self.min_size > self.max_size:
            raise ValueError(
                f"Pool min_size ({self.min_size}) is larger than max_size ({self.max_size})"
            )
        return self

    @classmethod
    def from_env(cls, dsn: Optional[str] = None) -> "DatabaseSettings":
        """Read settings from the environment; an explicit `dsn` wins over DATABASE_URL."""
        return cls(
            dsn=dsn or os.environ.get("DATABASE_URL") or None,
            min_size=os.environ.get("DB_POOL_MIN", 1),
            max_size=os.environ.get("DB_POOL_MAX", 5),
        )


class DatabasePool:
    """Owns the pool the draft repository runs on."""

    def __init__(self):
        self._pool: Optional[asyncpg.Pool] = None

    async def initialize(
        self,
        settings: Optional[DatabaseSettings] = None,
        *,
        create_schema: bool = True,
    ) -> None:
        """Create the pool and, unless told otherwise, the drafts table."""
        if self._pool is not None:
            return
        settings = settings or DatabaseSettings.from_env()
        self._pool = await asyncpg.create_pool(
            dsn=settings.dsn,
            min_size=settings.min_size,
            max_size=settings.max_size,
        )
        logger.info(
            "Draft store pool ready (min=%d, max=%d)", settings.min_size, settings.max_size
        )
        if create_schema:
            try:
                await self.ensure_schema()
            except (DatabaseError, asyncpg.PostgresError):
                await self.close()
                raise

    async def ensure_schema(self, schema_path: Optional[Path] = None) -> None:
        """Run `schema.sql` (idempotent CREATE ... IF NOT EXISTS) in one transaction."""
        path = Path(schema_path or SCHEMA_PATH)
        if not path.exists():
            raise DatabaseError(f"Schema file not found: {path}")

        sql_text = path.read_text(encoding="utf-8")
        async with self.pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute(sql_text)
        logger.info("Schema ready (%s)", DRAFTS_TABLE)

    async def close(self) -> None:
        if self._pool:
            await self._pool.close()
            self._pool = None

    @property
    def pool(self) -> asyncpg.Pool:
        """Get the pool, raising if not initialized."""
        if self._pool is None:
            raise RuntimeError(
                "Database pool not initialized. Call await db.initialize() first."
            )
        return self._pool

    async def health_check(self) -> bool:
        """True when the database answers and the drafts table exists."""
        try:
            async with self.pool.acquire() as conn:
                return bool(
                    await conn.fetchval("SELECT to_regclass($1) IS NOT NULL", DRAFTS_TABLE)
                )
        except (RuntimeError, OSError, asyncpg.PostgresError) as exc:
            logger.warning("Database health check failed: %s", exc)
            return False


db = DatabasePool()
