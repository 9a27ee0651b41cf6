from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

from database.connection import DatabasePool, DatabaseSettings
from database.repositories import DraftRepositoryDB


class DatabaseManager:
    """Groups the repositories that share one asyncpg pool."""

    def __init__(self, pool: asyncpg.Pool):
        self.drafts = DraftRepositoryDB(pool)


@asynccontextmanager
async def open_manager(settings: Optional[DatabaseSettings] = None) -> AsyncIterator[DatabaseManager]:
    """Short-lived pool for scripts: schema ensured on entry, pool closed on exit."""
    pool = DatabasePool()
    await pool.initialize(settings)
    try:
        yield DatabaseManager(pool.pool)
    finally:
        await pool.close()
