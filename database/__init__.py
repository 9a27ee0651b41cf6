from database.connection import DatabasePool, DatabaseSettings, db
from database.db_manager import DatabaseManager, open_manager
from database.repositories import DEFAULT_DRAFT_KEY, DraftRepositoryDB
from database.exceptions import CorruptDraftError, DatabaseError

__all__ = [
    "DatabasePool",
    "DatabaseSettings",
    "db",
    "DatabaseManager",
    "open_manager",
    "DraftRepositoryDB",
    "DEFAULT_DRAFT_KEY",
    "DatabaseError",
    "CorruptDraftError",
]
