class DatabaseError(Exception):
    """Base for all database errors."""


class CorruptDraftError(DatabaseError):
    """Stored draft payload no longer validates as a round."""
