from .draft_repo import DEFAULT_DRAFT_KEY, DraftRepositoryDB

__all__ = ["DEFAULT_DRAFT_KEY", "DraftRepositoryDB"]
