import logging

from fastapi import Depends, HTTPException, Request

from database.db_manager import DatabaseManager
from database.exceptions import CorruptDraftError
from database.repositories import DEFAULT_DRAFT_KEY
from models import Round

logger = logging.getLogger(__name__)


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


async def get_draft(db: DatabaseManager = Depends(get_db)) -> Round:
    """The stored in-progress round, or 404."""
    try:
        draft = await db.drafts.load_draft(DEFAULT_DRAFT_KEY)
    except CorruptDraftError:
        logger.exception("Stored draft %s could not be read", DEFAULT_DRAFT_KEY)
        raise HTTPException(500, "Stored draft is corrupt")
    if draft is None:
        raise HTTPException(404, "No draft round")
    return draft
