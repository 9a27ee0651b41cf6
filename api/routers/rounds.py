"""Round draft API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from database.db_manager import DatabaseManager
from database.exceptions import DatabaseError
from database.repositories import DEFAULT_DRAFT_KEY
from api.dependencies import get_db, get_draft
from api.schemas import NewRoundRequest
from models import Round

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("", response_model=Round, status_code=201)
async def start_round(req: NewRoundRequest, db: DatabaseManager = Depends(get_db)):
    """Start an empty 18-hole round and make it the draft."""
    round_ = Round.new(req.course)
    try:
        return await db.drafts.save_draft(round_, DEFAULT_DRAFT_KEY)
    except DatabaseError:
        logger.exception("Could not save new round %s", round_.round_id)
        raise HTTPException(500, "Could not save round")


@router.get("/draft", response_model=Round)
async def load_draft(draft: Round = Depends(get_draft)):
    return draft


@router.put("/draft", response_model=Round)
async def save_draft(round_: Round, db: DatabaseManager = Depends(get_db)):
    """Replace the draft with the posted round."""
    try:
        return await db.drafts.save_draft(round_, DEFAULT_DRAFT_KEY)
    except DatabaseError:
        logger.exception("Could not save draft %s", round_.round_id)
        raise HTTPException(500, "Could not save round")


@router.delete("/draft", status_code=204)
async def clear_draft(db: DatabaseManager = Depends(get_db)):
    deleted = await db.drafts.clear_draft(DEFAULT_DRAFT_KEY)
    if not deleted:
        raise HTTPException(404, "No draft round")
