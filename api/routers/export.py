"""Round export endpoints (CSV shot log, JSON report)."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from api.dependencies import get_draft
from export import csv_filename, json_filename, round_report, round_to_csv
from models import Round

router = APIRouter()


def _csv_response(round_: Round) -> Response:
    return Response(
        content=round_to_csv(round_),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{csv_filename(round_)}"'},
    )


@router.post("/csv")
async def export_csv(round_: Round):
    return _csv_response(round_)


@router.get("/draft.csv")
async def export_draft_csv(draft: Round = Depends(get_draft)):
    return _csv_response(draft)


@router.post("/json")
async def export_json(round_: Round):
    return JSONResponse(
        content=round_report(round_),
        headers={"Content-Disposition": f'attachment; filename="{json_filename(round_)}"'},
    )
