"""Helpline endpoints"""
import logging
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import HELPLINE_TIMEZONE
from ..database import get_db
from ..schemas import HelplineListResponse, ErrorResponse
from ..services.availability import EvaluationContext
from ..services.helplines import fetch_helplines, list_helplines, parse_open_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["helplines"])


def get_now() -> datetime:
    """Current wall-clock time in the helpline zone"""
    return datetime.now(ZoneInfo(HELPLINE_TIMEZONE))


@router.get(
    "/helplines",
    response_model=HelplineListResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def get_helplines(
    open_now: Optional[str] = Query(
        None, alias="openNow", description='"true" to list only helplines reachable now'
    ),
    db: Session = Depends(get_db),
    now: datetime = Depends(get_now),
):
    try:
        helplines = fetch_helplines(db)
    except SQLAlchemyError:
        logger.exception("Error getting helplines")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Server error"},
        )

    ctx = EvaluationContext.from_datetime(now)
    return HelplineListResponse(
        data=list_helplines(helplines, parse_open_now(open_now), ctx),
    )
