from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobsai.database import get_db
from jobsai.schemas.common import MessageResponse
from jobsai.schemas.watchlist import WatchlistAddRequest, WatchlistResponse
from jobsai.services import watchlist_service
from jobsai.services.watchlist_service import AlreadyWatchedError


router = APIRouter(prefix="/watchlist", tags=["watchlist"])

logger = logging.getLogger(__name__)


def _ensure_table(db: Session = Depends(get_db)) -> Session:
    try:
        watchlist_service.ensure_watchlist_table(db)
    except SQLAlchemyError:
        logger.exception("Error creating watchlist table")
    return db


@router.get("", response_model=WatchlistResponse)
def read_watchlist(
    employer_user_id: int | None = Query(None, alias="employerUserId"),
    db: Session = Depends(_ensure_table),
) -> WatchlistResponse:
    if not employer_user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Employer user ID is required")
    try:
        candidates = watchlist_service.list_watchlist(db, employer_user_id)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching watchlist employer_user_id=%s", employer_user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch watchlist") from exc
    return WatchlistResponse(candidates=candidates)


@router.post("", response_model=MessageResponse)
def add_to_watchlist(payload: WatchlistAddRequest, db: Session = Depends(_ensure_table)) -> MessageResponse:
    if not payload.employer_user_id or not payload.candidate_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Employer user ID and candidate ID are required"
        )
    try:
        watchlist_service.add_to_watchlist(db, payload.employer_user_id, payload.candidate_id)
    except AlreadyWatchedError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Candidate already in watchlist") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error adding to watchlist employer_user_id=%s", payload.employer_user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to add candidate to watchlist"
        ) from exc
    return MessageResponse(message="Candidate added to watchlist")


@router.delete("", response_model=MessageResponse)
def remove_from_watchlist(
    employer_user_id: int | None = Query(None, alias="employerUserId"),
    candidate_id: int | None = Query(None, alias="candidateId"),
    db: Session = Depends(_ensure_table),
) -> MessageResponse:
    if not employer_user_id or not candidate_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Employer user ID and candidate ID are required"
        )
    try:
        watchlist_service.remove_from_watchlist(db, employer_user_id, candidate_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error removing from watchlist employer_user_id=%s", employer_user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to remove candidate from watchlist"
        ) from exc
    return MessageResponse(message="Candidate removed from watchlist")
