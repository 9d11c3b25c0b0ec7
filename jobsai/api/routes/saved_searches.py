from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobsai.database import get_db
from jobsai.schemas.common import SuccessResponse
from jobsai.schemas.saved_search import (
    SavedSearchCreate,
    SavedSearchCreateResponse,
    SavedSearchListResponse,
)
from jobsai.services import saved_search_service


router = APIRouter(prefix="/saved-searches", tags=["saved-searches"])

logger = logging.getLogger(__name__)


def _blank_filters(filters: Any) -> bool:
    # Empty objects and arrays are valid filters; empty scalars are not.
    if isinstance(filters, (dict, list)):
        return False
    return not filters


def _ensure_table(db: Session = Depends(get_db)) -> Session:
    try:
        saved_search_service.ensure_saved_searches_table(db)
    except SQLAlchemyError:
        # A failing DDL surfaces again on the actual query with the endpoint's own message.
        logger.exception("Error creating saved_searches table")
    return db


@router.get("", response_model=SavedSearchListResponse)
def list_saved_searches(
    user_id: int | None = Query(None, alias="userId"),
    db: Session = Depends(_ensure_table),
) -> SavedSearchListResponse:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID is required")
    try:
        searches = saved_search_service.list_saved_searches(db, user_id)
    except (SQLAlchemyError, ValueError) as exc:
        logger.exception("Error fetching saved searches user_id=%s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch saved searches"
        ) from exc
    return SavedSearchListResponse(saved_searches=searches)


@router.post("", response_model=SavedSearchCreateResponse)
def create_saved_search(payload: SavedSearchCreate, db: Session = Depends(_ensure_table)) -> SavedSearchCreateResponse:
    if not payload.user_id or not payload.name or _blank_filters(payload.filters):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID, name, and filters are required")
    try:
        saved = saved_search_service.create_saved_search(db, payload.user_id, payload.name, payload.filters)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error saving search user_id=%s", payload.user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save search") from exc
    return SavedSearchCreateResponse(saved_search=saved)


@router.delete("", response_model=SuccessResponse)
def delete_saved_search(
    search_id: int | None = Query(None, alias="id"),
    user_id: int | None = Query(None, alias="userId"),
    db: Session = Depends(_ensure_table),
) -> SuccessResponse:
    if not search_id or not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search ID and User ID are required")
    try:
        saved_search_service.delete_saved_search(db, search_id, user_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error deleting saved search id=%s user_id=%s", search_id, user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete saved search"
        ) from exc
    return SuccessResponse()
