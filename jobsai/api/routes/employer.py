from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobsai.config import settings
from jobsai.database import get_db
from jobsai.schemas.posted_job import PostedJobsResponse
from jobsai.services import posted_jobs_service


router = APIRouter(prefix="/employer", tags=["employer"])

logger = logging.getLogger(__name__)


@router.get("/posted-jobs", response_model=PostedJobsResponse)
def read_posted_jobs(
    employer_user_id: int | None = Query(None, alias="employerUserId"),
    db: Session = Depends(get_db),
) -> PostedJobsResponse:
    if not employer_user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Employer user ID is required")
    try:
        jobs = posted_jobs_service.list_posted_jobs(db, employer_user_id, limit=settings.posted_jobs_limit)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching posted jobs employer_user_id=%s", employer_user_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch posted jobs") from exc
    return PostedJobsResponse(jobs=jobs)
