from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobsai.models.job_seeker_profile import JobSeekerProfile
from jobsai.models.user import User
from jobsai.models.watchlist import CandidateWatchlistEntry
from jobsai.schemas.candidate import CandidateProfile
from jobsai.services.candidate_service import build_candidate_profile


logger = logging.getLogger(__name__)


class AlreadyWatchedError(Exception):
    pass


def ensure_watchlist_table(db: Session) -> None:
    CandidateWatchlistEntry.__table__.create(bind=db.get_bind(), checkfirst=True)


def list_watchlist(db: Session, employer_user_id: int) -> list[CandidateProfile]:
    stmt = (
        select(User, JobSeekerProfile)
        .select_from(CandidateWatchlistEntry)
        .join(User, CandidateWatchlistEntry.candidate_user_id == User.id)
        .join(JobSeekerProfile, JobSeekerProfile.user_id == User.id)
        .where(CandidateWatchlistEntry.employer_user_id == employer_user_id)
        .order_by(CandidateWatchlistEntry.added_at.desc(), CandidateWatchlistEntry.id.desc())
    )
    return [build_candidate_profile(user, profile) for user, profile in db.execute(stmt).all()]


def add_to_watchlist(db: Session, employer_user_id: int, candidate_user_id: int) -> None:
    db.add(CandidateWatchlistEntry(employer_user_id=employer_user_id, candidate_user_id=candidate_user_id))
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        existing = db.scalar(
            select(CandidateWatchlistEntry.id).where(
                CandidateWatchlistEntry.employer_user_id == employer_user_id,
                CandidateWatchlistEntry.candidate_user_id == candidate_user_id,
            )
        )
        if existing is not None:
            raise AlreadyWatchedError() from exc
        raise
    logger.info("watchlist.added employer_user_id=%s candidate_user_id=%s", employer_user_id, candidate_user_id)


def remove_from_watchlist(db: Session, employer_user_id: int, candidate_user_id: int) -> int:
    result = db.execute(
        delete(CandidateWatchlistEntry).where(
            CandidateWatchlistEntry.employer_user_id == employer_user_id,
            CandidateWatchlistEntry.candidate_user_id == candidate_user_id,
        )
    )
    db.commit()
    return int(result.rowcount or 0)
