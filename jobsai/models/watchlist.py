from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.sql import func

from jobsai.database import ON_DEMAND, Base


class CandidateWatchlistEntry(Base):
    __tablename__ = "candidate_watchlist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employer_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    candidate_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    added_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("employer_user_id", "candidate_user_id", name="uq_candidate_watchlist_pair"),
        Index("idx_watchlist_employer_id", "employer_user_id"),
        {"info": {ON_DEMAND: True}},
    )
