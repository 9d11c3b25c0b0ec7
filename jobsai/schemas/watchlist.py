from __future__ import annotations

from pydantic import Field

from jobsai.schemas.candidate import CandidateProfile
from jobsai.schemas.common import CamelModel


class WatchlistAddRequest(CamelModel):
    employer_user_id: int | None = None
    candidate_id: int | None = None


class WatchlistResponse(CamelModel):
    candidates: list[CandidateProfile] = Field(default_factory=list)
