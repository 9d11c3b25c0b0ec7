from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobsai.database import get_db
from jobsai.schemas.candidate import CandidateProfile, CandidateSearchFilters, CandidateSearchResponse
from jobsai.services.candidate_service import get_candidate_profile, search_candidates


router = APIRouter(prefix="/candidates", tags=["candidates"])

logger = logging.getLogger(__name__)


def _json_list(raw: str | None, name: str) -> list[str]:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {name} parameter") from exc
    if not isinstance(value, list):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {name} parameter")
    return [str(item) for item in value if item is not None and str(item).strip()]


def _search_filters(
    keywords: str | None = Query(None),
    excluded_keywords: str | None = Query(None, alias="excludedKeywords"),
    skills: str | None = Query(None),
    locations: str | None = Query(None),
    include_relocating_candidates: str | None = Query(None, alias="includeRelocatingCandidates"),
    designation_input: str = Query("", alias="designationInput"),
    included_companies: str | None = Query(None, alias="includedCompanies"),
    excluded_companies: str | None = Query(None, alias="excludedCompanies"),
    min_experience: str = Query("", alias="minExperience"),
    max_experience: str = Query("", alias="maxExperience"),
    min_salary: str = Query("", alias="minSalary"),
    max_salary: str = Query("", alias="maxSalary"),
    qualifications: str | None = Query(None),
    selected_gender: str = Query("All", alias="selectedGender"),
    min_age: str = Query("", alias="minAge"),
    max_age: str = Query("", alias="maxAge"),
    industry_input: str = Query("", alias="industryInput"),
    selected_industry_type: str = Query("All Industry Types", alias="selectedIndustryType"),
    page: int = Query(1),
    limit: int = Query(25),
) -> CandidateSearchFilters:
    try:
        return CandidateSearchFilters(
            keywords=_json_list(keywords, "keywords"),
            excluded_keywords=_json_list(excluded_keywords, "excludedKeywords"),
            skills=_json_list(skills, "skills"),
            locations=_json_list(locations, "locations"),
            include_relocating_candidates=include_relocating_candidates == "true",
            designation_input=designation_input,
            included_companies=_json_list(included_companies, "includedCompanies"),
            excluded_companies=_json_list(excluded_companies, "excludedCompanies"),
            min_experience=min_experience,
            max_experience=max_experience,
            min_salary=min_salary,
            max_salary=max_salary,
            qualifications=_json_list(qualifications, "qualifications"),
            selected_gender=selected_gender,
            min_age=min_age,
            max_age=max_age,
            industry_input=industry_input,
            selected_industry_type=selected_industry_type,
            page=page,
            limit=limit,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid pagination parameters") from exc


@router.get("", response_model=CandidateSearchResponse)
def search_candidates_endpoint(
    filters: CandidateSearchFilters = Depends(_search_filters),
    db: Session = Depends(get_db),
) -> CandidateSearchResponse:
    try:
        return search_candidates(db, filters)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching candidates")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch candidates") from exc


@router.get("/{candidate_id}", response_model=CandidateProfile)
def read_candidate(candidate_id: int, db: Session = Depends(get_db)) -> CandidateProfile:
    try:
        candidate = get_candidate_profile(db, candidate_id)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching candidate details id=%s", candidate_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch candidate details"
        ) from exc
    if candidate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Candidate not found")
    return candidate
