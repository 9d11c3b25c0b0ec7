# candidate_service.py
from __future__ import annotations

import math
from datetime import date
from typing import Any

from sqlalchemy import and_, func, not_, or_, select
from sqlalchemy.orm import Session

from jobsai.models.education_detail import EducationDetail
from jobsai.models.experience_detail import ExperienceDetail
from jobsai.models.job_seeker_profile import JobSeekerProfile
from jobsai.models.user import ROLE_JOB_SEEKER, User
from jobsai.schemas.candidate import (
    CandidateProfile,
    CandidateSearchFilters,
    CandidateSearchResponse,
    EducationOut,
    WorkExperienceOut,
)
from jobsai.services.text_parsing import (
    DEFAULT_DOB,
    NOT_SPECIFIED,
    compute_age,
    parse_salary_lpa,
    placeholder_avatar_url,
    split_delimited,
    split_lines,
)


ALL_GENDERS = "All"
ALL_INDUSTRY_TYPES = "All Industry Types"


def _candidate_query():
    return (
        select(User, JobSeekerProfile)
        .join(JobSeekerProfile, JobSeekerProfile.user_id == User.id)
        .where(User.role == ROLE_JOB_SEEKER)
    )


def _load_education(db: Session, profile_id: int) -> list[EducationOut]:
    rows = db.scalars(
        select(EducationDetail)
        .where(EducationDetail.job_seeker_profile_id == profile_id)
        .order_by(EducationDetail.year_of_completion.desc())
    ).all()
    return [EducationOut(degree=row.qualification, institution=row.institution, year=row.year_of_completion) for row in rows]


def _load_work_experience(db: Session, profile_id: int) -> list[WorkExperienceOut]:
    rows = db.scalars(
        select(ExperienceDetail)
        .where(ExperienceDetail.job_seeker_profile_id == profile_id)
        .order_by(ExperienceDetail.start_date.desc())
    ).all()
    return [
        WorkExperienceOut(
            title=row.designation,
            company=row.company_name,
            start_date=row.start_date,
            end_date="Present" if row.is_present == 1 else row.end_date,
            responsibilities=split_lines(row.responsibilities),
        )
        for row in rows
    ]


def build_candidate_profile(
    user: User,
    profile: JobSeekerProfile,
    *,
    education: list[EducationOut] | None = None,
    work_experience: list[WorkExperienceOut] | None = None,
    today: date | None = None,
) -> CandidateProfile:
    """Reshape a user/profile pair into the flat payload the candidate views consume.

    Delimited columns become lists, the salary text becomes a number and age is derived
    from the stored date of birth. Missing text fields fall back to display placeholders.
    """

    education = education or []
    work_experience = work_experience or []
    name = profile.full_name

    return CandidateProfile(
        id=str(user.id),
        name=name or "Unknown",
        designation=profile.current_designation or NOT_SPECIFIED,
        experience=profile.total_experience or 0,
        location=profile.current_city or NOT_SPECIFIED,
        skills=split_delimited(profile.skills),
        industry=profile.current_industry or NOT_SPECIFIED,
        industry_type=profile.current_industry_type or NOT_SPECIFIED,
        qualifications=[item.degree for item in education],
        salary_lpa=parse_salary_lpa(profile.present_salary),
        gender=profile.gender or NOT_SPECIFIED,
        age=compute_age(profile.date_of_birth, today),
        profile_image_url=profile.profile_picture_url or placeholder_avatar_url(name),
        email=user.email,
        phone=profile.phone_number or "",
        linkedin_profile_url=profile.linkedin_profile_url or "",
        company=work_experience[0].company if work_experience else NOT_SPECIFIED,
        department=profile.current_department or NOT_SPECIFIED,
        preferred_locations=split_delimited(profile.preferred_locations),
        professional_summary=profile.professional_summary,
        work_experience=work_experience,
        education=education,
        resume_pdf_url=profile.resume_url or "",
        dob=profile.date_of_birth or DEFAULT_DOB,
        marital_status=profile.marital_status or NOT_SPECIFIED,
        current_address=profile.current_address or NOT_SPECIFIED,
        correspondence_address=profile.correspondence_address or NOT_SPECIFIED,
    )


def get_candidate_profile(db: Session, candidate_id: int, *, today: date | None = None) -> CandidateProfile | None:
    row = db.execute(_candidate_query().where(User.id == candidate_id)).first()
    if row is None:
        return None
    user, profile = row
    education = _load_education(db, profile.id)
    work_experience = _load_work_experience(db, profile.id)
    return build_candidate_profile(user, profile, education=education, work_experience=work_experience, today=today)


def _like(value: str) -> str:
    return f"%{value}%"


def _to_float(value: str) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _search_conditions(filters: CandidateSearchFilters) -> list[Any]:
    p = JobSeekerProfile
    conditions: list[Any] = [p.full_name.is_not(None)]

    if filters.keywords:
        conditions.append(
            or_(
                *[
                    or_(p.full_name.like(_like(k)), p.current_designation.like(_like(k)), p.skills.like(_like(k)))
                    for k in filters.keywords
                ]
            )
        )

    for keyword in filters.excluded_keywords:
        # NULL columns never match a LIKE, so they must not exclude the row either.
        conditions.append(
            not_(
                or_(
                    func.coalesce(p.full_name, "").like(_like(keyword)),
                    func.coalesce(p.current_designation, "").like(_like(keyword)),
                    func.coalesce(p.skills, "").like(_like(keyword)),
                )
            )
        )

    if filters.designation_input:
        conditions.append(p.current_designation.like(_like(filters.designation_input)))

    if filters.skills:
        conditions.append(and_(*[p.skills.like(_like(skill)) for skill in filters.skills]))

    if filters.locations:
        city_match = or_(*[p.current_city.like(_like(loc)) for loc in filters.locations])
        if filters.include_relocating_candidates:
            preferred_match = or_(*[p.preferred_locations.like(_like(loc)) for loc in filters.locations])
            conditions.append(or_(city_match, preferred_match))
        else:
            conditions.append(city_match)

    min_exp = _to_float(filters.min_experience) if filters.min_experience else None
    if min_exp is not None:
        conditions.append(p.total_experience >= min_exp)

    max_exp = _to_float(filters.max_experience) if filters.max_experience else None
    if max_exp is not None:
        conditions.append(p.total_experience <= max_exp)

    if filters.selected_gender and filters.selected_gender != ALL_GENDERS:
        conditions.append(p.gender == filters.selected_gender)

    if filters.industry_input:
        conditions.append(p.current_industry.like(_like(filters.industry_input)))

    if filters.selected_industry_type and filters.selected_industry_type != ALL_INDUSTRY_TYPES:
        conditions.append(p.current_industry_type == filters.selected_industry_type)

    return conditions


def search_candidates(db: Session, filters: CandidateSearchFilters, *, today: date | None = None) -> CandidateSearchResponse:
    conditions = _search_conditions(filters)

    count_stmt = (
        select(func.count())
        .select_from(User)
        .join(JobSeekerProfile, JobSeekerProfile.user_id == User.id)
        .where(User.role == ROLE_JOB_SEEKER, *conditions)
    )
    total_count = int(db.scalar(count_stmt) or 0)

    offset = (filters.page - 1) * filters.limit
    stmt = (
        _candidate_query()
        .where(*conditions)
        .order_by(JobSeekerProfile.updated_at.desc(), JobSeekerProfile.id.desc())
        .limit(filters.limit)
        .offset(offset)
    )
    candidates = [build_candidate_profile(user, profile, today=today) for user, profile in db.execute(stmt).all()]

    return CandidateSearchResponse(
        candidates=candidates,
        total_count=total_count,
        page=filters.page,
        limit=filters.limit,
        total_pages=math.ceil(total_count / filters.limit),
    )
