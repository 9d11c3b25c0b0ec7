# candidate.py
from __future__ import annotations

from pydantic import Field

from jobsai.schemas.common import CamelModel


class WorkExperienceOut(CamelModel):
    title: str
    company: str
    start_date: str
    end_date: str | None = None
    responsibilities: list[str] = Field(default_factory=list)


class EducationOut(CamelModel):
    degree: str
    institution: str
    year: int | None = None


class CandidateProfile(CamelModel):
    id: str
    name: str
    designation: str
    experience: float = 0
    location: str
    skills: list[str] = Field(default_factory=list)
    industry: str
    industry_type: str
    qualifications: list[str] = Field(default_factory=list)
    salary_lpa: float = Field(default=0, alias="salaryLPA")
    gender: str
    age: int
    profile_image_url: str
    email: str | None = None
    phone: str = ""
    linkedin_profile_url: str = ""
    company: str
    department: str
    preferred_locations: list[str] = Field(default_factory=list)
    professional_summary: str | None = None
    work_experience: list[WorkExperienceOut] = Field(default_factory=list)
    education: list[EducationOut] = Field(default_factory=list)
    awards: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    resume_pdf_url: str = ""
    dob: str
    marital_status: str
    current_address: str
    correspondence_address: str


class CandidateSearchFilters(CamelModel):
    keywords: list[str] = Field(default_factory=list)
    excluded_keywords: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    include_relocating_candidates: bool = False
    designation_input: str = ""
    included_companies: list[str] = Field(default_factory=list)
    excluded_companies: list[str] = Field(default_factory=list)
    min_experience: str = ""
    max_experience: str = ""
    min_salary: str = ""
    max_salary: str = ""
    qualifications: list[str] = Field(default_factory=list)
    selected_gender: str = "All"
    min_age: str = ""
    max_age: str = ""
    industry_input: str = ""
    selected_industry_type: str = "All Industry Types"
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=25, ge=1, le=100)


class CandidateSearchResponse(CamelModel):
    candidates: list[CandidateProfile]
    total_count: int
    page: int
    limit: int
    total_pages: int
