# posted_job.py
from __future__ import annotations

from pydantic import Field

from jobsai.schemas.common import CamelModel


class PostedJobFilters(CamelModel):
    keywords: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    designation: str
    min_experience: str = ""
    max_experience: str = ""
    locations: list[str] = Field(default_factory=list)
    min_salary_lpa: str = Field(default="", alias="minSalaryLPA")
    max_salary_lpa: str = Field(default="", alias="maxSalaryLPA")
    qualifications: list[str] = Field(default_factory=list)
    industry: str = ""
    company_name: str = ""


class PostedJob(CamelModel):
    id: str
    title: str
    description: str
    filters: PostedJobFilters


class PostedJobsResponse(CamelModel):
    jobs: list[PostedJob]
