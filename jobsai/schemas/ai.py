# ai.py
from __future__ import annotations

import math
from typing import Any

from pydantic import AnyUrl, Field, field_validator

from jobsai.schemas.common import CamelModel


class GenerateJobDescriptionInput(CamelModel):
    job_title: str = Field(min_length=1, description="The title of the job.")
    company_name: str | None = Field(default=None, description="The name of the company.")
    industry: str | None = Field(default=None, description="The industry of the job.")
    job_type: str | None = Field(default=None, description="Type of employment, e.g. Full-time.")
    skills_required: list[str] | None = Field(default=None, description="Key skills for the job.")
    existing_job_description: str | None = Field(
        default=None,
        description="Current job description content to refine, if any.",
    )
    custom_instructions: str = Field(
        min_length=1,
        description="Instructions on what to generate or how to modify the job description.",
    )


class GenerateJobDescriptionOutput(CamelModel):
    job_description: str = Field(min_length=1, description="The generated job description in HTML format.")


class RelevantJobRecommendationsInput(CamelModel):
    job_seeker_profile: str = Field(description="Profile of the job seeker: skills, experience, preferences.")
    job_descriptions: list[str] = Field(description="Job descriptions to be analyzed for relevance.")


class RelevantJobRecommendationsOutput(CamelModel):
    recommended_jobs: list[str] = Field(description="Job descriptions ranked by relevance to the profile.")


class SuggestSkillsInput(CamelModel):
    job_title: str = Field(min_length=1, description="The title of the job.")
    industry: str | None = Field(default=None, description="Industry, e.g. Technology, Healthcare.")
    industry_type: str | None = Field(default=None, description="Industry category, e.g. SaaS, FinTech.")
    job_description: str | None = Field(default=None, description="Detailed job description.")
    minimum_experience: float | None = Field(default=None, description="Minimum years of experience.")


class SuggestSkillsOutput(CamelModel):
    suggested_skills: list[str] = Field(max_length=20, description="Up to 20 skills relevant to the job.")


class SmartJobPostParserInput(CamelModel):
    raw_job_details: str = Field(description="Unstructured raw text of the job posting.")


class SmartJobPostParserOutput(CamelModel):
    job_title: str | None = Field(default=None, description="Job title, e.g. Software Engineer.")
    industry: str | None = Field(default=None, description="Industry, e.g. Technology, Healthcare.")
    job_type: str | None = Field(default=None, description="Type of employment, e.g. Full-time, Contract.")
    job_location: str | None = Field(default=None, description="Job location, e.g. New York, NY or Remote.")
    minimum_experience: float | None = Field(default=None, ge=0, description="Minimum years of experience.")
    maximum_experience: float | None = Field(default=None, ge=0, description="Maximum years of experience.")
    minimum_salary: int | None = Field(default=None, ge=0, description="Minimum annual salary.")
    maximum_salary: int | None = Field(default=None, ge=0, description="Maximum annual salary.")
    number_of_vacancies: int | None = Field(default=None, ge=1, description="Number of open positions.")
    qualification: str | None = Field(default=None, description="Minimum or preferred qualification.")
    skills_required: list[str] = Field(default_factory=list, description="Distinct skills required for the job.")
    job_description: str = Field(
        default="",
        description="Remaining posting text as basic HTML (<p>, <ul><li>), after the other fields are extracted.",
    )

    @field_validator("skills_required", mode="before")
    @classmethod
    def _null_skills(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("job_description", mode="before")
    @classmethod
    def _null_description(cls, v: Any) -> Any:
        return "" if v is None else v


def _int_or_none(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)


class CompanyProfileInput(CamelModel):
    company_website: AnyUrl = Field(description="URL of the company website. The model does not browse it.")


class CompanyProfileOutput(CamelModel):
    company_name: str | None = Field(default=None, description="Official or commonly known company name.")
    address: str | None = Field(default=None, description="Full physical company address.")
    official_email: str | None = Field(default=None, description="General company contact email.")
    contact_number: str | None = Field(default=None, description="Primary contact phone number.")
    company_website: str | None = Field(default=None, description="Canonical website URL.")
    team_size: int | None = Field(default=None, description="Approximate number of employees.")
    year_of_establishment: int | None = Field(default=None, description="Four-digit founding year.")
    about_company: str | None = Field(default=None, description="150-250 word summary of the company.")
    linkedin_url: str | None = Field(default=None, description="Company LinkedIn page URL.")
    x_url: str | None = Field(default=None, description="Company X (Twitter) profile URL.")

    @field_validator("company_website", "linkedin_url", "x_url", mode="before")
    @classmethod
    def _blank_url(cls, v: Any) -> Any:
        return v or None

    @field_validator("team_size", mode="before")
    @classmethod
    def _team_size(cls, v: Any) -> int | None:
        return _int_or_none(v)

    @field_validator("year_of_establishment", mode="before")
    @classmethod
    def _year(cls, v: Any) -> int | None:
        # A zero year means the model found nothing.
        return _int_or_none(v) or None
