from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from jobsai.ai.client import GeminiClient, get_generation_client
from jobsai.ai.flows.company_profile import generate_company_profile_from_website
from jobsai.ai.flows.job_description import generate_job_description
from jobsai.ai.flows.job_match import relevant_job_recommendations
from jobsai.ai.flows.job_post_parser import smart_job_post_parser
from jobsai.ai.flows.skill_suggester import suggest_skills_for_job
from jobsai.schemas.ai import (
    CompanyProfileOutput,
    GenerateJobDescriptionOutput,
    RelevantJobRecommendationsOutput,
    SmartJobPostParserOutput,
    SuggestSkillsOutput,
)


router = APIRouter(prefix="/ai", tags=["ai"])

# Bodies are passed through untyped so each flow reports its own input error.


@router.post("/job-description", response_model=GenerateJobDescriptionOutput)
async def job_description_endpoint(
    payload: dict[str, Any] = Body(...),
    client: GeminiClient = Depends(get_generation_client),
) -> GenerateJobDescriptionOutput:
    return await generate_job_description(payload, client=client)


@router.post("/job-match", response_model=RelevantJobRecommendationsOutput)
async def job_match_endpoint(
    payload: dict[str, Any] = Body(...),
    client: GeminiClient = Depends(get_generation_client),
) -> RelevantJobRecommendationsOutput:
    return await relevant_job_recommendations(payload, client=client)


@router.post("/suggest-skills", response_model=SuggestSkillsOutput)
async def suggest_skills_endpoint(
    payload: dict[str, Any] = Body(...),
    client: GeminiClient = Depends(get_generation_client),
) -> SuggestSkillsOutput:
    return await suggest_skills_for_job(payload, client=client)


@router.post("/parse-job-post", response_model=SmartJobPostParserOutput)
async def parse_job_post_endpoint(
    payload: dict[str, Any] = Body(...),
    client: GeminiClient = Depends(get_generation_client),
) -> SmartJobPostParserOutput:
    return await smart_job_post_parser(payload, client=client)


@router.post("/company-profile", response_model=CompanyProfileOutput)
async def company_profile_endpoint(
    payload: dict[str, Any] = Body(...),
    client: GeminiClient = Depends(get_generation_client),
) -> CompanyProfileOutput:
    return await generate_company_profile_from_website(payload, client=client)
