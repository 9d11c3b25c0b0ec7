"""Ranks job descriptions by relevance to a job seeker profile."""
from __future__ import annotations

from typing import Any

from jobsai.ai.flow import GenerationClient, PromptFlow
from jobsai.schemas.ai import RelevantJobRecommendationsInput, RelevantJobRecommendationsOutput


def render_prompt(data: RelevantJobRecommendationsInput) -> str:
    listed = "\n".join(f"- {description}" for description in data.job_descriptions)
    return (
        "You are an AI-powered job matching expert. Analyze the job seeker's profile and the provided "
        "job descriptions to identify the most relevant job opportunities.\n\n"
        f"Job Seeker Profile: {data.job_seeker_profile}\n\n"
        f"Job Descriptions:\n{listed}\n\n"
        "Based on the job seeker's profile and the job descriptions, provide a ranked list of job "
        "descriptions, ordered by relevance. Only return the job descriptions, not any other explanation."
    )


job_match_flow: PromptFlow[RelevantJobRecommendationsInput, RelevantJobRecommendationsOutput] = PromptFlow(
    name="relevantJobRecommendations",
    input_model=RelevantJobRecommendationsInput,
    output_model=RelevantJobRecommendationsOutput,
    render=render_prompt,
    input_error="A job seeker profile and a list of job descriptions are required for job matching.",
    output_error="AI failed to rank job descriptions.",
)


async def relevant_job_recommendations(
    payload: RelevantJobRecommendationsInput | dict[str, Any],
    client: GenerationClient | None = None,
) -> RelevantJobRecommendationsOutput:
    return await job_match_flow(payload, client=client)
