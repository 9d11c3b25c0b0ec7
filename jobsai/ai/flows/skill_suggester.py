"""Suggests skills for a job posting."""
from __future__ import annotations

from typing import Any

from jobsai.ai.flow import GenerationClient, PromptFlow
from jobsai.schemas.ai import SuggestSkillsInput, SuggestSkillsOutput
from jobsai.services.text_parsing import format_number


def render_prompt(data: SuggestSkillsInput) -> str:
    lines = [
        "You are an expert HR assistant and technical recruiter specializing in identifying key skills for job roles.",
        "Based on the following job details, please suggest a concise list of up to 20 relevant skills.",
        "Prioritize skills that are commonly sought after for this type of role and industry.",
        "Consider both technical (hard skills) and soft skills if appropriate from the context.",
        "Return only the list of skill names in the 'suggestedSkills' array.",
        "",
        "Job Details:",
        f"Job Title: {data.job_title}",
    ]
    if data.industry:
        lines.append(f"Industry: {data.industry}")
    if data.industry_type:
        lines.append(f"Industry Type/Category: {data.industry_type}")
    if data.job_description:
        lines += ["Job Description Snippet:", f'"{data.job_description}"']
    else:
        lines.append(
            "(No detailed job description provided, base suggestions primarily on title, industry, and experience level.)"
        )
    if data.minimum_experience:
        lines.append(f"Minimum Experience: {format_number(data.minimum_experience)} years")
    lines += [
        "",
        'Focus on extracting or inferring specific, actionable skills. For example, instead of "programming", '
        'suggest "Python" or "JavaScript" if context allows.',
        "Avoid very generic terms unless they are highly relevant and distinct.",
    ]
    return "\n".join(lines)


skill_suggester_flow: PromptFlow[SuggestSkillsInput, SuggestSkillsOutput] = PromptFlow(
    name="suggestSkills",
    input_model=SuggestSkillsInput,
    output_model=SuggestSkillsOutput,
    render=render_prompt,
    input_error="Job title is essential for suggesting skills.",
    output_error="AI failed to suggest skills.",
)


async def suggest_skills_for_job(
    payload: SuggestSkillsInput | dict[str, Any],
    client: GenerationClient | None = None,
) -> SuggestSkillsOutput:
    return await skill_suggester_flow(payload, client=client)
