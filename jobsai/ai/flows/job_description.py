"""Job description drafting and refinement."""
from __future__ import annotations

from typing import Any

from jobsai.ai.flow import GenerationClient, PromptFlow
from jobsai.schemas.ai import GenerateJobDescriptionInput, GenerateJobDescriptionOutput


def render_prompt(data: GenerateJobDescriptionInput) -> str:
    lines = [
        "You are an expert HR content writer specializing in crafting and refining compelling job descriptions.",
        f'Your primary task is to follow the user\'s instructions provided in "{data.custom_instructions}".',
        "",
        "Contextual Information for the Job:",
        f"Job Title: {data.job_title}",
    ]
    if data.company_name:
        lines.append(f"Company Name: {data.company_name}")
    if data.industry:
        lines.append(f"Industry: {data.industry}")
    if data.job_type:
        lines.append(f"Job Type: {data.job_type}")
    if data.skills_required:
        lines.append(f"Key Skills to consider: {', '.join(data.skills_required)}.")
    lines.append("")

    if data.existing_job_description:
        lines += [
            "The user might want to modify the following existing job description. "
            "Use their customInstructions to guide your modifications.",
            "Existing Job Description:",
            data.existing_job_description,
        ]
    else:
        lines.append(
            "The user likely wants a new job description created from scratch, "
            "based on their customInstructions and the contextual information."
        )

    lines += [
        "",
        "Based on the user's instructions and the provided context (and existing description if available), "
        "generate or modify the job description.",
        "The output MUST be in HTML format, using paragraphs (<p>), bullet points (<ul><li>), "
        "and bold text (<strong>) where appropriate for readability.",
        "",
        "If creating a new job description (or if instructions imply a full rewrite), "
        "aim for a structure that typically includes:",
        "1. A brief, engaging introduction to the role (and company, if name provided).",
        "2. A section for Key Responsibilities (use bullet points).",
        "3. A section for Required Skills and Qualifications (use bullet points).",
        "4. A brief section about the company culture, if inferable from instructions or context.",
        '5. A call to action (e.g., "Apply now to join our team!").',
        "",
        "Ensure the tone is professional, inclusive, and attractive to potential candidates. "
        "Focus on clarity and conciseness.",
        "The entire output must be a single HTML string for the 'jobDescription' field.",
    ]
    return "\n".join(lines)


job_description_flow: PromptFlow[GenerateJobDescriptionInput, GenerateJobDescriptionOutput] = PromptFlow(
    name="generateJobDescription",
    input_model=GenerateJobDescriptionInput,
    output_model=GenerateJobDescriptionOutput,
    render=render_prompt,
    input_error="Job title and custom instructions are essential for generating a job description.",
    output_error="AI failed to generate a job description.",
)


async def generate_job_description(
    payload: GenerateJobDescriptionInput | dict[str, Any],
    client: GenerationClient | None = None,
) -> GenerateJobDescriptionOutput:
    return await job_description_flow(payload, client=client)
