"""Parses raw job-posting text into structured job form fields."""
from __future__ import annotations

import logging
from typing import Any

from jobsai.ai.flow import GenerationClient, PromptFlow
from jobsai.schemas.ai import SmartJobPostParserInput, SmartJobPostParserOutput


logger = logging.getLogger(__name__)


def render_prompt(data: SmartJobPostParserInput) -> str:
    lines = [
        "You are an AI assistant specialized in parsing unstructured job posting text.",
        "Extract the information into the structured fields of the output schema, "
        "using each field's description as your guide.",
        "",
        "Key Instructions:",
        '- Extract ONLY information explicitly present in the "Raw Job Details". Do not infer or invent anything.',
        "- The company name is handled separately; do not extract it.",
        "- If a field is not found, use null for numbers, an empty array for skillsRequired "
        "and an empty string for jobDescription.",
        "- skillsRequired is an array of distinct skill names.",
        "",
        "For the jobDescription field:",
        "- It holds the primary content of the posting: responsibilities, day-to-day tasks, "
        "and requirements not covered by qualification or skillsRequired.",
        "- After populating every other field, ALL remaining text from the raw details goes here, including "
        "introductions, benefits, application instructions and equal opportunity statements.",
        "- No part of the raw details may be lost.",
        "- Format it with basic HTML (<p>, <ul><li>) when the structure is apparent. Avoid markdown.",
        "",
        "Sanitize all string fields: drop characters likely to cause rendering issues and keep the text clean.",
        "",
        "Raw Job Details:",
        data.raw_job_details,
    ]
    return "\n".join(lines)


job_post_parser_flow: PromptFlow[SmartJobPostParserInput, SmartJobPostParserOutput] = PromptFlow(
    name="smartJobPostParser",
    input_model=SmartJobPostParserInput,
    output_model=SmartJobPostParserOutput,
    render=render_prompt,
    input_error="Raw job details are required for parsing.",
    output_error="AI failed to parse the job posting.",
    default_on_empty=True,
)


async def smart_job_post_parser(
    payload: SmartJobPostParserInput | dict[str, Any],
    client: GenerationClient | None = None,
) -> SmartJobPostParserOutput:
    data = job_post_parser_flow.validate_input(payload)
    if not data.raw_job_details.strip():
        logger.warning("flow.skipped name=%s reason=empty_input", job_post_parser_flow.name)
        return SmartJobPostParserOutput()
    return await job_post_parser_flow(data, client=client)
