"""Company profile details inferred from a website URL."""
from __future__ import annotations

from typing import Any

from jobsai.ai.flow import GenerationClient, PromptFlow
from jobsai.schemas.ai import CompanyProfileInput, CompanyProfileOutput


def render_prompt(data: CompanyProfileInput) -> str:
    lines = [
        "You are an expert AI assistant tasked with extracting structured company information "
        "based on a provided website URL.",
        f"You will NOT browse the live URL: {data.company_website}.",
        "Instead, simulate an analysis of the pages a company website typically has "
        "(Homepage, About Us, Contact Us, Services/Products, Careers, Footer) and fill the output fields "
        "as if you had read them.",
        "",
        "Guidance per field:",
        "- companyName: the most prominent name used in headers, footers or About Us.",
        "- address: the main office address, as complete as possible (street, city, state, zip, country).",
        "- officialEmail: a general address such as info@, support@ or contact@, never a personal one.",
        "- contactNumber: the primary phone number, with country code if common.",
        "- companyWebsite: the canonical, well-formed website URL.",
        "- teamSize: an integer employee count. For a range such as 100-200, pick the lower end. "
        "Null if it cannot reasonably be inferred.",
        '- yearOfEstablishment: a four-digit year from phrases like "Founded in YYYY". Null if not found.',
        "- aboutCompany: a 150-250 word summary of mission, core products or services, audience "
        "and what sets the company apart.",
        "- linkedinUrl: the full URL of the company LinkedIn page. Null if not found.",
        "- xUrl: the full URL of the company X (Twitter) profile. Null if not found.",
        "",
        "Prefer factual-sounding information typical of a well-structured company website. "
        "If something cannot be reasonably inferred, leave it null. Do NOT invent information.",
    ]
    return "\n".join(lines)


company_profile_flow: PromptFlow[CompanyProfileInput, CompanyProfileOutput] = PromptFlow(
    name="generateCompanyProfileFromWebsite",
    input_model=CompanyProfileInput,
    output_model=CompanyProfileOutput,
    render=render_prompt,
    input_error="A valid company website URL is required.",
    output_error="AI failed to generate a company profile.",
    default_on_empty=True,
)


async def generate_company_profile_from_website(
    payload: CompanyProfileInput | dict[str, Any],
    client: GenerationClient | None = None,
) -> CompanyProfileOutput:
    return await company_profile_flow(payload, client=client)
