from __future__ import annotations

import asyncio

import pytest

from jobsai.ai.client import GeminiClient, get_generation_client
from jobsai.ai.errors import FlowInputError, FlowOutputError
from jobsai.ai.flows.company_profile import generate_company_profile_from_website
from jobsai.ai.flows.job_description import generate_job_description
from jobsai.ai.flows.job_match import relevant_job_recommendations
from jobsai.ai.flows.job_post_parser import smart_job_post_parser
from jobsai.ai.flows.skill_suggester import suggest_skills_for_job
from jobsai.schemas.ai import SuggestSkillsInput


def test_job_description_renders_context_into_prompt(fake_generation_client) -> None:
    fake = fake_generation_client({"jobDescription": "<p>Join us</p>"})

    out = asyncio.run(
        generate_job_description(
            {
                "jobTitle": "Data Engineer",
                "companyName": "Acme",
                "skillsRequired": ["Python", "Airflow"],
                "customInstructions": "Emphasize remote work",
            },
            client=fake,
        )
    )

    assert out.job_description == "<p>Join us</p>"
    prompt = fake.prompts[0]
    assert "Job Title: Data Engineer" in prompt
    assert "Company Name: Acme" in prompt
    assert "Key Skills to consider: Python, Airflow." in prompt
    assert "Emphasize remote work" in prompt
    assert "created from scratch" in prompt
    assert "Industry:" not in prompt


def test_job_description_refines_existing_text(fake_generation_client) -> None:
    fake = fake_generation_client({"jobDescription": "<p>Better</p>"})
    asyncio.run(
        generate_job_description(
            {
                "jobTitle": "Data Engineer",
                "customInstructions": "Add a benefits section",
                "existingJobDescription": "<p>Old text</p>",
            },
            client=fake,
        )
    )
    assert "Existing Job Description:\n<p>Old text</p>" in fake.prompts[0]


def test_job_description_requires_title_and_instructions(fake_generation_client) -> None:
    fake = fake_generation_client({"jobDescription": "<p>unused</p>"})
    with pytest.raises(FlowInputError) as excinfo:
        asyncio.run(generate_job_description({"jobTitle": "Data Engineer", "customInstructions": ""}, client=fake))
    assert excinfo.value.message == (
        "Job title and custom instructions are essential for generating a job description."
    )
    assert fake.prompts == []


@pytest.mark.parametrize("reply", [None, {}, {"jobDescription": ""}, {"text": "hello"}])
def test_job_description_rejects_empty_output(fake_generation_client, reply) -> None:
    with pytest.raises(FlowOutputError) as excinfo:
        asyncio.run(
            generate_job_description(
                {"jobTitle": "Data Engineer", "customInstructions": "Write it"},
                client=fake_generation_client(reply),
            )
        )
    assert excinfo.value.message == "AI failed to generate a job description."


def test_job_match_returns_ranked_descriptions(fake_generation_client) -> None:
    ranked = ["Backend role using Python", "Frontend role using React"]
    fake = fake_generation_client({"recommendedJobs": ranked})

    out = asyncio.run(
        relevant_job_recommendations(
            {
                "jobSeekerProfile": "Python developer, 4 years",
                "jobDescriptions": ["Frontend role using React", "Backend role using Python"],
            },
            client=fake,
        )
    )

    assert out.recommended_jobs == ranked
    assert "- Frontend role using React\n- Backend role using Python" in fake.prompts[0]


def test_job_match_requires_profile_and_descriptions(fake_generation_client) -> None:
    with pytest.raises(FlowInputError):
        asyncio.run(relevant_job_recommendations({"jobSeekerProfile": "x"}, client=fake_generation_client({})))


def test_skill_suggester_accepts_model_instance(fake_generation_client) -> None:
    fake = fake_generation_client({"suggestedSkills": ["Python", "SQL"]})
    out = asyncio.run(
        suggest_skills_for_job(SuggestSkillsInput(job_title="Data Analyst", minimum_experience=2), client=fake)
    )
    assert out.suggested_skills == ["Python", "SQL"]
    assert "Minimum Experience: 2 years" in fake.prompts[0]
    assert "No detailed job description provided" in fake.prompts[0]


def test_skill_suggester_allows_empty_list(fake_generation_client) -> None:
    out = asyncio.run(suggest_skills_for_job({"jobTitle": "Chef"}, client=fake_generation_client({"suggestedSkills": []})))
    assert out.suggested_skills == []


def test_skill_suggester_rejects_more_than_twenty_skills(fake_generation_client) -> None:
    reply = {"suggestedSkills": [f"skill {i}" for i in range(21)]}
    with pytest.raises(FlowOutputError) as excinfo:
        asyncio.run(suggest_skills_for_job({"jobTitle": "Chef"}, client=fake_generation_client(reply)))
    assert excinfo.value.message == "AI failed to suggest skills."


def test_skill_suggester_requires_title(fake_generation_client) -> None:
    with pytest.raises(FlowInputError) as excinfo:
        asyncio.run(suggest_skills_for_job({"industry": "Food"}, client=fake_generation_client({})))
    assert excinfo.value.message == "Job title is essential for suggesting skills."


def test_ai_endpoints_use_injected_client(client, fake_generation_client) -> None:
    fake = fake_generation_client({"suggestedSkills": ["Knife skills"]})
    client.app.dependency_overrides[get_generation_client] = lambda: fake

    r = client.post("/api/ai/suggest-skills", json={"jobTitle": "Chef"})
    assert r.status_code == 200
    assert r.json() == {"suggestedSkills": ["Knife skills"]}


def test_ai_endpoint_reports_static_input_error(client, fake_generation_client) -> None:
    client.app.dependency_overrides[get_generation_client] = lambda: fake_generation_client({})

    r = client.post("/api/ai/job-description", json={"jobTitle": "Chef"})
    assert r.status_code == 400
    assert r.json() == {
        "error": "Job title and custom instructions are essential for generating a job description."
    }


def test_ai_endpoint_reports_bad_model_output(client, fake_generation_client) -> None:
    client.app.dependency_overrides[get_generation_client] = lambda: fake_generation_client(None)

    r = client.post("/api/ai/job-match", json={"jobSeekerProfile": "x", "jobDescriptions": ["a"]})
    assert r.status_code == 502
    assert r.json() == {"error": "AI failed to rank job descriptions."}


def test_ai_endpoint_without_api_key_is_unavailable(client) -> None:
    client.app.dependency_overrides[get_generation_client] = lambda: GeminiClient(api_key="")

    r = client.post("/api/ai/suggest-skills", json={"jobTitle": "Chef"})
    assert r.status_code == 503
    assert r.json() == {"error": "AI service is not configured."}


@pytest.mark.parametrize("raw", ["", "   \n\t"])
def test_job_post_parser_skips_model_for_blank_text(fake_generation_client, raw) -> None:
    fake = fake_generation_client({"jobTitle": "unused"})

    out = asyncio.run(smart_job_post_parser({"rawJobDetails": raw}, client=fake))

    assert fake.prompts == []
    assert out.job_title is None
    assert out.minimum_salary is None and out.number_of_vacancies is None
    assert out.skills_required == []
    assert out.job_description == ""


def test_job_post_parser_extracts_fields(fake_generation_client) -> None:
    fake = fake_generation_client(
        {
            "jobTitle": "Backend Engineer",
            "jobLocation": "Remote",
            "minimumExperience": "3",
            "maximumSalary": 1800000,
            "numberOfVacancies": 2,
            "skillsRequired": None,
            "jobDescription": "<p>Build APIs.</p>",
        }
    )

    out = asyncio.run(
        smart_job_post_parser({"rawJobDetails": "Backend Engineer, remote, 3+ years. Build APIs."}, client=fake)
    )

    assert out.job_title == "Backend Engineer"
    assert out.minimum_experience == 3.0
    assert out.maximum_salary == 1800000
    assert out.minimum_salary is None
    assert out.skills_required == []
    assert "Raw Job Details:\nBackend Engineer, remote, 3+ years. Build APIs." in fake.prompts[0]


def test_job_post_parser_returns_defaults_for_empty_reply(fake_generation_client) -> None:
    out = asyncio.run(smart_job_post_parser({"rawJobDetails": "Chef wanted"}, client=fake_generation_client(None)))
    assert out.job_title is None
    assert out.job_description == ""


def test_job_post_parser_rejects_invalid_numbers(fake_generation_client) -> None:
    with pytest.raises(FlowOutputError) as excinfo:
        asyncio.run(
            smart_job_post_parser(
                {"rawJobDetails": "Chef wanted"}, client=fake_generation_client({"numberOfVacancies": 0})
            )
        )
    assert excinfo.value.message == "AI failed to parse the job posting."


def test_company_profile_coerces_numeric_fields(fake_generation_client) -> None:
    fake = fake_generation_client(
        {
            "companyName": "Acme Corp",
            "companyWebsite": "",
            "teamSize": "250",
            "yearOfEstablishment": 0,
            "linkedinUrl": "https://www.linkedin.com/company/acme",
            "xUrl": "",
        }
    )

    out = asyncio.run(generate_company_profile_from_website({"companyWebsite": "https://acme.example"}, client=fake))

    assert out.company_name == "Acme Corp"
    assert out.team_size == 250
    assert out.year_of_establishment is None
    assert out.company_website is None
    assert out.x_url is None
    assert out.linkedin_url == "https://www.linkedin.com/company/acme"
    assert "You will NOT browse the live URL: https://acme.example" in fake.prompts[0]


@pytest.mark.parametrize("team_size", ["about fifty", "NaN", None, True])
def test_company_profile_non_numeric_team_size_is_null(fake_generation_client, team_size) -> None:
    out = asyncio.run(
        generate_company_profile_from_website(
            {"companyWebsite": "https://acme.example"},
            client=fake_generation_client({"companyName": "Acme", "teamSize": team_size, "yearOfEstablishment": "1998"}),
        )
    )
    assert out.team_size is None
    assert out.year_of_establishment == 1998


def test_company_profile_requires_valid_url(fake_generation_client) -> None:
    fake = fake_generation_client({})
    with pytest.raises(FlowInputError) as excinfo:
        asyncio.run(generate_company_profile_from_website({"companyWebsite": "acme"}, client=fake))
    assert excinfo.value.message == "A valid company website URL is required."
    assert fake.prompts == []


def test_parse_job_post_and_company_profile_endpoints(client, fake_generation_client) -> None:
    fake = fake_generation_client({"companyName": "Acme", "teamSize": 12.0})
    client.app.dependency_overrides[get_generation_client] = lambda: fake

    r = client.post("/api/ai/company-profile", json={"companyWebsite": "https://acme.example"})
    assert r.status_code == 200
    body = r.json()
    assert body["companyName"] == "Acme"
    assert body["teamSize"] == 12
    assert body["xUrl"] is None

    r = client.post("/api/ai/parse-job-post", json={"rawJobDetails": ""})
    assert r.status_code == 200
    assert r.json()["skillsRequired"] == []
    assert len(fake.prompts) == 1

    r = client.post("/api/ai/parse-job-post", json={})
    assert r.status_code == 400
    assert r.json() == {"error": "Raw job details are required for parsing."}
