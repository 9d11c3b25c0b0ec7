from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from jobsai.database import SessionLocal, create_core_tables, engine  # noqa: E402
from jobsai.models.education_detail import EducationDetail  # noqa: E402
from jobsai.models.experience_detail import ExperienceDetail  # noqa: E402
from jobsai.models.job import Job  # noqa: E402
from jobsai.models.job_seeker_profile import JobSeekerProfile  # noqa: E402
from jobsai.models.user import ROLE_EMPLOYER, ROLE_JOB_SEEKER, User  # noqa: E402

# Accounts created here cannot sign in; credentials are managed by the web app.
UNUSABLE_PASSWORD = "!"

SEEKERS = [
    {
        "email": "asha.rao@example.com",
        "profile": {
            "full_name": "Asha Rao",
            "current_designation": "Backend Engineer",
            "current_city": "Bengaluru",
            "skills": '["Python", "SQL", "FastAPI"]',
            "preferred_locations": "Pune, Hyderabad",
            "total_experience": 4,
            "present_salary": "12.5 LPA",
            "gender": "Female",
            "date_of_birth": "1995-06-14",
            "current_industry": "Technology",
            "current_industry_type": "SaaS",
        },
        "education": [
            {"qualification": "B.Tech", "stream": "Computer Science", "institution": "VTU", "year_of_completion": 2017},
        ],
        "experience": [
            {
                "company_name": "Acme Cloud",
                "designation": "Backend Engineer",
                "start_date": "2021-03-01",
                "is_present": 1,
                "responsibilities": "Own billing APIs\nMentor interns",
            },
            {
                "company_name": "DataWorks",
                "designation": "Software Engineer",
                "start_date": "2017-07-01",
                "end_date": "2021-02-28",
                "responsibilities": "Built ETL pipelines",
            },
        ],
    },
    {
        "email": "vikram.s@example.com",
        "profile": {
            "full_name": "Vikram Singh",
            "current_designation": "Data Analyst",
            "current_city": "Delhi",
            "skills": "Excel, SQL, Tableau",
            "total_experience": 2,
            "present_salary": "6 LPA",
        },
        "education": [],
        "experience": [],
    },
]

EMPLOYER_JOBS = [
    {
        "job_title": "Senior Python Developer",
        "company_name": "Acme Cloud",
        "industry": "Technology",
        "industry_type": "SaaS",
        "job_type": "Full-time",
        "job_location": "Bengaluru, Remote",
        "qualification": "B.Tech, M.Tech",
        "minimum_experience": 4,
        "maximum_experience": 8,
        "minimum_salary": 18,
        "maximum_salary": 30,
        "skills_required": "Python, FastAPI, PostgreSQL, Docker, AWS, Kubernetes",
        "job_description": "<p>Build and run our core APIs.</p>",
        "status": "active",
    },
    {
        "job_title": "Data Analyst",
        "company_name": "Acme Cloud",
        "industry": "Technology",
        "industry_type": "SaaS",
        "job_type": "Full-time",
        "job_location": "Pune",
        "qualification": "B.Sc",
        "minimum_experience": 1,
        "maximum_experience": 3,
        "minimum_salary": 6,
        "maximum_salary": 10,
        "skills_required": "SQL, Excel, Tableau",
        "job_description": "<p>Own product dashboards.</p>",
        "status": "draft",
    },
]


def _get_or_create_user(db, email: str, role: str) -> tuple[User, bool]:
    user = db.query(User).filter(User.email == email).first()
    if user is not None:
        return user, False
    user = User(email=email, password=UNUSABLE_PASSWORD, role=role)
    db.add(user)
    db.flush()
    return user, True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed demo job seekers, an employer and its jobs into the ORM DB.")
    parser.add_argument("--employer-email", default="hiring@acme.example.com")
    args = parser.parse_args(argv)

    create_core_tables(engine)

    inserted = {"seekers": 0, "jobs": 0}
    with SessionLocal() as db:
        for item in SEEKERS:
            user, created = _get_or_create_user(db, item["email"], ROLE_JOB_SEEKER)
            if not created:
                continue
            profile = JobSeekerProfile(user_id=user.id, **item["profile"])
            db.add(profile)
            db.flush()
            for education in item["education"]:
                db.add(EducationDetail(job_seeker_profile_id=profile.id, **education))
            for experience in item["experience"]:
                db.add(ExperienceDetail(job_seeker_profile_id=profile.id, **experience))
            inserted["seekers"] += 1

        employer, created = _get_or_create_user(db, args.employer_email, ROLE_EMPLOYER)
        if created:
            for job in EMPLOYER_JOBS:
                db.add(Job(employer_user_id=employer.id, **job))
                inserted["jobs"] += 1

        db.commit()
        employer_id = employer.id

    print(f"inserted seekers={inserted['seekers']} jobs={inserted['jobs']} employer_user_id={employer_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
