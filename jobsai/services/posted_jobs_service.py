# posted_jobs_service.py
from sqlalchemy import select
from sqlalchemy.orm import Session
from jobsai.models.job import LISTED_JOB_STATUSES, Job
from jobsai.schemas.posted_job import PostedJob, PostedJobFilters
from jobsai.services.text_parsing import format_number, split_delimited


KEYWORD_LIMIT = 5


def format_posted_job(job: Job) -> PostedJob:
    # Job columns are plain comma lists; brackets and quotes are kept as written.
    skills = split_delimited(job.skills_required, strip_brackets=False)
    return PostedJob(
        id=f"job{job.id}",
        title=job.job_title,
        description=job.job_description,
        filters=PostedJobFilters(
            keywords=skills[:KEYWORD_LIMIT],
            skills=skills,
            designation=job.job_title,
            min_experience=format_number(job.minimum_experience),
            max_experience=format_number(job.maximum_experience),
            locations=split_delimited(job.job_location, strip_brackets=False),
            min_salary_lpa=format_number(job.minimum_salary),
            max_salary_lpa=format_number(job.maximum_salary),
            qualifications=split_delimited(job.qualification, strip_brackets=False),
            industry=job.industry or "",
            company_name=job.company_name or "",
        ),
    )


def list_posted_jobs(db: Session, employer_user_id: int, *, limit: int = 20) -> list[PostedJob]:
    jobs = db.scalars(
        select(Job)
        .where(Job.employer_user_id == employer_user_id, Job.status.in_(LISTED_JOB_STATUSES))
        .order_by(Job.created_at.desc(), Job.id.desc())
        .limit(limit)
    ).all()
    return [format_posted_job(job) for job in jobs]
