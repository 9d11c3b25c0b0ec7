# job.py
from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.sql import func
from jobsai.database import Base


JOB_STATUSES = ("draft", "active", "closed", "archived")
LISTED_JOB_STATUSES = ("active", "draft")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    employer_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    job_title = Column("jobTitle", Text, nullable=False)
    company_name = Column("companyName", Text, nullable=False)
    industry = Column(Text, nullable=False)
    industry_type = Column("industryType", Text, nullable=False)
    job_type = Column("jobType", Text, nullable=False)
    # Delimited fields: comma-joined lists kept as text.
    job_location = Column("jobLocation", Text, nullable=False)
    number_of_vacancies = Column("numberOfVacancies", Integer, nullable=False, default=1)
    qualification = Column(Text, nullable=False)
    minimum_experience = Column("minimumExperience", Float, nullable=False, default=0)
    maximum_experience = Column("maximumExperience", Float, nullable=False, default=0)
    minimum_salary = Column("minimumSalary", Integer, nullable=False, default=0)
    maximum_salary = Column("maximumSalary", Integer, nullable=False, default=0)
    skills_required = Column("skillsRequired", Text, nullable=False)
    additional_data = Column("additionalData", Text, nullable=True)
    job_description = Column("jobDescription", Text, nullable=False)
    custom_questions = Column("customQuestions", Text, nullable=True)
    status = Column(Text, nullable=False, default="draft", index=True)
    created_at = Column("createdAt", DateTime, server_default=func.now(), index=True)
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in JOB_STATUSES) + ")",
            name="ck_jobs_status",
        ),
    )
