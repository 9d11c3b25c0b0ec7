# experience_detail.py
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.sql import func
from jobsai.database import Base


class ExperienceDetail(Base):
    __tablename__ = "experience_details"

    id = Column(Integer, primary_key=True, index=True)
    job_seeker_profile_id = Column(
        Integer, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    company_name = Column("companyName", Text, nullable=False)
    designation = Column(Text, nullable=False)
    about_company = Column("aboutCompany", Text, nullable=True)
    start_date = Column("startDate", Text, nullable=False)
    end_date = Column("endDate", Text, nullable=True)
    is_present = Column("isPresent", Integer, nullable=False, default=0)
    # One responsibility per line.
    responsibilities = Column(Text, nullable=True)
    created_at = Column("createdAt", DateTime, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint('"isPresent" IN (0, 1)', name="ck_experience_details_is_present"),
    )
