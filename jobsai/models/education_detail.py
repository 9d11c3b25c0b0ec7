# education_detail.py
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.sql import func
from jobsai.database import Base


class EducationDetail(Base):
    __tablename__ = "education_details"

    id = Column(Integer, primary_key=True, index=True)
    job_seeker_profile_id = Column(
        Integer, ForeignKey("job_seeker_profiles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    qualification = Column(Text, nullable=False)
    stream = Column(Text, nullable=False)
    institution = Column(Text, nullable=False)
    year_of_completion = Column("yearOfCompletion", Integer, nullable=False)
    percentage_marks = Column("percentageMarks", Float, nullable=True)
    created_at = Column("createdAt", DateTime, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now())
