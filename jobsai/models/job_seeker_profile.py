# job_seeker_profile.py
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from jobsai.database import Base


class JobSeekerProfile(Base):
    __tablename__ = "job_seeker_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    full_name = Column("fullName", Text, nullable=True)
    phone_number = Column("phoneNumber", Text, nullable=True)
    profile_picture_url = Column("profilePictureUrl", Text, nullable=True)
    resume_url = Column("resumeUrl", Text, nullable=True)
    gender = Column(Text, nullable=True)
    marital_status = Column("maritalStatus", Text, nullable=True)
    # Stored as free text (YYYY-MM-DD in practice).
    date_of_birth = Column("dateOfBirth", Text, nullable=True)
    current_address = Column("currentAddress", Text, nullable=True)
    current_city = Column("currentCity", Text, nullable=True)
    current_pin_code = Column("currentPinCode", Text, nullable=True)
    correspondence_address = Column("correspondenceAddress", Text, nullable=True)
    correspondence_city = Column("correspondenceCity", Text, nullable=True)
    correspondence_pin_code = Column("correspondencePinCode", Text, nullable=True)
    professional_summary = Column("professionalSummary", Text, nullable=True)
    current_designation = Column("currentDesignation", Text, nullable=True)
    current_department = Column("currentDepartment", Text, nullable=True)
    current_industry = Column("currentIndustry", Text, nullable=True)
    current_industry_type = Column("currentIndustryType", Text, nullable=True)
    other_current_industry_type = Column("otherCurrentIndustryType", Text, nullable=True)
    # Delimited fields: comma-joined lists kept as text.
    preferred_locations = Column("preferredLocations", Text, nullable=True)
    total_experience = Column("totalExperience", Float, nullable=True)
    present_salary = Column("presentSalary", Text, nullable=True)
    skills = Column(Text, nullable=True)
    portfolio_url = Column("portfolioUrl", Text, nullable=True)
    github_profile_url = Column("githubProfileUrl", Text, nullable=True)
    linkedin_profile_url = Column("linkedinProfileUrl", Text, nullable=True)
    other_social_links = Column("otherSocialLinks", Text, nullable=True)
    created_at = Column("createdAt", DateTime, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", backref="job_seeker_profile")
