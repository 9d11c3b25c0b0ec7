# user.py
from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func
from jobsai.database import Base


ROLE_JOB_SEEKER = "jobSeeker"
ROLE_EMPLOYER = "employer"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(Text, nullable=False)
    role = Column(String(32), nullable=False)
    is_admin = Column("isAdmin", Boolean, nullable=False, default=False)
    created_at = Column("createdAt", DateTime, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("role IN ('jobSeeker', 'employer')", name="ck_users_role"),
    )
