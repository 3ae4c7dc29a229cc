"""SQLAlchemy model for job titles."""

from sqlalchemy import Column, Integer, String, Text

from app.infrastructure.database import Base


class JobTitleModel(Base):
    """Job title and the grade it corresponds to."""

    __tablename__ = "job_title"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    grade = Column(Integer, nullable=False)


__all__ = ["JobTitleModel"]
