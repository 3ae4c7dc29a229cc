"""SQLAlchemy model for educational qualifications."""

from sqlalchemy import Column, Integer, String, Text

from app.infrastructure.database import Base


class EducationalQualificationModel(Base):
    __tablename__ = "educational_qualification"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    level = Column(Integer, nullable=False)


__all__ = ["EducationalQualificationModel"]
