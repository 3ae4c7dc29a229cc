"""SQLAlchemy model for workplaces."""

from sqlalchemy import Column, Integer, String, Text

from app.infrastructure.database import Base


class WorkplaceModel(Base):
    __tablename__ = "workplace"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)


__all__ = ["WorkplaceModel"]
