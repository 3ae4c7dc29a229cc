"""SQLAlchemy model for appreciation and disciplinary records."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base


class AppreciationModel(Base):
    """Letter of thanks or sanction attached to an employee."""

    __tablename__ = "appreciation"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(
        Integer,
        ForeignKey("employee.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type = Column(String(20), nullable=False)
    description = Column(Text, nullable=False)
    issued_on = Column("date", Date, nullable=False)
    issued_by = Column(String(120), nullable=False)
    additional_service_months = Column(Integer, nullable=False, default=0)


__all__ = ["AppreciationModel"]
