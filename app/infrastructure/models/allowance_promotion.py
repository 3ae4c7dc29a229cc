"""SQLAlchemy model for allowance and promotion orders."""

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base


class AllowancePromotionModel(Base):
    """Database representation of an allowance or promotion order."""

    __tablename__ = "allowance_promotion"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(
        Integer,
        ForeignKey("employee.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type = Column(String(20), nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    notes = Column(Text, nullable=True)
    processed_at = Column(DateTime, nullable=True)
    processed_by = Column(Integer, ForeignKey("user.id"), nullable=True)


__all__ = ["AllowancePromotionModel"]
