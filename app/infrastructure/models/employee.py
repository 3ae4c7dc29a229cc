"""SQLAlchemy model for the employee table."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String

from app.infrastructure.database import Base


class EmployeeModel(Base):
    """Database representation of an employee record."""

    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, index=True)
    employee_number = Column(String(50), nullable=False, unique=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    full_name = Column(String(201), nullable=False)
    email = Column(String(120), nullable=True)
    phone_number = Column(String(30), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    hiring_date = Column(Date, nullable=False)
    current_grade = Column(Integer, nullable=False)
    last_promotion_date = Column(Date, nullable=True)
    last_allowance_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default="active")
    retirement_date = Column(Date, nullable=True)
    workplace_id = Column(
        Integer, ForeignKey("workplace.id", ondelete="SET NULL"), nullable=True
    )
    job_title_id = Column(
        Integer, ForeignKey("job_title.id", ondelete="SET NULL"), nullable=True
    )
    educational_qualification_id = Column(
        Integer,
        ForeignKey("educational_qualification.id", ondelete="SET NULL"),
        nullable=True,
    )


__all__ = ["EmployeeModel"]
