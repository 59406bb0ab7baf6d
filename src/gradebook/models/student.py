"""Student domain model."""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..utils.datetime import utcnow


class Student(Base):
    """A student enrolled in the directory."""

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("student_id", name="students_student_id_unique"),
        UniqueConstraint("email", name="students_email_unique"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(String(20), nullable=False)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False)
    phone = Column(String(15))
    date_of_birth = Column(Date)
    address = Column(Text)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    marks = relationship("Mark", back_populates="student", passive_deletes=True)
