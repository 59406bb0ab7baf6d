"""Course domain model."""

from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..utils.datetime import utcnow


class Course(Base):
    """A course offered in the catalog."""

    __tablename__ = "courses"
    __table_args__ = (UniqueConstraint("course_code", name="courses_course_code_unique"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    course_code = Column(String(20), nullable=False)
    course_name = Column(String(100), nullable=False)
    credits = Column(Integer, nullable=False)
    description = Column(Text)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    marks = relationship("Mark", back_populates="course", passive_deletes=True)
