"""Mark model linking a student to a course for one term."""

from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base
from ..utils.datetime import utcnow

DEFAULT_TOTAL_MARKS = 100


def compute_percentage(marks_obtained, total_marks) -> Decimal:
    """Return ``marks_obtained / total_marks * 100`` rounded half-up to two places."""

    ratio = Decimal(str(marks_obtained)) / Decimal(str(total_marks)) * 100
    return ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


class Mark(Base):
    """Score obtained by a student in a course during a semester."""

    __tablename__ = "marks"
    __table_args__ = (
        UniqueConstraint(
            "student_id",
            "course_id",
            "semester",
            "academic_year",
            name="marks_student_course_term_unique",
        ),
        CheckConstraint("marks_obtained >= 0", name="marks_obtained_positive"),
        CheckConstraint("total_marks > 0", name="marks_total_positive"),
        CheckConstraint("marks_obtained <= total_marks", name="marks_obtained_within_total"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False)
    marks_obtained = Column(Numeric(6, 2), nullable=False)
    total_marks = Column(Numeric(6, 2), nullable=False, default=DEFAULT_TOTAL_MARKS)
    semester = Column(String(20))
    academic_year = Column(String(10))
    created_at = Column(DateTime, default=utcnow, nullable=False)

    student = relationship("Student", back_populates="marks")
    course = relationship("Course", back_populates="marks")

    @property
    def percentage(self) -> Decimal:
        return compute_percentage(self.marks_obtained, self.total_marks)
