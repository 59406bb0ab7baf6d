"""SQLAlchemy models for Gradebook."""

from .course import Course
from .mark import DEFAULT_TOTAL_MARKS, Mark, compute_percentage
from .student import Student

__all__ = [
    "Course",
    "DEFAULT_TOTAL_MARKS",
    "Mark",
    "Student",
    "compute_percentage",
]
