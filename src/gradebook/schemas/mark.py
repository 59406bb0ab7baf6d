"""Pydantic schemas for the marks ledger."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MarkWrite(BaseModel):
    """Request body for recording or replacing a mark.

    ``total_marks`` falls back to 100 when omitted or null. A new mark without
    ``academic_year`` is filed under the current academic year; a replacement
    without one keeps its stored year.
    """

    student_id: Optional[int] = Field(None, description="Surrogate id of the student.")
    course_id: Optional[int] = Field(None, description="Surrogate id of the course.")
    marks_obtained: Optional[float] = None
    total_marks: Optional[float] = None
    semester: Optional[str] = None
    academic_year: Optional[str] = None


class StudentMark(BaseModel):
    """Mark of one student joined with course details."""

    id: int
    student_id: int
    course_id: int
    marks_obtained: float
    total_marks: float
    semester: Optional[str] = None
    academic_year: Optional[str] = None
    created_at: datetime
    course_name: str
    course_code: str
    credits: int


class MarkDetail(BaseModel):
    """Mark joined with student and course display fields.

    ``student_id`` carries the student's external identifier, not the
    surrogate key.
    """

    id: int
    student_id: str
    course_id: int
    marks_obtained: float
    total_marks: float
    semester: Optional[str] = None
    academic_year: Optional[str] = None
    created_at: datetime
    student_name: str
    course_name: str
    course_code: str
    percentage: float
