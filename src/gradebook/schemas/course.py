"""Pydantic schemas for course endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CourseWrite(BaseModel):
    """Request body for creating or replacing a course."""

    course_code: Optional[str] = None
    course_name: Optional[str] = None
    credits: Optional[int] = None
    description: Optional[str] = None


class CourseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_code: str
    course_name: str
    credits: int
    description: Optional[str] = None
    created_at: datetime
