"""Pydantic schemas for student endpoints."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StudentWrite(BaseModel):
    """Request body for creating or replacing a student.

    Required columns are optional here; the store's NOT NULL and UNIQUE
    constraints decide whether a write is accepted.
    """

    student_id: Optional[str] = Field(None, description="Externally assigned student identifier.")
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None


class StudentRead(BaseModel):
    """Student record as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: str
    name: str
    email: str
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[str] = None
    created_at: datetime
