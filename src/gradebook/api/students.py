"""Student directory endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.config import Settings
from ..core.database import get_db
from ..schemas import CreatedResponse, ErrorResponse, MessageResponse, StudentRead, StudentWrite
from ..services import student_service
from ..services.errors import RecordNotFound
from .deps import committing, get_app_settings

router = APIRouter(prefix="/students", tags=["students"])


@router.get(
    "",
    response_model=List[StudentRead],
    summary="List students",
    responses={
        200: {
            "description": "Students ordered by creation time, newest first",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": 1,
                            "student_id": "S1001",
                            "name": "Alex Rao",
                            "email": "alex.rao@example.edu",
                            "phone": "555-0101",
                            "date_of_birth": "2004-03-18",
                            "address": None,
                            "created_at": "2026-09-01T10:15:30",
                        }
                    ]
                }
            },
        }
    },
)
def list_students(db: Session = Depends(get_db)) -> List[StudentRead]:
    return list(student_service.list_students(db))


@router.post(
    "",
    response_model=CreatedResponse,
    summary="Add a student",
    responses={500: {"model": ErrorResponse, "description": "Duplicate student_id or email, or a missing required field"}},
)
def create_student(payload: StudentWrite, db: Session = Depends(get_db)) -> CreatedResponse:
    """Insert a student.

    Example request body::

        {
            "student_id": "S1001",
            "name": "Alex Rao",
            "email": "alex.rao@example.edu",
            "phone": "555-0101",
            "date_of_birth": "2004-03-18"
        }
    """

    with committing(db):
        new_id = student_service.create_student(db, **payload.model_dump())
    return CreatedResponse(id=new_id, message="Student added successfully")


@router.put("/{student_pk}", response_model=MessageResponse, summary="Replace a student")
def update_student(
    student_pk: int,
    payload: StudentWrite,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    """Overwrite every mutable field of the student with the given id."""

    with committing(db):
        affected = student_service.update_student(db, student_pk, **payload.model_dump())
        if not affected and settings.report_missing_as_not_found:
            raise RecordNotFound("Student", student_pk)
    return MessageResponse(message="Student updated successfully")


@router.delete("/{student_pk}", response_model=MessageResponse, summary="Delete a student and their marks")
def delete_student(
    student_pk: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    with committing(db):
        affected = student_service.delete_student(db, student_pk)
        if not affected and settings.report_missing_as_not_found:
            raise RecordNotFound("Student", student_pk)
    return MessageResponse(message="Student deleted successfully")
