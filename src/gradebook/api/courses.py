"""Course catalog endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.config import Settings
from ..core.database import get_db
from ..schemas import CourseRead, CourseWrite, CreatedResponse, ErrorResponse, MessageResponse
from ..services import course_service
from ..services.errors import RecordNotFound
from .deps import committing, get_app_settings

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=List[CourseRead], summary="List courses by code")
def list_courses(db: Session = Depends(get_db)) -> List[CourseRead]:
    return list(course_service.list_courses(db))


@router.post(
    "",
    response_model=CreatedResponse,
    summary="Add a course",
    responses={
        200: {
            "description": "Course created",
            "content": {"application/json": {"example": {"id": 3, "message": "Course added successfully"}}},
        },
        500: {"model": ErrorResponse, "description": "Duplicate course_code or a missing required field"},
    },
)
def create_course(payload: CourseWrite, db: Session = Depends(get_db)) -> CreatedResponse:
    """Insert a course.

    Example request body::

        {
            "course_code": "CS101",
            "course_name": "Introduction to Programming",
            "credits": 4,
            "description": "Fundamentals of programming in Python"
        }
    """

    with committing(db):
        new_id = course_service.create_course(db, **payload.model_dump())
    return CreatedResponse(id=new_id, message="Course added successfully")


@router.put("/{course_pk}", response_model=MessageResponse, summary="Replace a course")
def update_course(
    course_pk: int,
    payload: CourseWrite,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    with committing(db):
        affected = course_service.update_course(db, course_pk, **payload.model_dump())
        if not affected and settings.report_missing_as_not_found:
            raise RecordNotFound("Course", course_pk)
    return MessageResponse(message="Course updated successfully")


@router.delete("/{course_pk}", response_model=MessageResponse, summary="Delete a course and its marks")
def delete_course(
    course_pk: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    with committing(db):
        affected = course_service.delete_course(db, course_pk)
        if not affected and settings.report_missing_as_not_found:
            raise RecordNotFound("Course", course_pk)
    return MessageResponse(message="Course deleted successfully")
