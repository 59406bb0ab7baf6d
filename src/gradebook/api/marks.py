"""Marks ledger endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.config import Settings
from ..core.database import get_db
from ..schemas import CreatedResponse, ErrorResponse, MarkDetail, MarkWrite, MessageResponse, StudentMark
from ..services import mark_service
from ..services.errors import RecordNotFound
from .deps import committing, get_app_settings

router = APIRouter(prefix="/marks", tags=["marks"])


@router.get(
    "",
    response_model=List[MarkDetail],
    summary="List marks with student, course and percentage",
    responses={
        200: {
            "description": "Marks ordered by creation time, newest first",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "id": 7,
                            "student_id": "S1001",
                            "course_id": 3,
                            "marks_obtained": 45.0,
                            "total_marks": 100.0,
                            "semester": "Fall",
                            "academic_year": "2026-27",
                            "created_at": "2026-10-02T09:00:00",
                            "student_name": "Alex Rao",
                            "course_name": "Introduction to Programming",
                            "course_code": "CS101",
                            "percentage": 45.0,
                        }
                    ]
                }
            },
        }
    },
)
def list_marks(db: Session = Depends(get_db)) -> List[MarkDetail]:
    response: List[MarkDetail] = []
    for mark, student_name, student_code, course_name, course_code in mark_service.list_marks(db):
        response.append(
            MarkDetail(
                id=mark.id,
                student_id=student_code,
                course_id=mark.course_id,
                marks_obtained=mark.marks_obtained,
                total_marks=mark.total_marks,
                semester=mark.semester,
                academic_year=mark.academic_year,
                created_at=mark.created_at,
                student_name=student_name,
                course_name=course_name,
                course_code=course_code,
                percentage=mark.percentage,
            )
        )
    return response


@router.get(
    "/student/{student_pk}",
    response_model=List[StudentMark],
    summary="Marks of one student with course details",
)
def list_marks_by_student(student_pk: int, db: Session = Depends(get_db)) -> List[StudentMark]:
    response: List[StudentMark] = []
    for mark, course_name, course_code, credits in mark_service.list_marks_by_student(db, student_pk):
        response.append(
            StudentMark(
                id=mark.id,
                student_id=mark.student_id,
                course_id=mark.course_id,
                marks_obtained=mark.marks_obtained,
                total_marks=mark.total_marks,
                semester=mark.semester,
                academic_year=mark.academic_year,
                created_at=mark.created_at,
                course_name=course_name,
                course_code=course_code,
                credits=credits,
            )
        )
    return response


@router.post(
    "",
    response_model=CreatedResponse,
    summary="Record a mark",
    responses={500: {"model": ErrorResponse, "description": "Duplicate term entry or unknown student or course"}},
)
def create_mark(
    payload: MarkWrite,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> CreatedResponse:
    """Record a mark; ``total_marks`` defaults to 100.

    Example request body::

        {
            "student_id": 1,
            "course_id": 3,
            "marks_obtained": 45,
            "semester": "Fall"
        }
    """

    with committing(db):
        new_id = mark_service.create_mark(
            db,
            year_start_month=settings.academic_year_start_month,
            **payload.model_dump(),
        )
    return CreatedResponse(id=new_id, message="Marks added successfully")


@router.put("/{mark_pk}", response_model=MessageResponse, summary="Replace a mark")
def update_mark(
    mark_pk: int,
    payload: MarkWrite,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    with committing(db):
        affected = mark_service.update_mark(
            db,
            mark_pk,
            **payload.model_dump(),
        )
        if not affected and settings.report_missing_as_not_found:
            raise RecordNotFound("Mark", mark_pk)
    return MessageResponse(message="Marks updated successfully")


@router.delete("/{mark_pk}", response_model=MessageResponse, summary="Delete a mark")
def delete_mark(
    mark_pk: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    with committing(db):
        affected = mark_service.delete_mark(db, mark_pk)
        if not affected and settings.report_missing_as_not_found:
            raise RecordNotFound("Mark", mark_pk)
    return MessageResponse(message="Marks deleted successfully")
