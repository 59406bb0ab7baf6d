"""Marks ledger operations."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from ..models import DEFAULT_TOTAL_MARKS, Course, Mark, Student
from ..utils.datetime import academic_year_label
from .errors import translate_store_errors

logger = logging.getLogger(__name__)


def list_marks(session: Session) -> Sequence[tuple]:
    """Return ``(mark, student_name, student_code, course_name, course_code)`` rows, newest first.

    Marks whose student or course is gone never appear; the inner joins
    mirror the cascade on both foreign keys.
    """

    stmt = (
        select(
            Mark,
            Student.name.label("student_name"),
            Student.student_id.label("student_code"),
            Course.course_name,
            Course.course_code,
        )
        .join(Student, Mark.student_id == Student.id)
        .join(Course, Mark.course_id == Course.id)
        .order_by(Mark.created_at.desc(), Mark.id.desc())
    )
    with translate_store_errors():
        return session.execute(stmt).all()


def list_marks_by_student(session: Session, student_pk: int) -> Sequence[tuple]:
    """Return ``(mark, course_name, course_code, credits)`` rows for one student."""

    stmt = (
        select(Mark, Course.course_name, Course.course_code, Course.credits)
        .join(Course, Mark.course_id == Course.id)
        .where(Mark.student_id == student_pk)
    )
    with translate_store_errors():
        return session.execute(stmt).all()


def create_mark(
    session: Session,
    *,
    student_id: Optional[int],
    course_id: Optional[int],
    marks_obtained: Optional[float],
    semester: Optional[str],
    total_marks: Optional[float] = None,
    academic_year: Optional[str] = None,
    year_start_month: int = 7,
) -> int:
    """Record a mark and return its identity.

    ``total_marks`` defaults to 100 and ``academic_year`` to the current
    academic year so the (student, course, semester, academic_year) key is
    always complete.
    """

    mark = Mark(
        student_id=student_id,
        course_id=course_id,
        marks_obtained=marks_obtained,
        semester=semester,
        total_marks=total_marks or DEFAULT_TOTAL_MARKS,
        academic_year=academic_year or academic_year_label(start_month=year_start_month),
    )
    with translate_store_errors():
        session.add(mark)
        session.flush()
    logger.info("mark id=%s recorded for student=%s course=%s", mark.id, student_id, course_id)
    return mark.id


def update_mark(
    session: Session,
    mark_pk: int,
    *,
    student_id: Optional[int],
    course_id: Optional[int],
    marks_obtained: Optional[float],
    semester: Optional[str],
    total_marks: Optional[float] = None,
    academic_year: Optional[str] = None,
) -> int:
    """Replace a mark; return the affected row count.

    ``total_marks`` falls back to 100; an absent ``academic_year`` leaves the
    stored one unchanged.
    """

    values = {
        "student_id": student_id,
        "course_id": course_id,
        "marks_obtained": marks_obtained,
        "total_marks": total_marks or DEFAULT_TOTAL_MARKS,
        "semester": semester,
    }
    if academic_year:
        values["academic_year"] = academic_year
    stmt = update(Mark).where(Mark.id == mark_pk).values(**values)
    with translate_store_errors():
        affected = session.execute(stmt).rowcount
    if affected == 0:
        logger.warning("update matched no mark with id=%s", mark_pk)
    return affected


def delete_mark(session: Session, mark_pk: int) -> int:
    stmt = delete(Mark).where(Mark.id == mark_pk)
    with translate_store_errors():
        affected = session.execute(stmt).rowcount
    if affected == 0:
        logger.warning("delete matched no mark with id=%s", mark_pk)
    return affected
