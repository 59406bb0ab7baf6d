"""Student directory operations."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from ..models import Student
from .errors import translate_store_errors

logger = logging.getLogger(__name__)


def list_students(session: Session) -> Sequence[Student]:
    """Return every student, newest first."""

    stmt = select(Student).order_by(Student.created_at.desc(), Student.id.desc())
    with translate_store_errors():
        return session.execute(stmt).scalars().all()


def create_student(
    session: Session,
    *,
    student_id: Optional[str],
    name: Optional[str],
    email: Optional[str],
    phone: Optional[str] = None,
    date_of_birth: Optional[date] = None,
    address: Optional[str] = None,
) -> int:
    """Insert a student and return its assigned identity."""

    student = Student(
        student_id=student_id,
        name=name,
        email=email,
        phone=phone,
        date_of_birth=date_of_birth,
        address=address,
    )
    with translate_store_errors():
        session.add(student)
        session.flush()
    logger.info("student %s created as id=%s", student_id, student.id)
    return student.id


def update_student(
    session: Session,
    student_pk: int,
    *,
    student_id: Optional[str],
    name: Optional[str],
    email: Optional[str],
    phone: Optional[str] = None,
    date_of_birth: Optional[date] = None,
    address: Optional[str] = None,
) -> int:
    """Replace every mutable field of a student; return the affected row count."""

    stmt = (
        update(Student)
        .where(Student.id == student_pk)
        .values(
            student_id=student_id,
            name=name,
            email=email,
            phone=phone,
            date_of_birth=date_of_birth,
            address=address,
        )
    )
    with translate_store_errors():
        affected = session.execute(stmt).rowcount
    if affected == 0:
        logger.warning("update matched no student with id=%s", student_pk)
    return affected


def delete_student(session: Session, student_pk: int) -> int:
    """Delete a student, cascading to its marks; return the affected row count."""

    stmt = delete(Student).where(Student.id == student_pk)
    with translate_store_errors():
        affected = session.execute(stmt).rowcount
    if affected == 0:
        logger.warning("delete matched no student with id=%s", student_pk)
    else:
        logger.info("student id=%s deleted", student_pk)
    return affected
