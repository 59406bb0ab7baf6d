"""Course catalog operations."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from ..models import Course
from .errors import translate_store_errors

logger = logging.getLogger(__name__)


def list_courses(session: Session) -> Sequence[Course]:
    """Return every course ordered by course code."""

    stmt = select(Course).order_by(Course.course_code.asc())
    with translate_store_errors():
        return session.execute(stmt).scalars().all()


def create_course(
    session: Session,
    *,
    course_code: Optional[str],
    course_name: Optional[str],
    credits: Optional[int],
    description: Optional[str] = None,
) -> int:
    course = Course(
        course_code=course_code,
        course_name=course_name,
        credits=credits,
        description=description,
    )
    with translate_store_errors():
        session.add(course)
        session.flush()
    logger.info("course %s created as id=%s", course_code, course.id)
    return course.id


def update_course(
    session: Session,
    course_pk: int,
    *,
    course_code: Optional[str],
    course_name: Optional[str],
    credits: Optional[int],
    description: Optional[str] = None,
) -> int:
    stmt = (
        update(Course)
        .where(Course.id == course_pk)
        .values(
            course_code=course_code,
            course_name=course_name,
            credits=credits,
            description=description,
        )
    )
    with translate_store_errors():
        affected = session.execute(stmt).rowcount
    if affected == 0:
        logger.warning("update matched no course with id=%s", course_pk)
    return affected


def delete_course(session: Session, course_pk: int) -> int:
    """Delete a course, cascading to marks recorded against it."""

    stmt = delete(Course).where(Course.id == course_pk)
    with translate_store_errors():
        affected = session.execute(stmt).rowcount
    if affected == 0:
        logger.warning("delete matched no course with id=%s", course_pk)
    else:
        logger.info("course id=%s deleted", course_pk)
    return affected
