import pytest
from sqlalchemy.exc import OperationalError

from gradebook.models import Mark, compute_percentage
from gradebook.services import ConnectivityFailure, ConstraintViolation, course_service, mark_service, student_service
from gradebook.services.errors import translate_store_errors


def _student(session, **overrides):
    fields = {"student_id": "S1", "name": "Alex", "email": "alex@example.edu"}
    fields.update(overrides)
    student_pk = student_service.create_student(session, **fields)
    session.commit()
    return student_pk


def test_update_reports_affected_rows(session):
    student_pk = _student(session)

    assert student_service.update_student(session, student_pk, student_id="S1", name="A", email="a@example.edu") == 1
    assert student_service.update_student(session, 999, student_id="S2", name="B", email="b@example.edu") == 0


def test_delete_reports_affected_rows(session):
    student_pk = _student(session)

    assert student_service.delete_student(session, student_pk) == 1
    assert student_service.delete_student(session, student_pk) == 0


def test_duplicate_student_id_raises_constraint_violation(session):
    _student(session)

    with pytest.raises(ConstraintViolation) as excinfo:
        student_service.create_student(session, student_id="S1", name="Other", email="other@example.edu")

    assert excinfo.value.status_code == 500
    session.rollback()


def test_course_delete_cascades_in_store(session):
    student_pk = _student(session)
    course_pk = course_service.create_course(session, course_code="CS1", course_name="Intro", credits=3)
    mark_service.create_mark(session, student_id=student_pk, course_id=course_pk, marks_obtained=10, semester="Fall")
    session.commit()

    course_service.delete_course(session, course_pk)
    session.commit()

    assert mark_service.list_marks_by_student(session, student_pk) == []
    assert session.query(Mark).count() == 0


def test_connectivity_errors_are_translated():
    with pytest.raises(ConnectivityFailure) as excinfo:
        with translate_store_errors():
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    assert excinfo.value.detail == "connection refused"


def test_compute_percentage_rounds_half_up():
    assert str(compute_percentage(1, 8)) == "12.50"
    assert str(compute_percentage(1, 3)) == "33.33"
    assert str(compute_percentage(2, 3)) == "66.67"


def test_update_mark_leaves_academic_year_when_absent(session):
    student_pk = _student(session)
    course_pk = course_service.create_course(session, course_code="CS1", course_name="Intro", credits=3)
    mark_pk = mark_service.create_mark(
        session,
        student_id=student_pk,
        course_id=course_pk,
        marks_obtained=10,
        semester="Fall",
        academic_year="2023-24",
    )
    session.commit()

    affected = mark_service.update_mark(
        session, mark_pk, student_id=student_pk, course_id=course_pk, marks_obtained=20, semester="Fall"
    )
    session.commit()

    assert affected == 1
    assert session.get(Mark, mark_pk).academic_year == "2023-24"
