"""Shared fixtures: an in-memory SQLite store behind the real application."""

import pytest
from fastapi.testclient import TestClient

from gradebook.core.config import Settings
from gradebook.core.database import Database
from gradebook.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", log_level="WARNING")


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session(settings):
    database = Database(settings)
    database.create_all()
    db = database.session()
    try:
        yield db
    finally:
        db.close()
        database.dispose()


@pytest.fixture
def make_student(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "student_id": f"S{1000 + counter['n']}",
            "name": f"Student {counter['n']}",
            "email": f"student{counter['n']}@example.edu",
        }
        payload.update(overrides)
        response = client.post("/api/students", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["id"]

    return _make


@pytest.fixture
def make_course(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "course_code": f"CS{100 + counter['n']}",
            "course_name": f"Course {counter['n']}",
            "credits": 3,
        }
        payload.update(overrides)
        response = client.post("/api/courses", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["id"]

    return _make
