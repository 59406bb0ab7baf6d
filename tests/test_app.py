from fastapi.testclient import TestClient

from gradebook.core.config import Settings
from gradebook.main import create_app


def test_root_banner(client):
    body = client.get("/").json()

    assert body["message"] == "Student Management API is running!"
    assert body["endpoints"] == {"students": "/api/students", "courses": "/api/courses", "marks": "/api/marks"}


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
    assert response.json()["timestamp"]


def test_unknown_route(client):
    response = client.get("/api/teachers")

    assert response.status_code == 404
    assert response.json() == {
        "error": "Route not found",
        "availableRoutes": ["/", "/api/health", "/api/students", "/api/courses", "/api/marks"],
    }


def test_unsupported_method_is_treated_as_unknown_route(client):
    response = client.patch("/api/students")

    assert response.status_code == 404
    assert response.json()["error"] == "Route not found"


def test_missing_rows_can_be_reported_as_not_found():
    app = create_app(Settings(database_url="sqlite://", report_missing_as_not_found=True, log_level="WARNING"))

    with TestClient(app) as client:
        response = client.delete("/api/courses/42")

    assert response.status_code == 404
    assert response.json() == {"error": "Course 42 not found"}


def test_unreachable_store_is_reported(tmp_path):
    missing = tmp_path / "absent" / "gradebook.db"
    settings = Settings(database_url=f"sqlite:///{missing}", create_tables_on_startup=False, log_level="WARNING")

    with TestClient(create_app(settings)) as client:
        response = client.get("/api/students")

    assert response.status_code == 500
    assert "unable to open database file" in response.json()["error"]
