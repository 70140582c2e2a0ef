"""Tests for report API endpoints."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_report_service, get_user_service
from modules.reports.service import ReportService
from modules.users.models import Role
from modules.users.service import UserService

from tests.conftest import create_test_token, make_lesson
from tests.fakes import FakeLessonRepository, FakeReportRepository, FakeUserRepository


@pytest.fixture
def reports():
    return FakeReportRepository(FakeLessonRepository([make_lesson()]))


@pytest.fixture
def client(auth_service, reports):
    users = FakeUserRepository()
    users.add("admin@example.com", role=Role.ADMIN)
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_user_service] = lambda: UserService(users)
    app.dependency_overrides[get_report_service] = lambda: ReportService(reports)
    return TestClient(app)


def bearer(email: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_test_token(email=email)}"}


class TestReports:
    def test_file_report_anonymously(self, client):
        response = client.post(
            "/lessonsReports",
            json={"lessonId": "lesson-1", "reporterEmail": "r@example.com", "reason": "Spam"},
        )
        assert response.status_code == 201
        assert response.json()["reason"] == "Spam"

    def test_list_requires_token(self, client):
        assert client.get("/lessonsReports").status_code == 401

    def test_list_requires_admin(self, client):
        response = client.get("/lessonsReports", headers=bearer("test@example.com"))
        assert response.status_code == 403

    def test_admin_lists_and_deletes(self, client, reports):
        created = client.post(
            "/lessonsReports",
            json={"lessonId": "lesson-1", "reporterEmail": "r@example.com", "reason": "Spam"},
        ).json()

        listed = client.get("/lessonsReports", headers=bearer("admin@example.com"))
        assert listed.status_code == 200
        assert listed.json()[0]["lessonTitle"] == "Letting go of grief"

        deleted = client.delete(f"/lessonsReports/{created['id']}", headers=bearer("admin@example.com"))
        assert deleted.status_code == 204
        assert reports.reports == {}
