"""Tests for lesson API endpoints."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_lesson_service, get_user_service
from modules.lessons.models import AccessLevel
from modules.lessons.service import LessonService
from modules.users.models import Role
from modules.users.service import UserService

from tests.conftest import create_test_token, make_lesson
from tests.fakes import FakeLessonRepository, FakeUserRepository


@pytest.fixture
def users():
    repo = FakeUserRepository()
    repo.add("creator@example.com", role=Role.USER)
    repo.add("premium@example.com", role=Role.PREMIUM)
    repo.add("subscriber@example.com", role=Role.USER, is_premium=True)
    return repo


@pytest.fixture
def lessons():
    return FakeLessonRepository([make_lesson()])


@pytest.fixture
def client(auth_service, users, lessons):
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_user_service] = lambda: UserService(users)
    app.dependency_overrides[get_lesson_service] = lambda: LessonService(lessons)
    return TestClient(app)


def bearer(email: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_test_token(email=email)}"}


class TestCreateLesson:
    """Tests for POST /lessons"""

    def test_requires_token(self, client):
        response = client.post("/lessons", json={"title": "Anonymous"})
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.post(
            "/lessons",
            json={"title": "Forged"},
            headers={"Authorization": "Bearer forged.token.value"},
        )
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_creates_lesson(self, client):
        response = client.post(
            "/lessons",
            json={"title": "On patience", "emotionalTone": "calm"},
            headers=bearer("creator@example.com"),
        )
        assert response.status_code == 201
        data = response.json()
        assert data["creatorEmail"] == "creator@example.com"
        assert data["emotionalTone"] == "calm"
        assert data["accessLevel"] == "free"

    def test_premium_creates_premium_lesson(self, client):
        response = client.post(
            "/lessons",
            json={"title": "Paid", "accessLevel": "premium"},
            headers=bearer("premium@example.com"),
        )
        assert response.status_code == 201
        assert response.json()["accessLevel"] == "premium"

    def test_plan_subscriber_cannot_create_premium(self, client):
        response = client.post(
            "/lessons",
            json={"title": "Paid", "accessLevel": "premium"},
            headers=bearer("subscriber@example.com"),
        )
        assert response.status_code == 403


class TestListLessons:
    """Tests for GET /lessons"""

    def test_list_with_filters(self, client):
        response = client.get("/lessons?search=grief&category=loss&page=0&size=8")
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert len(data["lessons"]) == 1

    def test_rejects_oversized_page(self, client):
        response = client.get("/lessons?size=500")
        assert response.status_code == 422

    def test_rejects_unknown_sort(self, client):
        response = client.get("/lessons?sort=random")
        assert response.status_code == 422


class TestGetLesson:
    """Tests for GET /lessons/{lesson_id}"""

    def test_found(self, client):
        response = client.get("/lessons/lesson-1")
        assert response.status_code == 200
        assert response.json()["title"] == "Letting go of grief"

    def test_not_found(self, client):
        response = client.get("/lessons/missing")
        assert response.status_code == 404
        assert response.json()["error"] == "LESSON_NOT_FOUND"


class TestUpdateLesson:
    """Tests for PATCH /lessons/{lesson_id}"""

    def test_user_creator_cannot_set_premium(self, client, lessons):
        response = client.patch(
            "/lessons/lesson-1",
            json={"accessLevel": "premium"},
            headers=bearer("creator@example.com"),
        )
        assert response.status_code == 403
        assert response.json()["error"] == "ACCESS_DENIED"
        assert lessons.lessons["lesson-1"].access_level == AccessLevel.FREE

    def test_non_creator_forbidden(self, client):
        response = client.patch(
            "/lessons/lesson-1",
            json={"title": "Mine now"},
            headers=bearer("premium@example.com"),
        )
        assert response.status_code == 403

    def test_creator_updates(self, client):
        response = client.patch(
            "/lessons/lesson-1",
            json={"title": "Renamed"},
            headers=bearer("creator@example.com"),
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Renamed"


class TestDeleteLesson:
    """Tests for DELETE /lessons/{lesson_id}"""

    def test_creator_deletes(self, client, lessons):
        response = client.delete("/lessons/lesson-1", headers=bearer("creator@example.com"))
        assert response.status_code == 204
        assert "lesson-1" not in lessons.lessons

    def test_missing_lesson(self, client):
        response = client.delete("/lessons/missing", headers=bearer("creator@example.com"))
        assert response.status_code == 404


class TestMyLessons:
    """Tests for GET /my-lessons"""

    def test_lists_callers_lessons(self, client):
        response = client.get("/my-lessons", headers=bearer("creator@example.com"))
        assert response.status_code == 200
        assert [l["id"] for l in response.json()] == ["lesson-1"]
