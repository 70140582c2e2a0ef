"""Tests for the favorites service."""

import pytest

from modules.favorites.exceptions import FavoriteNotFoundError
from modules.favorites.models import CreateFavoriteRequest
from modules.favorites.service import FavoriteService
from modules.lessons.exceptions import LessonNotFoundError
from modules.policy import AccessDeniedError, Principal

from tests.conftest import make_lesson
from tests.fakes import FakeFavoriteRepository, FakeLessonRepository

OWNER = Principal(email="test@example.com")
OTHER = Principal(email="other@example.com")


class TestFavoriteService:
    @pytest.fixture
    def repo(self):
        return FakeFavoriteRepository(FakeLessonRepository([make_lesson()]))

    @pytest.fixture
    def service(self, repo):
        return FavoriteService(repo)

    @pytest.fixture
    def request_body(self):
        return CreateFavoriteRequest(user_email="test@example.com", lesson_id="lesson-1")

    @pytest.mark.asyncio
    async def test_add_favorite(self, service, request_body):
        result = await service.add_favorite(OWNER, request_body)
        assert result.created is True
        assert result.favorite.lesson_id == "lesson-1"

    @pytest.mark.asyncio
    async def test_add_is_idempotent_per_pair(self, service, repo, request_body):
        first = await service.add_favorite(OWNER, request_body)
        second = await service.add_favorite(OWNER, request_body)

        assert second.created is False
        assert second.message == "Favorite already exists"
        assert second.favorite.id == first.favorite.id
        assert len(repo.favorites) == 1

    @pytest.mark.asyncio
    async def test_anonymous_add_allowed(self, service, request_body):
        result = await service.add_favorite(None, request_body)
        assert result.created is True

    @pytest.mark.asyncio
    async def test_cannot_add_for_someone_else(self, service, repo, request_body):
        with pytest.raises(AccessDeniedError):
            await service.add_favorite(OTHER, request_body)
        assert repo.favorites == {}

    @pytest.mark.asyncio
    async def test_add_for_missing_lesson(self, service):
        with pytest.raises(LessonNotFoundError):
            await service.add_favorite(
                OWNER, CreateFavoriteRequest(user_email="test@example.com", lesson_id="missing")
            )

    @pytest.mark.asyncio
    async def test_list_own_favorites_embeds_lesson(self, service, request_body):
        await service.add_favorite(OWNER, request_body)
        favorites = await service.list_favorites(OWNER, "Test@Example.com")
        assert len(favorites) == 1
        assert favorites[0].lesson.title == "Letting go of grief"

    @pytest.mark.asyncio
    async def test_cannot_list_someone_elses(self, service):
        with pytest.raises(AccessDeniedError):
            await service.list_favorites(OTHER, "test@example.com")

    @pytest.mark.asyncio
    async def test_remove_owner_only(self, service, repo, request_body):
        result = await service.add_favorite(OWNER, request_body)

        with pytest.raises(AccessDeniedError):
            await service.remove_favorite(OTHER, result.favorite.id)
        assert result.favorite.id in repo.favorites

        await service.remove_favorite(OWNER, result.favorite.id)
        assert repo.favorites == {}

    @pytest.mark.asyncio
    async def test_remove_missing(self, service):
        with pytest.raises(FavoriteNotFoundError):
            await service.remove_favorite(OWNER, "missing")
