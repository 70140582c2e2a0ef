"""
Favorites service implementation.
"""

import logging
from typing import Optional

from modules.lessons.exceptions import LessonNotFoundError
from modules.policy import EmailScope, Operation, Principal, require

from .interfaces import IFavoriteService
from .models import CreateFavoriteRequest, Favorite, FavoriteResult
from .exceptions import FavoriteNotFoundError
from .repository import FavoriteRepository

logger = logging.getLogger(__name__)


class FavoriteService(IFavoriteService):
    """Favorite operations backed by the favorites table."""

    def __init__(self, repository: FavoriteRepository):
        self._repo = repository

    async def add_favorite(
        self,
        principal: Optional[Principal],
        request: CreateFavoriteRequest,
    ) -> FavoriteResult:
        if principal is not None:
            require(Operation.CREATE_FAVORITE, principal, EmailScope(request.user_email))

        existing = self._repo.find(request.user_email, request.lesson_id)
        if existing is not None:
            return FavoriteResult(
                created=False,
                message="Favorite already exists",
                favorite=existing,
            )

        favorite, created = self._repo.create(request.user_email, request.lesson_id)
        if favorite is None:
            raise LessonNotFoundError(request.lesson_id)

        if created:
            logger.debug(f"Favorite {favorite.id} added for {request.user_email}")
        return FavoriteResult(
            created=created,
            message="Favorite added" if created else "Favorite already exists",
            favorite=favorite,
        )

    async def list_favorites(self, principal: Principal, email: str) -> list[Favorite]:
        require(Operation.READ_FAVORITES, principal, EmailScope(email.strip().lower()))
        return self._repo.list_for_user(principal.email)

    async def remove_favorite(self, principal: Principal, favorite_id: str) -> None:
        favorite = self._repo.get_by_id(favorite_id)
        if favorite is None:
            raise FavoriteNotFoundError(favorite_id)

        require(Operation.DELETE_FAVORITE, principal, favorite)

        if not self._repo.delete(favorite_id):
            raise FavoriteNotFoundError(favorite_id)
