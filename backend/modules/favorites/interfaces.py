"""
Favorites module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.policy.models import Principal

from .models import CreateFavoriteRequest, Favorite, FavoriteResult


@runtime_checkable
class IFavoriteService(Protocol):
    """Interface for saved lessons."""

    async def add_favorite(
        self,
        principal: Optional[Principal],
        request: CreateFavoriteRequest,
    ) -> FavoriteResult:
        """
        Save a lesson for a user.

        Idempotent per (user_email, lesson_id): a repeat returns the
        existing favorite with created=False. A signed-in caller may
        only save for their own email.

        Raises:
            AccessDeniedError: If the principal does not own user_email
            LessonNotFoundError: If the lesson does not exist
        """
        ...

    async def list_favorites(self, principal: Principal, email: str) -> list[Favorite]:
        """The caller's favorites with lessons embedded. Self only."""
        ...

    async def remove_favorite(self, principal: Principal, favorite_id: str) -> None:
        """
        Delete a favorite. Owner only.

        Raises:
            FavoriteNotFoundError: If the favorite does not exist
            AccessDeniedError: If the principal does not own it
        """
        ...
