"""
Favorite repository for document store access.

The `favorites` table carries UNIQUE(user_email, lesson_id) and
references `lessons(id)` with ON DELETE CASCADE.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from modules.lessons.repository import lesson_from_row
from shared.repository import BaseRepository
from .models import Favorite


class FavoriteRepository(BaseRepository[Favorite]):
    """Repository for favorites."""

    table_name = "favorites"

    def find(self, user_email: str, lesson_id: str) -> Optional[Favorite]:
        """Get the favorite for a (user, lesson) pair, if any."""
        try:
            result = (
                self._table()
                .select("*")
                .eq("user_email", user_email)
                .eq("lesson_id", lesson_id)
                .limit(1)
                .execute()
            )
        except APIError as e:
            if self._is_malformed_id(e):
                return None
            raise
        row = self._first(result.data)
        return self._map_to_favorite(row) if row else None

    def get_by_id(self, favorite_id: str) -> Optional[Favorite]:
        """Get a favorite by ID, or None if not found."""
        try:
            result = self._table().select("*").eq("id", favorite_id).limit(1).execute()
        except APIError as e:
            if self._is_malformed_id(e):
                return None
            raise
        row = self._first(result.data)
        return self._map_to_favorite(row) if row else None

    def create(self, user_email: str, lesson_id: str) -> tuple[Optional[Favorite], bool]:
        """
        Insert a favorite unless the pair already exists.

        Returns:
            Tuple of (favorite, created). favorite is None when the
            lesson does not exist.
        """
        data = {
            "user_email": user_email,
            "lesson_id": lesson_id,
            "created_at": self._now(),
        }
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if self._is_unique_violation(e):
                # Concurrent insert of the same pair
                return self.find(user_email, lesson_id), False
            if self._is_missing_reference(e) or self._is_malformed_id(e):
                return None, False
            raise
        return self._map_to_favorite(result.data[0]), True

    def list_for_user(self, user_email: str) -> list[Favorite]:
        """A user's favorites with the lesson embedded, newest first."""
        result = (
            self._table()
            .select("*, lessons(*)")
            .eq("user_email", user_email)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_favorite(row) for row in result.data]

    def delete(self, favorite_id: str) -> bool:
        """Delete a favorite. True if a row was deleted."""
        result = self._table().delete().eq("id", favorite_id).execute()
        return bool(result.data)

    def _map_to_favorite(self, data: dict[str, Any]) -> Favorite:
        embedded = data.get("lessons")
        return Favorite(
            id=str(data["id"]),
            user_email=data["user_email"],
            lesson_id=str(data["lesson_id"]),
            created_at=data["created_at"],
            lesson=lesson_from_row(embedded) if embedded else None,
        )
