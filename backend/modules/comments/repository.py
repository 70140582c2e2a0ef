"""
Comment repository for document store access.

The `comments` table references `lessons(id)` with ON DELETE CASCADE.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import Comment


class CommentRepository(BaseRepository[Comment]):
    """Repository for comments."""

    table_name = "comments"

    def create(
        self,
        lesson_id: str,
        author_email: str,
        author_name: Optional[str],
        body: str,
    ) -> Optional[Comment]:
        """
        Insert a comment.

        Returns:
            The stored comment, or None if the lesson does not exist.
        """
        data = {
            "lesson_id": lesson_id,
            "author_email": author_email,
            "author_name": author_name,
            "body": body,
            "created_at": self._now(),
        }
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if self._is_missing_reference(e) or self._is_malformed_id(e):
                return None
            raise
        return self._map_to_comment(result.data[0])

    def list_for_lesson(self, lesson_id: str) -> list[Comment]:
        """Comments for a lesson, newest first."""
        try:
            result = (
                self._table()
                .select("*")
                .eq("lesson_id", lesson_id)
                .order("created_at", desc=True)
                .execute()
            )
        except APIError as e:
            if self._is_malformed_id(e):
                return []
            raise
        return [self._map_to_comment(row) for row in result.data]

    def _map_to_comment(self, data: dict[str, Any]) -> Comment:
        return Comment(
            id=str(data["id"]),
            lesson_id=str(data["lesson_id"]),
            author_email=data["author_email"],
            author_name=data.get("author_name"),
            body=data["body"],
            created_at=data["created_at"],
        )
