"""
Lesson repository for document store access.

Encapsulates Supabase queries and data mapping for the `lessons` table.
Filtering, ordering and paging are pushed down to PostgREST.
"""

from decimal import Decimal
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import (
    AccessLevel,
    CreateLessonRequest,
    Lesson,
    LessonListResponse,
    LessonQuery,
    LessonSort,
    Visibility,
)

# column, descending
_SORT_ORDER: dict[LessonSort, tuple[str, bool]] = {
    LessonSort.NEWEST: ("created_at", True),
    LessonSort.OLDEST: ("created_at", False),
    LessonSort.TITLE: ("title", False),
}


class LessonRepository(BaseRepository[Lesson]):
    """
    Repository for lesson data access.

    Does NOT perform authorization checks; the service consults the
    access policy before calling update or delete.
    """

    table_name = "lessons"

    def create(self, creator_email: str, request: CreateLessonRequest) -> Lesson:
        """Insert a lesson owned by creator_email."""
        now = self._now()
        data = self._to_row(request.model_dump())
        data.update(
            {
                "creator_email": creator_email,
                "created_at": now,
                "updated_at": now,
            }
        )
        result = self._table().insert(data).execute()
        return self._map_to_lesson(result.data[0])

    def get_by_id(self, lesson_id: str) -> Optional[Lesson]:
        """Get a lesson by ID, or None if not found."""
        try:
            result = self._table().select("*").eq("id", lesson_id).limit(1).execute()
        except APIError as e:
            if self._is_malformed_id(e):
                return None
            raise
        row = self._first(result.data)
        return self._map_to_lesson(row) if row else None

    def list_public(self, query: LessonQuery) -> LessonListResponse:
        """
        List public lessons matching the query.

        Returns the requested page plus the total number of matches.
        """
        builder = (
            self._table()
            .select("*", count="exact")
            .eq("visibility", Visibility.PUBLIC.value)
        )
        if query.search:
            builder = builder.ilike("title", f"%{query.search}%")
        if query.category:
            builder = builder.eq("category", query.category)
        if query.emotional_tone:
            builder = builder.eq("emotional_tone", query.emotional_tone)

        column, desc = _SORT_ORDER[query.sort]
        offset = query.page * query.size
        result = (
            builder.order(column, desc=desc)
            .range(offset, offset + query.size - 1)
            .execute()
        )

        return LessonListResponse(
            lessons=[self._map_to_lesson(row) for row in result.data],
            count=result.count or 0,
        )

    def list_by_creator(self, creator_email: str) -> list[Lesson]:
        """All lessons created by an email, newest first."""
        result = (
            self._table()
            .select("*")
            .eq("creator_email", creator_email)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_lesson(row) for row in result.data]

    def update(self, lesson_id: str, changes: dict[str, Any]) -> Optional[Lesson]:
        """Apply a partial update. None if the lesson no longer exists."""
        data = self._to_row(changes)
        data["updated_at"] = self._now()
        result = self._table().update(data).eq("id", lesson_id).execute()
        row = self._first(result.data)
        return self._map_to_lesson(row) if row else None

    def delete(self, lesson_id: str) -> bool:
        """
        Delete a lesson.

        Returns:
            True if a row was deleted.

        Note: comments, favorites and reports are removed via CASCADE.
        """
        result = self._table().delete().eq("id", lesson_id).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_row(fields: dict[str, Any]) -> dict[str, Any]:
        """Convert model values to JSON-safe column values."""
        row: dict[str, Any] = {}
        for key, value in fields.items():
            if isinstance(value, (Visibility, AccessLevel)):
                value = value.value
            elif isinstance(value, Decimal):
                value = float(value)
            row[key] = value
        return row

    def _map_to_lesson(self, data: dict[str, Any]) -> Lesson:
        """Map database row to Lesson model."""
        return lesson_from_row(data)


def lesson_from_row(data: dict[str, Any]) -> Lesson:
    """Map a lessons row (or an embedded lessons object) to Lesson."""
    price = data.get("price")
    return Lesson(
        id=str(data["id"]),
        creator_email=data["creator_email"],
        creator_name=data.get("creator_name"),
        creator_photo=data.get("creator_photo"),
        title=data["title"],
        description=data.get("description") or "",
        category=data.get("category"),
        emotional_tone=data.get("emotional_tone"),
        visibility=Visibility(data.get("visibility") or Visibility.PUBLIC.value),
        access_level=AccessLevel(data.get("access_level") or AccessLevel.FREE.value),
        image_url=data.get("image_url"),
        price=Decimal(str(price)) if price is not None else None,
        created_at=data["created_at"],
        updated_at=data["updated_at"],
    )
