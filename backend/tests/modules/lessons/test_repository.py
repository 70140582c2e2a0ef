"""Tests for LessonRepository query building and mapping."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from modules.lessons.models import AccessLevel, CreateLessonRequest, LessonQuery, LessonSort
from modules.lessons.repository import LessonRepository, lesson_from_row

LESSON_ROW = {
    "id": "lesson-1",
    "creator_email": "creator@example.com",
    "creator_name": "Creator",
    "creator_photo": None,
    "title": "Letting go of grief",
    "description": "What losing someone taught me",
    "category": "loss",
    "emotional_tone": "reflective",
    "visibility": "public",
    "access_level": "premium",
    "image_url": None,
    "price": 7.5,
    "created_at": "2024-01-01T00:00:00+00:00",
    "updated_at": "2024-01-01T00:00:00+00:00",
}


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return LessonRepository(mock_db)


def _list_builder(mock_db):
    """The builder chain list_public drives: select -> eq(visibility) -> ..."""
    builder = MagicMock()
    builder.eq.return_value = builder
    builder.ilike.return_value = builder
    builder.order.return_value = builder
    builder.range.return_value = builder
    mock_db.table.return_value.select.return_value = builder
    return builder


class TestListPublic:
    def test_search_category_and_paging(self, repo, mock_db):
        builder = _list_builder(mock_db)
        builder.execute.return_value.data = [LESSON_ROW]
        builder.execute.return_value.count = 1

        response = repo.list_public(LessonQuery(search="grief", category="loss", page=0, size=8))

        assert response.count == 1
        assert response.lessons[0].id == "lesson-1"
        mock_db.table.return_value.select.assert_called_once_with("*", count="exact")
        builder.eq.assert_any_call("visibility", "public")
        builder.eq.assert_any_call("category", "loss")
        builder.ilike.assert_called_once_with("title", "%grief%")
        builder.order.assert_called_once_with("created_at", desc=True)
        builder.range.assert_called_once_with(0, 7)

    def test_sort_and_offset(self, repo, mock_db):
        builder = _list_builder(mock_db)
        builder.execute.return_value.data = []
        builder.execute.return_value.count = 0

        repo.list_public(LessonQuery(page=2, size=10, sort=LessonSort.TITLE, emotional_tone="hopeful"))

        builder.eq.assert_any_call("emotional_tone", "hopeful")
        builder.ilike.assert_not_called()
        builder.order.assert_called_once_with("title", desc=False)
        builder.range.assert_called_once_with(20, 29)

    def test_missing_count_is_zero(self, repo, mock_db):
        builder = _list_builder(mock_db)
        builder.execute.return_value.data = []
        builder.execute.return_value.count = None

        assert repo.list_public(LessonQuery()).count == 0


class TestLessonRepository:
    def test_get_by_id_malformed_id_is_none(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.side_effect = APIError(
            {"message": "invalid input syntax for type uuid", "code": "22P02", "hint": None, "details": None}
        )
        assert repo.get_by_id("not-a-uuid") is None

    def test_get_by_id_other_errors_propagate(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.side_effect = APIError(
            {"message": "boom", "code": "XX000", "hint": None, "details": None}
        )
        with pytest.raises(APIError):
            repo.get_by_id("lesson-1")

    def test_create_serializes_enums_and_decimals(self, repo, mock_db):
        table = mock_db.table.return_value
        table.insert.return_value.execute.return_value.data = [LESSON_ROW]

        repo.create(
            "creator@example.com",
            CreateLessonRequest(title="Paid", access_level=AccessLevel.PREMIUM, price=Decimal("7.50")),
        )

        row = table.insert.call_args[0][0]
        assert row["access_level"] == "premium"
        assert row["visibility"] == "public"
        assert row["price"] == 7.5
        assert row["creator_email"] == "creator@example.com"
        assert "created_at" in row and "updated_at" in row

    def test_update_sets_updated_at(self, repo, mock_db):
        table = mock_db.table.return_value
        table.update.return_value.eq.return_value.execute.return_value.data = [LESSON_ROW]

        repo.update("lesson-1", {"title": "New"})

        changes = table.update.call_args[0][0]
        assert changes["title"] == "New"
        assert "updated_at" in changes

    def test_delete_reports_whether_row_removed(self, repo, mock_db):
        chain = mock_db.table.return_value.delete.return_value.eq.return_value
        chain.execute.return_value.data = []
        assert repo.delete("missing") is False


class TestLessonFromRow:
    def test_maps_price_to_decimal(self):
        lesson = lesson_from_row(LESSON_ROW)
        assert lesson.price == Decimal("7.5")
        assert lesson.access_level == AccessLevel.PREMIUM
        assert lesson.owner_email == "creator@example.com"

    def test_null_enums_use_defaults(self):
        lesson = lesson_from_row({**LESSON_ROW, "visibility": None, "access_level": None, "price": None})
        assert lesson.visibility.value == "public"
        assert lesson.access_level == AccessLevel.FREE
        assert lesson.price is None
