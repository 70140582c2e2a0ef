"""Tests for CommentRepository."""

from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from modules.comments.repository import CommentRepository


@pytest.fixture
def mock_db():
    return MagicMock()


class TestCommentRepository:
    def test_missing_lesson_returns_none(self, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "violates foreign key constraint", "code": "23503", "hint": None, "details": None}
        )
        repo = CommentRepository(mock_db)
        assert repo.create("missing", "a@example.com", None, "Hi") is None

    def test_list_orders_newest_first(self, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.order.return_value
        chain.execute.return_value.data = [
            {
                "id": "c-1",
                "lesson_id": "lesson-1",
                "author_email": "a@example.com",
                "author_name": "A",
                "body": "Hi",
                "created_at": "2024-01-01T00:00:00+00:00",
            }
        ]
        repo = CommentRepository(mock_db)

        comments = repo.list_for_lesson("lesson-1")

        assert comments[0].author_name == "A"
        mock_db.table.return_value.select.return_value.eq.return_value.order.assert_called_once_with(
            "created_at", desc=True
        )
