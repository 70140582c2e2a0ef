"""
Favorites module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from modules.lessons.models import Lesson
from shared.models import ApiModel, Email


class Favorite(ApiModel):
    """A saved lesson, optionally with the lesson embedded."""

    id: str
    user_email: str
    lesson_id: str
    created_at: datetime
    lesson: Optional[Lesson] = None

    @property
    def owner_email(self) -> str:
        return self.user_email


class CreateFavoriteRequest(ApiModel):
    """Payload for saving a lesson."""

    user_email: Email
    lesson_id: str = Field(..., min_length=1)


class FavoriteResult(ApiModel):
    """Result of adding a favorite; created is False for a repeat."""

    created: bool
    message: str
    favorite: Favorite
