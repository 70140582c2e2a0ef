"""
Lessons module data models.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from shared.models import ApiModel


class Visibility(str, Enum):
    """Who can see a lesson in public listings."""

    PUBLIC = "public"
    PRIVATE = "private"


class AccessLevel(str, Enum):
    """Whether a lesson's content is gated behind premium."""

    FREE = "free"
    PREMIUM = "premium"


class LessonSort(str, Enum):
    """Orderings accepted by the public lesson listing."""

    NEWEST = "newest"
    OLDEST = "oldest"
    TITLE = "title"


class Lesson(ApiModel):
    """A lesson as stored."""

    id: str = Field(..., description="Lesson ID")
    creator_email: str = Field(..., description="Email of the creating principal")
    creator_name: Optional[str] = Field(None, description="Creator display name")
    creator_photo: Optional[str] = Field(None, description="Creator avatar URL")
    title: str
    description: str = ""
    category: Optional[str] = None
    emotional_tone: Optional[str] = None
    visibility: Visibility = Visibility.PUBLIC
    access_level: AccessLevel = AccessLevel.FREE
    image_url: Optional[str] = None
    price: Optional[Decimal] = Field(None, description="Purchase price, if sold individually")
    created_at: datetime
    updated_at: datetime

    @property
    def owner_email(self) -> str:
        return self.creator_email


class CreateLessonRequest(ApiModel):
    """Payload for creating a lesson."""

    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(default="", max_length=20000)
    category: Optional[str] = None
    emotional_tone: Optional[str] = None
    visibility: Visibility = Visibility.PUBLIC
    access_level: AccessLevel = AccessLevel.FREE
    image_url: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    creator_name: Optional[str] = None
    creator_photo: Optional[str] = None


class UpdateLessonRequest(ApiModel):
    """Partial update; only fields that are set are written."""

    title: Optional[str] = Field(None, min_length=1, max_length=300)
    description: Optional[str] = Field(None, max_length=20000)
    category: Optional[str] = None
    emotional_tone: Optional[str] = None
    visibility: Optional[Visibility] = None
    access_level: Optional[AccessLevel] = None
    image_url: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)


class LessonQuery(ApiModel):
    """Filters for the public lesson listing."""

    page: int = Field(default=0, ge=0, description="Page number (0-indexed)")
    size: int = Field(default=8, ge=1, le=100, description="Items per page")
    search: Optional[str] = Field(None, description="Case-insensitive title match")
    category: Optional[str] = None
    emotional_tone: Optional[str] = None
    sort: LessonSort = LessonSort.NEWEST


class LessonListResponse(ApiModel):
    """A page of lessons plus the total matching count."""

    lessons: list[Lesson]
    count: int
