"""
Lessons module.

Lesson CRUD plus the public search/filter/paginate listing.

Public API:
- ILessonService (modules.lessons.interfaces): Interface for lesson operations
- Lesson, Visibility, AccessLevel: Lesson models
- LessonNotFoundError
"""

from .models import (
    Visibility,
    AccessLevel,
    LessonSort,
    Lesson,
    CreateLessonRequest,
    UpdateLessonRequest,
    LessonQuery,
    LessonListResponse,
)
from .exceptions import LessonNotFoundError

__all__ = [
    "Visibility",
    "AccessLevel",
    "LessonSort",
    "Lesson",
    "CreateLessonRequest",
    "UpdateLessonRequest",
    "LessonQuery",
    "LessonListResponse",
    "LessonNotFoundError",
]
