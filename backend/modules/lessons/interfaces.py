"""
Lessons module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.policy.models import Principal

from .models import (
    CreateLessonRequest,
    Lesson,
    LessonListResponse,
    LessonQuery,
    UpdateLessonRequest,
)


@runtime_checkable
class ILessonService(Protocol):
    """Interface for lesson operations."""

    async def create_lesson(
        self,
        principal: Principal,
        request: CreateLessonRequest,
    ) -> Lesson:
        """
        Create a lesson owned by the principal.

        Raises:
            AccessDeniedError: If a premium lesson is requested without
                a premium or admin role
        """
        ...

    async def list_lessons(self, query: LessonQuery) -> LessonListResponse:
        """List public lessons with search, filters, sort and paging."""
        ...

    async def get_lesson(self, lesson_id: str) -> Lesson:
        """
        Get a lesson.

        Raises:
            LessonNotFoundError: If the lesson doesn't exist
        """
        ...

    async def find_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """Get a lesson, or None if it doesn't exist."""
        ...

    async def list_my_lessons(self, principal: Principal) -> list[Lesson]:
        """Lessons created by the principal."""
        ...

    async def update_lesson(
        self,
        principal: Principal,
        lesson_id: str,
        request: UpdateLessonRequest,
    ) -> Lesson:
        """
        Update a lesson.

        Raises:
            LessonNotFoundError: If the lesson doesn't exist
            AccessDeniedError: If the principal may not make this change
        """
        ...

    async def delete_lesson(self, principal: Principal, lesson_id: str) -> None:
        """
        Delete a lesson.

        Raises:
            LessonNotFoundError: If the lesson doesn't exist
            AccessDeniedError: If the principal is neither creator nor admin
        """
        ...
