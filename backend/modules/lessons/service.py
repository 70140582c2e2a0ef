"""
Lessons service implementation.

Every write consults the access policy first; the repository itself
never checks ownership.
"""

import logging
from typing import Optional

from modules.policy import Operation, Principal, require

from .interfaces import ILessonService
from .models import (
    AccessLevel,
    CreateLessonRequest,
    Lesson,
    LessonListResponse,
    LessonQuery,
    UpdateLessonRequest,
)
from .exceptions import LessonNotFoundError
from .repository import LessonRepository

logger = logging.getLogger(__name__)


class LessonService(ILessonService):
    """Lesson operations backed by the lessons table."""

    def __init__(self, repository: LessonRepository):
        self._repo = repository

    async def create_lesson(
        self,
        principal: Principal,
        request: CreateLessonRequest,
    ) -> Lesson:
        require(Operation.CREATE_LESSON, principal)
        if request.access_level == AccessLevel.PREMIUM:
            require(Operation.SET_PREMIUM_ACCESS, principal)

        lesson = self._repo.create(principal.email, request)
        logger.info(f"Lesson {lesson.id} created by {principal.email}")
        return lesson

    async def list_lessons(self, query: LessonQuery) -> LessonListResponse:
        return self._repo.list_public(query)

    async def get_lesson(self, lesson_id: str) -> Lesson:
        lesson = self._repo.get_by_id(lesson_id)
        if lesson is None:
            raise LessonNotFoundError(lesson_id)
        return lesson

    async def find_lesson(self, lesson_id: str) -> Optional[Lesson]:
        return self._repo.get_by_id(lesson_id)

    async def list_my_lessons(self, principal: Principal) -> list[Lesson]:
        return self._repo.list_by_creator(principal.email)

    async def update_lesson(
        self,
        principal: Principal,
        lesson_id: str,
        request: UpdateLessonRequest,
    ) -> Lesson:
        lesson = await self.get_lesson(lesson_id)

        require(Operation.UPDATE_LESSON, principal, lesson)
        if request.access_level == AccessLevel.PREMIUM:
            require(Operation.SET_PREMIUM_ACCESS, principal)

        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return lesson

        updated = self._repo.update(lesson_id, changes)
        if updated is None:
            # Deleted between the read and the write
            raise LessonNotFoundError(lesson_id)
        return updated

    async def delete_lesson(self, principal: Principal, lesson_id: str) -> None:
        lesson = await self.get_lesson(lesson_id)
        require(Operation.DELETE_LESSON, principal, lesson)

        if not self._repo.delete(lesson_id):
            raise LessonNotFoundError(lesson_id)
        logger.info(f"Lesson {lesson_id} deleted by {principal.email}")
