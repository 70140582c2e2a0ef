"""
Lessons module exceptions.
"""

from shared.exceptions import NotFoundError


class LessonNotFoundError(NotFoundError):
    """Raised when a lesson is not found."""

    def __init__(self, lesson_id: str):
        super().__init__(
            f"Lesson not found: {lesson_id}",
            code="LESSON_NOT_FOUND",
            details={"lesson_id": lesson_id},
        )
