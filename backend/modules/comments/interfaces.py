"""
Comments module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.policy.models import Principal

from .models import Comment, CreateCommentRequest


@runtime_checkable
class ICommentService(Protocol):
    """Interface for lesson comments."""

    async def add_comment(
        self,
        principal: Optional[Principal],
        request: CreateCommentRequest,
    ) -> Comment:
        """
        Append a comment to a lesson.

        A signed-in caller is recorded as the author; anonymous callers
        must supply an author email.

        Raises:
            LessonNotFoundError: If the lesson does not exist
            ValidationError: If no author can be determined
        """
        ...

    async def list_comments(self, lesson_id: str) -> list[Comment]:
        """Comments for a lesson, newest first."""
        ...
