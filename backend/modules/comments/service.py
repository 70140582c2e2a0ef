"""
Comments service implementation.
"""

import logging
from typing import Optional

from modules.lessons.exceptions import LessonNotFoundError
from modules.policy import Operation, Principal, require
from shared.exceptions import ValidationError

from .interfaces import ICommentService
from .models import Comment, CreateCommentRequest
from .repository import CommentRepository

logger = logging.getLogger(__name__)


class CommentService(ICommentService):
    """Comment operations backed by the comments table."""

    def __init__(self, repository: CommentRepository):
        self._repo = repository

    async def add_comment(
        self,
        principal: Optional[Principal],
        request: CreateCommentRequest,
    ) -> Comment:
        if principal is not None:
            require(Operation.CREATE_COMMENT, principal)
            author_email = principal.email
        elif request.author_email:
            author_email = request.author_email
        else:
            raise ValidationError(
                "authorEmail is required for anonymous comments",
                code="AUTHOR_REQUIRED",
            )

        comment = self._repo.create(
            lesson_id=request.lesson_id,
            author_email=author_email,
            author_name=request.author_name,
            body=request.body,
        )
        if comment is None:
            raise LessonNotFoundError(request.lesson_id)

        logger.debug(f"Comment {comment.id} added to lesson {request.lesson_id}")
        return comment

    async def list_comments(self, lesson_id: str) -> list[Comment]:
        return self._repo.list_for_lesson(lesson_id)
