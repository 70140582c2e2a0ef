"""
Comment API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_comment_service
from api.middleware.auth import get_optional_principal
from modules.policy import Principal

from .interfaces import ICommentService
from .models import Comment, CreateCommentRequest

router = APIRouter()


@router.post("/comments", response_model=Comment, status_code=201)
async def add_comment(
    request: CreateCommentRequest,
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: ICommentService = Depends(get_comment_service),
) -> Comment:
    """Add a comment to a lesson."""
    return await service.add_comment(principal, request)


@router.get("/comments/{lesson_id}", response_model=list[Comment])
async def list_comments(
    lesson_id: str,
    service: ICommentService = Depends(get_comment_service),
) -> list[Comment]:
    """List a lesson's comments, newest first."""
    return await service.list_comments(lesson_id)
