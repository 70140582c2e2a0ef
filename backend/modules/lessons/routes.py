"""
Lesson API endpoints.

Public listing and detail are anonymous; writes require a principal
and are gated by the access policy.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_lesson_service
from api.middleware.auth import get_current_principal
from modules.policy import Principal

from .interfaces import ILessonService
from .models import (
    CreateLessonRequest,
    Lesson,
    LessonListResponse,
    LessonQuery,
    LessonSort,
    UpdateLessonRequest,
)

router = APIRouter()


@router.post("/lessons", response_model=Lesson, status_code=201)
async def create_lesson(
    request: CreateLessonRequest,
    principal: Principal = Depends(get_current_principal),
    service: ILessonService = Depends(get_lesson_service),
) -> Lesson:
    """
    Create a lesson owned by the caller.

    Premium access level requires a premium or admin role.
    """
    return await service.create_lesson(principal, request)


@router.get("/lessons", response_model=LessonListResponse)
async def list_lessons(
    page: int = Query(default=0, ge=0, description="Page number (0-indexed)"),
    size: int = Query(default=8, ge=1, le=100, description="Items per page"),
    search: Optional[str] = Query(default=None, description="Title contains (case-insensitive)"),
    category: Optional[str] = Query(default=None),
    emotional_tone: Optional[str] = Query(default=None, alias="emotionalTone"),
    sort: LessonSort = Query(default=LessonSort.NEWEST),
    service: ILessonService = Depends(get_lesson_service),
) -> LessonListResponse:
    """List public lessons, with the total match count for paging."""
    query = LessonQuery(
        page=page,
        size=size,
        search=search or None,
        category=category or None,
        emotional_tone=emotional_tone or None,
        sort=sort,
    )
    return await service.list_lessons(query)


@router.get("/lessons/{lesson_id}", response_model=Lesson)
async def get_lesson(
    lesson_id: str,
    service: ILessonService = Depends(get_lesson_service),
) -> Lesson:
    """Get a single lesson."""
    return await service.get_lesson(lesson_id)


@router.patch("/lessons/{lesson_id}", response_model=Lesson)
async def update_lesson(
    lesson_id: str,
    request: UpdateLessonRequest,
    principal: Principal = Depends(get_current_principal),
    service: ILessonService = Depends(get_lesson_service),
) -> Lesson:
    """Update a lesson. Creator or admin only."""
    return await service.update_lesson(principal, lesson_id, request)


@router.delete("/lessons/{lesson_id}", status_code=204)
async def delete_lesson(
    lesson_id: str,
    principal: Principal = Depends(get_current_principal),
    service: ILessonService = Depends(get_lesson_service),
) -> None:
    """Delete a lesson. Creator or admin only."""
    await service.delete_lesson(principal, lesson_id)


@router.get("/my-lessons", response_model=list[Lesson])
async def list_my_lessons(
    principal: Principal = Depends(get_current_principal),
    service: ILessonService = Depends(get_lesson_service),
) -> list[Lesson]:
    """Lessons created by the caller, newest first."""
    return await service.list_my_lessons(principal)
