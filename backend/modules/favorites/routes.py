"""
Favorite API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_favorite_service
from api.middleware.auth import get_current_principal, get_optional_principal
from modules.policy import Principal

from .interfaces import IFavoriteService
from .models import CreateFavoriteRequest, Favorite, FavoriteResult

router = APIRouter()


@router.post("/favorites", response_model=FavoriteResult)
async def add_favorite(
    request: CreateFavoriteRequest,
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: IFavoriteService = Depends(get_favorite_service),
) -> FavoriteResult:
    """
    Save a lesson.

    Repeating the same (userEmail, lessonId) pair returns the existing
    favorite with created=false.
    """
    return await service.add_favorite(principal, request)


@router.get("/favorites/{email}", response_model=list[Favorite])
async def list_favorites(
    email: str,
    principal: Principal = Depends(get_current_principal),
    service: IFavoriteService = Depends(get_favorite_service),
) -> list[Favorite]:
    """List the caller's favorites. The email must be the caller's own."""
    return await service.list_favorites(principal, email)


@router.delete("/favorites/{favorite_id}", status_code=204)
async def remove_favorite(
    favorite_id: str,
    principal: Principal = Depends(get_current_principal),
    service: IFavoriteService = Depends(get_favorite_service),
) -> None:
    """Remove a favorite. Owner only."""
    await service.remove_favorite(principal, favorite_id)
