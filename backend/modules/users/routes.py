"""
User API endpoints.

Login upsert, the caller's role, and admin user management.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_user_service
from api.middleware.auth import get_current_user, get_current_principal
from modules.policy import Principal
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import (
    UpdateRoleRequest,
    UpsertUserRequest,
    UpsertUserResponse,
    User,
    UserListResponse,
    UserRoleResponse,
)

router = APIRouter()


@router.post("/users", response_model=UpsertUserResponse)
async def upsert_user(
    request: UpsertUserRequest,
    service: IUserService = Depends(get_user_service),
) -> UpsertUserResponse:
    """
    Record a login.

    Creates the user on first sign-in; afterwards refreshes last-seen.
    """
    return await service.upsert_on_login(request)


@router.get("/user/role", response_model=UserRoleResponse)
async def get_my_role(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserRoleResponse:
    """Get the caller's role and premium entitlement."""
    return await service.get_role(user.email)


@router.get("/users", response_model=UserListResponse)
async def list_users(
    search: Optional[str] = Query(default=None, description="Name or email substring"),
    principal: Principal = Depends(get_current_principal),
    service: IUserService = Depends(get_user_service),
) -> UserListResponse:
    """List users with their lesson counts. Admin only."""
    return await service.list_users(principal, search)


@router.patch("/users/{user_id}/role", response_model=User)
async def set_user_role(
    user_id: str,
    request: UpdateRoleRequest,
    principal: Principal = Depends(get_current_principal),
    service: IUserService = Depends(get_user_service),
) -> User:
    """Change a user's role. Admin only."""
    return await service.set_role(principal, user_id, request)
