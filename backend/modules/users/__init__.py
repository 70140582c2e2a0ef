"""
Users module.

Stores principals: role, premium entitlement and login timestamps.

Public API:
- IUserService (modules.users.interfaces): Interface for user records
- User, Role: Stored principal models
- UserNotFoundError
"""

from .models import (
    Role,
    User,
    UserWithLessonCount,
    UpsertUserRequest,
    UpsertUserResponse,
    UserRoleResponse,
    UpdateRoleRequest,
    UserListResponse,
)
from .exceptions import UserNotFoundError

__all__ = [
    "Role",
    "User",
    "UserWithLessonCount",
    "UpsertUserRequest",
    "UpsertUserResponse",
    "UserRoleResponse",
    "UpdateRoleRequest",
    "UserListResponse",
    "UserNotFoundError",
]
