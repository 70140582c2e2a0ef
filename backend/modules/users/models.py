"""
Users module data models.

A user record is the stored side of a principal: the identity verifier
proves the email, this record carries the role and entitlement.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from shared.models import ApiModel, Email


class Role(str, Enum):
    """Principal roles."""

    USER = "user"
    PREMIUM = "premium"
    ADMIN = "admin"


class User(ApiModel):
    """A stored principal."""

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="Email address (unique)")
    name: Optional[str] = Field(None, description="Display name")
    photo_url: Optional[str] = Field(None, description="Avatar URL")
    role: Role = Field(default=Role.USER, description="Principal role")
    is_premium: bool = Field(default=False, description="Premium entitlement flag")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    last_login_at: Optional[datetime] = Field(None, description="Last login time")


class UserWithLessonCount(User):
    """A user row enriched with how many lessons they created."""

    lesson_count: int = Field(default=0, description="Lessons created by this user")


class UpsertUserRequest(ApiModel):
    """Login upsert payload sent by the client after sign-in."""

    email: Email = Field(..., min_length=3, description="Email address")
    name: Optional[str] = Field(None, description="Display name")
    photo_url: Optional[str] = Field(None, description="Avatar URL")


class UpsertUserResponse(ApiModel):
    """Outcome of a login upsert."""

    created: bool = Field(..., description="Whether a new user record was created")
    user: User


class UserRoleResponse(ApiModel):
    """The caller's role and entitlement."""

    role: Role
    is_premium: bool


class UpdateRoleRequest(ApiModel):
    """Admin request to change a user's role (and optionally entitlement)."""

    role: Role
    is_premium: Optional[bool] = None


class UserListResponse(ApiModel):
    """Users matching a search, with lesson counts."""

    users: list[UserWithLessonCount]
    count: int
