"""
Users module interface.

The billing module depends on IUserService to grant entitlements
without knowing how users are stored.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.policy.models import Principal

from .models import (
    UpdateRoleRequest,
    UpsertUserRequest,
    UpsertUserResponse,
    User,
    UserListResponse,
    UserRoleResponse,
)


@runtime_checkable
class IUserService(Protocol):
    """Interface for principal records."""

    async def upsert_on_login(self, request: UpsertUserRequest) -> UpsertUserResponse:
        """Create the user on first login, refresh last-seen otherwise."""
        ...

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a stored user by email."""
        ...

    async def resolve_principal(self, email: str) -> Principal:
        """
        Build the policy principal for a verified email.

        A verified email with no stored record acts with role `user`.
        """
        ...

    async def get_role(self, email: str) -> UserRoleResponse:
        """
        Get the caller's role and entitlement.

        Raises:
            UserNotFoundError: If no record exists for the email
        """
        ...

    async def list_users(
        self,
        principal: Principal,
        search: Optional[str] = None,
    ) -> UserListResponse:
        """List users with lesson counts (admin only)."""
        ...

    async def set_role(
        self,
        principal: Principal,
        user_id: str,
        request: UpdateRoleRequest,
    ) -> User:
        """Change a user's role (admin only)."""
        ...

    async def grant_premium(self, email: str) -> Optional[User]:
        """Set the premium entitlement flag; None if no such user."""
        ...
