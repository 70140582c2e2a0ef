"""
Users service implementation.
"""

import logging
from typing import Optional

from modules.policy import Operation, Principal, require

from .interfaces import IUserService
from .models import (
    Role,
    UpdateRoleRequest,
    UpsertUserRequest,
    UpsertUserResponse,
    User,
    UserListResponse,
    UserRoleResponse,
    UserWithLessonCount,
)
from .exceptions import UserNotFoundError
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Principal records backed by the users table."""

    def __init__(self, repository: UserRepository):
        self._repo = repository

    async def upsert_on_login(self, request: UpsertUserRequest) -> UpsertUserResponse:
        user, created = self._repo.upsert_login(request)
        if created:
            logger.info(f"Created user record for {user.email}")
        return UpsertUserResponse(created=created, user=user)

    async def get_by_email(self, email: str) -> Optional[User]:
        return self._repo.get_by_email(email)

    async def resolve_principal(self, email: str) -> Principal:
        user = self._repo.get_by_email(email)
        if user is None:
            return Principal(email=email, role=Role.USER)
        return Principal.from_user(user)

    async def get_role(self, email: str) -> UserRoleResponse:
        user = self._repo.get_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return UserRoleResponse(role=user.role, is_premium=user.is_premium)

    async def list_users(
        self,
        principal: Principal,
        search: Optional[str] = None,
    ) -> UserListResponse:
        require(Operation.LIST_USERS, principal)

        users = self._repo.search(search)
        counts = self._repo.count_lessons_by_creator([u.email for u in users])
        rows = [
            UserWithLessonCount(**u.model_dump(), lesson_count=counts.get(u.email, 0))
            for u in users
        ]
        return UserListResponse(users=rows, count=len(rows))

    async def set_role(
        self,
        principal: Principal,
        user_id: str,
        request: UpdateRoleRequest,
    ) -> User:
        require(Operation.SET_ROLE, principal)

        user = self._repo.update_role(user_id, request.role, request.is_premium)
        if user is None:
            raise UserNotFoundError(user_id)
        logger.info(f"{principal.email} set role of {user.email} to {user.role.value}")
        return user

    async def grant_premium(self, email: str) -> Optional[User]:
        return self._repo.set_premium(email)
