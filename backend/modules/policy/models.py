"""
Access policy data models.

Operations, principals and decisions are closed types so that the
policy can be written as a total function over them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union, runtime_checkable

from modules.users.models import Role, User


class Operation(str, Enum):
    """Protected operations the API surface asks the policy about."""

    CREATE_LESSON = "create_lesson"
    UPDATE_LESSON = "update_lesson"
    DELETE_LESSON = "delete_lesson"
    SET_PREMIUM_ACCESS = "set_premium_access"
    CREATE_COMMENT = "create_comment"
    CREATE_FAVORITE = "create_favorite"
    READ_FAVORITES = "read_favorites"
    DELETE_FAVORITE = "delete_favorite"
    CREATE_REPORT = "create_report"
    LIST_REPORTS = "list_reports"
    DELETE_REPORT = "delete_report"
    LIST_USERS = "list_users"
    SET_ROLE = "set_role"


@dataclass(frozen=True)
class Principal:
    """The acting principal as the policy sees it."""

    email: str
    role: Role = Role.USER

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        # is_premium is an entitlement, not a role
        return cls(email=user.email, role=user.role)


@runtime_checkable
class OwnedResource(Protocol):
    """Anything with an owning principal (lessons, favorites)."""

    @property
    def owner_email(self) -> str: ...


@dataclass(frozen=True)
class EmailScope:
    """A resource identified only by the email it belongs to."""

    email: str

    @property
    def owner_email(self) -> str:
        return self.email


@dataclass(frozen=True)
class Allow:
    """The operation may proceed."""

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True)
class Deny:
    """The operation is refused."""

    reason: str

    @property
    def allowed(self) -> bool:
        return False


Decision = Union[Allow, Deny]
