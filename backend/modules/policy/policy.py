"""
Access policy.

`decide` is a pure function of (operation, principal, resource): it does
no I/O, so callers load the principal's stored role and the target
resource first and translate a Deny into a 403 via `require`.
"""

from typing import Optional

from modules.users.models import Role

from .exceptions import AccessDeniedError
from .models import Allow, Decision, Deny, Operation, OwnedResource, Principal

ALLOW = Allow()

_PREMIUM_ROLES = frozenset({Role.PREMIUM, Role.ADMIN})


def _is_admin(principal: Principal) -> bool:
    return principal.role == Role.ADMIN


def _owner_or_admin(
    principal: Principal,
    resource: Optional[OwnedResource],
    noun: str,
) -> Decision:
    if resource is None:
        return Deny(f"No {noun} given")
    if _is_admin(principal) or resource.owner_email == principal.email:
        return ALLOW
    return Deny(f"Only the {noun}'s creator or an admin may do this")


def _owner_only(
    principal: Principal,
    resource: Optional[OwnedResource],
    noun: str,
) -> Decision:
    if resource is None:
        return Deny(f"No {noun} given")
    if resource.owner_email == principal.email:
        return ALLOW
    return Deny(f"Only the owner may access these {noun}")


def _admin_only(principal: Principal) -> Decision:
    if _is_admin(principal):
        return ALLOW
    return Deny("Admin role required")


def decide(
    operation: Operation,
    principal: Principal,
    resource: Optional[OwnedResource] = None,
) -> Decision:
    """
    Decide whether a principal may perform an operation.

    Args:
        operation: The protected operation being attempted
        principal: The acting principal (email + stored role)
        resource: The target resource, for ownership-scoped operations

    Returns:
        Allow, or Deny carrying a human-readable reason
    """
    if operation in (Operation.UPDATE_LESSON, Operation.DELETE_LESSON):
        return _owner_or_admin(principal, resource, "lesson")

    if operation == Operation.SET_PREMIUM_ACCESS:
        if principal.role in _PREMIUM_ROLES:
            return ALLOW
        return Deny("Premium or admin role required to publish premium lessons")

    if operation in (
        Operation.CREATE_FAVORITE,
        Operation.READ_FAVORITES,
        Operation.DELETE_FAVORITE,
    ):
        return _owner_only(principal, resource, "favorites")

    if operation in (
        Operation.LIST_REPORTS,
        Operation.DELETE_REPORT,
        Operation.LIST_USERS,
        Operation.SET_ROLE,
    ):
        return _admin_only(principal)

    if operation in (
        Operation.CREATE_LESSON,
        Operation.CREATE_COMMENT,
        Operation.CREATE_REPORT,
    ):
        return ALLOW

    raise ValueError(f"Unhandled operation: {operation}")


def require(
    operation: Operation,
    principal: Principal,
    resource: Optional[OwnedResource] = None,
) -> None:
    """
    Enforce a policy decision.

    Raises:
        AccessDeniedError: If the decision is Deny
    """
    decision = decide(operation, principal, resource)
    if isinstance(decision, Deny):
        raise AccessDeniedError(operation.value, decision.reason)
