"""
Bearer authentication dependencies.

Extracts the bearer credential, verifies it through IAuthService and,
for routes that consult the access policy, resolves the stored role.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from modules.policy import Principal
from modules.users.interfaces import IUserService
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service, get_user_service

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a verified email.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"email": user.email}
    """
    if credentials is None:
        raise MissingTokenError()
    return await auth.validate_token(credentials.credentials)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    An invalid credential is treated as anonymous.
    """
    if credentials is None:
        return None

    try:
        return await auth.validate_token(credentials.credentials)
    except AuthenticationError as e:
        logger.debug(f"Ignoring invalid optional credential: {e.message}")
        return None


async def get_current_principal(
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserService = Depends(get_user_service),
) -> Principal:
    """The verified caller with their stored role, for policy checks."""
    return await users.resolve_principal(user.email)


async def get_optional_principal(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    users: IUserService = Depends(get_user_service),
) -> Optional[Principal]:
    """Like get_current_principal, but None for anonymous callers."""
    if user is None:
        return None
    return await users.resolve_principal(user.email)

