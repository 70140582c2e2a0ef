"""
Authentication module interface.

Other modules depend on IAuthService, not the concrete implementation.
This lets tests substitute a deterministic verifier.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for identity verification.

    Verification is verify-or-fail: it either yields a principal or
    raises an AuthenticationError subclass.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the verified principal.

        Args:
            token: Identity token presented by the caller

        Returns:
            AuthenticatedUser with the verified email

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...
