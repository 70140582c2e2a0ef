"""
Access policy exceptions.
"""

from shared.exceptions import AuthorizationError


class AccessDeniedError(AuthorizationError):
    """Raised when the access policy denies an operation."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            reason,
            code="ACCESS_DENIED",
            details={"operation": operation},
        )
