"""
Authentication module.

Verifies identity tokens and yields the verified principal.

Public API:
- IAuthService: Interface for identity verification
- AuthService: JWT-backed implementation
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload, VerifierConfig
from .service import AuthService, load_verifier_config
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
)

__all__ = [
    # Interface
    "IAuthService",
    "AuthService",
    "load_verifier_config",
    # Models
    "JWTPayload",
    "VerifierConfig",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
]
