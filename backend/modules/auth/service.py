"""
Authentication service implementation.

Verifies identity-provider JWTs locally with the provider's signing
secret. The secret comes from the base64 service credential when one is
configured, otherwise from SUPABASE_JWT_SECRET.
"""

import logging
from typing import Optional

import jwt

from shared.config import Settings, decode_service_credential
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload, VerifierConfig
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


def load_verifier_config(settings: Settings) -> VerifierConfig:
    """
    Build the verifier configuration from settings.

    Raises:
        ValueError: If the service credential is present but malformed
    """
    if settings.identity_service_credential:
        credential = decode_service_credential(settings.identity_service_credential)
        return VerifierConfig(**credential)
    return VerifierConfig(jwt_secret=settings.supabase_jwt_secret)


class AuthService(IAuthService):
    """
    JWT-backed identity verifier.

    Stateless: each call decodes and checks one token.
    """

    def __init__(self, config: VerifierConfig):
        self._config = config

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthService":
        return cls(load_verifier_config(settings))

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """Validate a JWT and return the verified principal."""
        if not token:
            raise MissingTokenError()

        if not self._config.jwt_secret:
            raise AuthNotConfiguredError()

        try:
            claims = jwt.decode(
                token,
                self._config.jwt_secret,
                algorithms=self._config.algorithms,
                audience=self._config.audience,
                issuer=self._config.issuer,
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected identity token: {e}")
            raise InvalidTokenError(str(e))

        payload = JWTPayload(**claims)
        if not payload.email:
            raise InvalidTokenError("Token carries no email claim")

        return AuthenticatedUser(id=payload.sub, email=payload.email.lower())
