"""
Centralized configuration for the Life Lessons backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., STRIPE_*, SUPABASE_*).
"""

import base64
import binascii
import json
from decimal import Decimal
from functools import lru_cache
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Life Lessons API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # Frontend origin (redirect target and CORS allow-list entry)
    site_domain: str = "http://localhost:5173"

    # CORS settings
    cors_origins: list[str] = []
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (document store)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""

    # Identity provider
    supabase_jwt_secret: str = ""
    identity_service_credential: str = ""  # base64-encoded JSON

    # Stripe
    stripe_secret_key: str = ""
    payment_currency: str = "usd"
    premium_plan_price: Decimal = Decimal("15.00")
    default_lesson_price: Decimal = Decimal("5.00")

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins: the site domain plus any extra configured origins."""
        origins = [self.site_domain] if self.site_domain else []
        return origins + [o for o in self.cors_origins if o not in origins]


def decode_service_credential(value: str) -> dict[str, Any]:
    """
    Decode a base64-encoded JSON service credential.

    Args:
        value: Base64 text wrapping a JSON object

    Returns:
        The decoded credential as a dict

    Raises:
        ValueError: If the value is not base64 or not a JSON object
    """
    try:
        raw = base64.b64decode(value, validate=True)
        credential = json.loads(raw)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Malformed service credential: {e}") from e

    if not isinstance(credential, dict):
        raise ValueError("Malformed service credential: expected a JSON object")
    return credential


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
