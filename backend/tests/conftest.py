"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

import jwt  # PyJWT
import pytest

from modules.auth.models import VerifierConfig
from modules.auth.service import AuthService
from modules.lessons.models import AccessLevel, Lesson, Visibility
from modules.policy import Principal
from modules.users.models import Role
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret
        audience: aud claim

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "aud": audience,
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_lesson(
    lesson_id: str = "lesson-1",
    creator_email: str = "creator@example.com",
    title: str = "Letting go of grief",
    access_level: AccessLevel = AccessLevel.FREE,
    visibility: Visibility = Visibility.PUBLIC,
    category: Optional[str] = "loss",
    price: Optional[Decimal] = None,
    created_at: Optional[datetime] = None,
) -> Lesson:
    """Build a Lesson with sensible defaults."""
    created_at = created_at or datetime(2024, 1, 1, tzinfo=timezone.utc)
    return Lesson(
        id=lesson_id,
        creator_email=creator_email,
        title=title,
        description="What losing someone taught me",
        category=category,
        emotional_tone="reflective",
        visibility=visibility,
        access_level=access_level,
        price=price,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Settings with test secrets and no external services."""
    return Settings(
        supabase_jwt_secret=TEST_JWT_SECRET,
        site_domain="https://lessons.example.com",
        premium_plan_price=Decimal("15.00"),
        default_lesson_price=Decimal("5.00"),
    )


@pytest.fixture
def auth_service() -> AuthService:
    """Auth service verifying tokens signed with TEST_JWT_SECRET."""
    return AuthService(VerifierConfig(jwt_secret=TEST_JWT_SECRET))


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def user_principal() -> Principal:
    return Principal(email="test@example.com", role=Role.USER)


@pytest.fixture
def premium_principal() -> Principal:
    return Principal(email="test@example.com", role=Role.PREMIUM)


@pytest.fixture
def admin_principal() -> Principal:
    return Principal(email="admin@example.com", role=Role.ADMIN)
