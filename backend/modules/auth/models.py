"""
Authentication module data models.
"""

from typing import Optional
from pydantic import BaseModel, Field


class JWTPayload(BaseModel):
    """Decoded identity token claims."""

    sub: str = Field(..., description="Subject (user ID at the identity provider)")
    email: Optional[str] = Field(None, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")

    model_config = {"extra": "ignore"}


class VerifierConfig(BaseModel):
    """Key material and expected claims for token verification."""

    jwt_secret: str = Field(default="", description="HS256 signing secret")
    audience: str = Field(default="authenticated", description="Expected audience")
    issuer: Optional[str] = Field(None, description="Expected issuer, if pinned")
    algorithms: list[str] = Field(default_factory=lambda: ["HS256"])

    model_config = {"frozen": True, "extra": "ignore"}
