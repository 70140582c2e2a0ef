"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models stay in their respective module directories.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base for models that cross the HTTP boundary.

    Fields are snake_case in Python and camelCase on the wire;
    either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    A verified principal.

    Populated from identity token claims and made available to route
    handlers via dependency injection. The email is the principal's
    identity everywhere else in the system.
    """

    id: str = Field(..., description="Subject claim from the identity token")
    email: str = Field(..., description="Verified email address")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


def _normalize_email(value: str) -> str:
    return value.strip().lower()


# Emails are compared case-insensitively everywhere
Email = Annotated[str, AfterValidator(_normalize_email)]
