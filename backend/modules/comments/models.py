"""
Comments module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from shared.models import ApiModel, Email


class Comment(ApiModel):
    """A comment on a lesson."""

    id: str
    lesson_id: str
    author_email: str
    author_name: Optional[str] = None
    body: str
    created_at: datetime


class CreateCommentRequest(ApiModel):
    """Payload for posting a comment."""

    lesson_id: str = Field(..., min_length=1)
    author_email: Optional[Email] = Field(
        None, description="Required when the caller is not signed in"
    )
    author_name: Optional[str] = Field(None, max_length=200)
    body: str = Field(..., min_length=1, max_length=5000)
