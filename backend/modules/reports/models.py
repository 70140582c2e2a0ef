"""
Reports module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from shared.models import ApiModel, Email


class Report(ApiModel):
    """A moderation report; lesson_title is filled when listing."""

    id: str
    lesson_id: str
    reporter_email: str
    reason: str
    created_at: datetime
    lesson_title: Optional[str] = None


class CreateReportRequest(ApiModel):
    """Payload for filing a report."""

    lesson_id: str = Field(..., min_length=1)
    reporter_email: Optional[Email] = Field(
        None, description="Required when the caller is not signed in"
    )
    reason: str = Field(..., min_length=1, max_length=2000)
