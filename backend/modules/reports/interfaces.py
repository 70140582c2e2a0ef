"""
Reports module interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.policy.models import Principal

from .models import CreateReportRequest, Report


@runtime_checkable
class IReportService(Protocol):
    """Interface for moderation reports."""

    async def file_report(
        self,
        principal: Optional[Principal],
        request: CreateReportRequest,
    ) -> Report:
        """
        File a report against a lesson.

        Raises:
            LessonNotFoundError: If the lesson does not exist
            ValidationError: If no reporter can be determined
        """
        ...

    async def list_reports(self, principal: Principal) -> list[Report]:
        """All reports with lesson titles, newest first. Admin only."""
        ...

    async def delete_report(self, principal: Principal, report_id: str) -> None:
        """Remove a report. Admin only."""
        ...
