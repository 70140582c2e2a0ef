"""
Reports service implementation.
"""

import logging
from typing import Optional

from modules.lessons.exceptions import LessonNotFoundError
from modules.policy import Operation, Principal, require
from shared.exceptions import ValidationError

from .interfaces import IReportService
from .models import CreateReportRequest, Report
from .exceptions import ReportNotFoundError
from .repository import ReportRepository

logger = logging.getLogger(__name__)


class ReportService(IReportService):
    """Report operations backed by the reports table."""

    def __init__(self, repository: ReportRepository):
        self._repo = repository

    async def file_report(
        self,
        principal: Optional[Principal],
        request: CreateReportRequest,
    ) -> Report:
        if principal is not None:
            require(Operation.CREATE_REPORT, principal)
            reporter_email = principal.email
        elif request.reporter_email:
            reporter_email = request.reporter_email
        else:
            raise ValidationError(
                "reporterEmail is required for anonymous reports",
                code="REPORTER_REQUIRED",
            )

        report = self._repo.create(request.lesson_id, reporter_email, request.reason)
        if report is None:
            raise LessonNotFoundError(request.lesson_id)

        logger.info(f"Report {report.id} filed against lesson {request.lesson_id}")
        return report

    async def list_reports(self, principal: Principal) -> list[Report]:
        require(Operation.LIST_REPORTS, principal)
        return self._repo.list_with_titles()

    async def delete_report(self, principal: Principal, report_id: str) -> None:
        require(Operation.DELETE_REPORT, principal)
        if not self._repo.delete(report_id):
            raise ReportNotFoundError(report_id)
        logger.info(f"Report {report_id} removed by {principal.email}")
