"""
Reports module.

Moderation reports filed against lessons and reviewed by admins.

Public API:
- IReportService (modules.reports.interfaces): Interface for report operations
- Report, CreateReportRequest: Report models
- ReportNotFoundError
"""

from .models import Report, CreateReportRequest
from .exceptions import ReportNotFoundError

__all__ = [
    "Report",
    "CreateReportRequest",
    "ReportNotFoundError",
]
