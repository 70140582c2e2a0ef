"""
Report API endpoints.

Anyone may file a report; listing and removal are admin only.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_report_service
from api.middleware.auth import get_current_principal, get_optional_principal
from modules.policy import Principal

from .interfaces import IReportService
from .models import CreateReportRequest, Report

router = APIRouter()


@router.post("/lessonsReports", response_model=Report, status_code=201)
async def file_report(
    request: CreateReportRequest,
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: IReportService = Depends(get_report_service),
) -> Report:
    """File a report against a lesson."""
    return await service.file_report(principal, request)


@router.get("/lessonsReports", response_model=list[Report])
async def list_reports(
    principal: Principal = Depends(get_current_principal),
    service: IReportService = Depends(get_report_service),
) -> list[Report]:
    """List reports with lesson titles (admin only)."""
    return await service.list_reports(principal)


@router.delete("/lessonsReports/{report_id}", status_code=204)
async def delete_report(
    report_id: str,
    principal: Principal = Depends(get_current_principal),
    service: IReportService = Depends(get_report_service),
) -> None:
    """Remove a report (admin only)."""
    await service.delete_report(principal, report_id)
