"""
Report repository for document store access.

The `reports` table references `lessons(id)` with ON DELETE CASCADE,
so listing can embed the lesson title through PostgREST.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import Report


class ReportRepository(BaseRepository[Report]):
    """Repository for moderation reports."""

    table_name = "reports"

    def create(self, lesson_id: str, reporter_email: str, reason: str) -> Optional[Report]:
        """
        Insert a report.

        Returns:
            The stored report, or None if the lesson does not exist.
        """
        data = {
            "lesson_id": lesson_id,
            "reporter_email": reporter_email,
            "reason": reason,
            "created_at": self._now(),
        }
        try:
            result = self._table().insert(data).execute()
        except APIError as e:
            if self._is_missing_reference(e) or self._is_malformed_id(e):
                return None
            raise
        return self._map_to_report(result.data[0])

    def list_with_titles(self) -> list[Report]:
        """All reports joined with their lesson's title, newest first."""
        result = (
            self._table()
            .select("*, lessons(title)")
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_report(row) for row in result.data]

    def delete(self, report_id: str) -> bool:
        """Delete a report. True if a row was deleted."""
        try:
            result = self._table().delete().eq("id", report_id).execute()
        except APIError as e:
            if self._is_malformed_id(e):
                return False
            raise
        return bool(result.data)

    def _map_to_report(self, data: dict[str, Any]) -> Report:
        lesson = data.get("lessons") or {}
        return Report(
            id=str(data["id"]),
            lesson_id=str(data["lesson_id"]),
            reporter_email=data["reporter_email"],
            reason=data["reason"],
            created_at=data["created_at"],
            lesson_title=lesson.get("title"),
        )
