"""
Base repository class for document store access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and shared helpers for data operations.
"""

from datetime import datetime, timezone
from typing import Any, TypeVar, Generic

from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for store operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement collection-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Note: repositories do NOT perform authorization checks.
    The service layer consults the access policy before writing.
    """

    table_name: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for store operations.
        """
        self._db = db

    def _table(self):
        """Query builder for this repository's collection."""
        return self._db.table(self.table_name)

    @staticmethod
    def _now() -> str:
        """Current UTC timestamp in ISO-8601 form."""
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _first(data: list[dict[str, Any]] | None) -> dict[str, Any] | None:
        """First row of a result set, or None when empty."""
        return data[0] if data else None

    @staticmethod
    def _is_unique_violation(error: Exception) -> bool:
        """Whether a PostgREST error is a unique-constraint violation."""
        return getattr(error, "code", None) == UNIQUE_VIOLATION

    @staticmethod
    def _is_missing_reference(error: Exception) -> bool:
        """Whether a PostgREST error is a foreign-key violation."""
        return getattr(error, "code", None) == FOREIGN_KEY_VIOLATION

    @staticmethod
    def _is_malformed_id(error: Exception) -> bool:
        """Whether a PostgREST error comes from an unparseable ID (e.g. bad UUID)."""
        return getattr(error, "code", None) == INVALID_TEXT_REPRESENTATION


# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
INVALID_TEXT_REPRESENTATION = "22P02"
