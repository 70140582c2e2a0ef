"""
User repository for document store access.

Encapsulates Supabase queries and data mapping for the `users` table.
The table carries UNIQUE(email).
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import Role, User, UpsertUserRequest


class UserRepository(BaseRepository[User]):
    """Repository for user records."""

    table_name = "users"

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email, or None if not found."""
        result = self._table().select("*").eq("email", email).limit(1).execute()
        row = self._first(result.data)
        return self._map_to_user(row) if row else None

    def upsert_login(self, request: UpsertUserRequest) -> tuple[User, bool]:
        """
        Record a login.

        Creates the user on first login, otherwise refreshes last_login_at
        and any profile fields the client sent.

        Returns:
            (user, created)
        """
        now = self._now()
        existing = self.get_by_email(request.email)
        if existing is None:
            data = {
                "email": request.email,
                "name": request.name,
                "photo_url": request.photo_url,
                "role": Role.USER.value,
                "is_premium": False,
                "created_at": now,
                "last_login_at": now,
            }
            try:
                result = self._table().insert(data).execute()
                return self._map_to_user(result.data[0]), True
            except APIError as e:
                # Concurrent first login for the same email
                if not self._is_unique_violation(e):
                    raise

        changes: dict[str, Any] = {"last_login_at": now}
        if request.name:
            changes["name"] = request.name
        if request.photo_url:
            changes["photo_url"] = request.photo_url
        result = self._table().update(changes).eq("email", request.email).execute()
        return self._map_to_user(result.data[0]), False

    def update_role(
        self,
        user_id: str,
        role: Role,
        is_premium: Optional[bool] = None,
    ) -> Optional[User]:
        """Set a user's role (and optionally entitlement). None if no such user."""
        changes: dict[str, Any] = {"role": role.value}
        if is_premium is not None:
            changes["is_premium"] = is_premium
        try:
            result = self._table().update(changes).eq("id", user_id).execute()
        except APIError as e:
            if self._is_malformed_id(e):
                return None
            raise
        row = self._first(result.data)
        return self._map_to_user(row) if row else None

    def set_premium(self, email: str) -> Optional[User]:
        """Set the entitlement flag. None if no such user."""
        result = self._table().update({"is_premium": True}).eq("email", email).execute()
        row = self._first(result.data)
        return self._map_to_user(row) if row else None

    def search(self, search: Optional[str] = None) -> list[User]:
        """List users, optionally filtered by name or email substring."""
        query = self._table().select("*")
        if search:
            pattern = _quote_filter_value(f"%{search}%")
            query = query.or_(f"name.ilike.{pattern},email.ilike.{pattern}")
        result = query.order("created_at", desc=True).execute()
        return [self._map_to_user(row) for row in result.data]

    def count_lessons_by_creator(self, emails: list[str]) -> dict[str, int]:
        """
        Number of lessons created by each of the given emails.

        One exact-count query per email, so the counts are not capped by
        the max-rows limit on a plain select.
        """
        counts: dict[str, int] = {}
        for email in dict.fromkeys(emails):
            result = (
                self._db.table("lessons")
                .select("id", count="exact")
                .eq("creator_email", email)
                .limit(1)
                .execute()
            )
            counts[email] = result.count or 0
        return counts

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            email=data["email"],
            name=data.get("name"),
            photo_url=data.get("photo_url"),
            role=Role(data.get("role") or Role.USER.value),
            is_premium=bool(data.get("is_premium", False)),
            created_at=data.get("created_at"),
            last_login_at=data.get("last_login_at"),
        )


def _quote_filter_value(value: str) -> str:
    """Double-quote a value for a PostgREST logic filter (or=, and=)."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
