"""
Payment repository for document store access.

The `payments` table carries UNIQUE(transaction_id). Inserts go through
an upsert that ignores duplicates, so a concurrent delivery of the same
transaction cannot create a second record.
"""

from decimal import Decimal
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import PaymentRecord, PaymentStatus, ProviderSession, PurchaseKind


class PaymentRepository(BaseRepository[PaymentRecord]):
    """Repository for payment records."""

    table_name = "payments"

    def get_by_transaction_id(self, transaction_id: str) -> Optional[PaymentRecord]:
        """Get the record for a provider transaction, if any."""
        result = (
            self._table()
            .select("*")
            .eq("transaction_id", transaction_id)
            .limit(1)
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_record(row) if row else None

    def insert_once(
        self,
        session: ProviderSession,
        kind: PurchaseKind,
        status: PaymentStatus,
    ) -> Optional[PaymentRecord]:
        """
        Insert a record for session's transaction unless one exists.

        Returns:
            The new record, or None if a record for the transaction
            already existed (lost a race with another delivery).
        """
        data = {
            "transaction_id": session.transaction_id,
            "session_id": session.id,
            "kind": kind.value,
            "customer_email": session.customer_email,
            "lesson_id": session.lesson_id if kind == PurchaseKind.LESSON else None,
            "amount": float(session.amount_total) if session.amount_total is not None else None,
            "currency": session.currency,
            "status": status.value,
            "created_at": self._now(),
        }
        result = (
            self._table()
            .upsert(data, on_conflict="transaction_id", ignore_duplicates=True)
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_record(row) if row else None

    def _map_to_record(self, data: dict[str, Any]) -> PaymentRecord:
        amount = data.get("amount")
        return PaymentRecord(
            id=str(data["id"]),
            transaction_id=data["transaction_id"],
            session_id=data["session_id"],
            kind=PurchaseKind(data["kind"]),
            customer_email=data.get("customer_email"),
            lesson_id=str(data["lesson_id"]) if data.get("lesson_id") else None,
            amount=Decimal(str(amount)) if amount is not None else None,
            currency=data.get("currency"),
            status=PaymentStatus(data["status"]),
            created_at=data["created_at"],
        )
