"""Tests for PaymentRepository."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.billing.models import PaymentStatus, ProviderSession, PurchaseKind
from modules.billing.repository import PaymentRepository

RECORD_ROW = {
    "id": "pay-1",
    "transaction_id": "pi_123",
    "session_id": "cs_1",
    "kind": "plan",
    "customer_email": "buyer@example.com",
    "lesson_id": None,
    "amount": 15.0,
    "currency": "usd",
    "status": "completed",
    "created_at": "2024-01-01T00:00:00+00:00",
}

SESSION = ProviderSession(
    id="cs_1",
    status="complete",
    payment_status="paid",
    transaction_id="pi_123",
    kind="plan",
    lesson_id="ignored-for-plans",
    customer_email="buyer@example.com",
    amount_total=Decimal("15.00"),
    currency="usd",
)


@pytest.fixture
def mock_db():
    return MagicMock()


class TestPaymentRepository:
    def test_insert_once_upserts_ignoring_duplicates(self, mock_db):
        table = mock_db.table.return_value
        table.upsert.return_value.execute.return_value.data = [RECORD_ROW]

        record = PaymentRepository(mock_db).insert_once(SESSION, PurchaseKind.PLAN, PaymentStatus.COMPLETED)

        assert record.transaction_id == "pi_123"
        assert record.amount == Decimal("15.0")
        data = table.upsert.call_args[0][0]
        assert data["lesson_id"] is None
        assert data["status"] == "completed"
        assert table.upsert.call_args.kwargs == {
            "on_conflict": "transaction_id",
            "ignore_duplicates": True,
        }

    def test_insert_once_duplicate_returns_none(self, mock_db):
        mock_db.table.return_value.upsert.return_value.execute.return_value.data = []

        record = PaymentRepository(mock_db).insert_once(SESSION, PurchaseKind.PLAN, PaymentStatus.COMPLETED)

        assert record is None

    def test_get_by_transaction_id(self, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [RECORD_ROW]

        record = PaymentRepository(mock_db).get_by_transaction_id("pi_123")

        assert record.kind == PurchaseKind.PLAN
        mock_db.table.assert_called_with("payments")
        mock_db.table.return_value.select.return_value.eq.assert_called_once_with("transaction_id", "pi_123")
