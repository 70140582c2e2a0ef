"""Tests for billing API endpoints."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_billing_service
from modules.billing.service import BillingService
from modules.lessons.service import LessonService
from modules.users.service import UserService

from tests.conftest import make_lesson
from tests.fakes import (
    FakeLessonRepository,
    FakePaymentProvider,
    FakePaymentRepository,
    FakeUserRepository,
)


@pytest.fixture
def payments():
    return FakePaymentRepository()


@pytest.fixture
def provider():
    return FakePaymentProvider()


@pytest.fixture
def users():
    repo = FakeUserRepository()
    repo.add("buyer@example.com")
    return repo


@pytest.fixture
def client(payments, provider, users, test_settings):
    service = BillingService(
        payments=payments,
        provider=provider,
        lessons=LessonService(FakeLessonRepository([make_lesson("lesson-1", price=Decimal("7.50"))])),
        users=UserService(users),
        settings=test_settings,
    )
    app = create_app(test_settings)
    app.dependency_overrides[get_billing_service] = lambda: service
    return TestClient(app)


class TestCheckoutSession:
    """Tests for POST /payment-checkout-session"""

    def test_lesson_checkout(self, client, provider):
        response = client.post(
            "/payment-checkout-session",
            json={"lessonId": "lesson-1", "customerEmail": "buyer@example.com"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["sessionId"] == "cs_test_1"
        assert data["url"].startswith("https://checkout.stripe.test/")
        assert provider.checkouts[0]["amount"] == Decimal("7.50")

    def test_unknown_lesson(self, client):
        response = client.post(
            "/payment-checkout-session",
            json={"lessonId": "missing", "customerEmail": "buyer@example.com"},
        )
        assert response.status_code == 404

    def test_requires_one_purchase(self, client):
        response = client.post(
            "/payment-checkout-session",
            json={"customerEmail": "buyer@example.com"},
        )
        assert response.status_code == 422


class TestPaymentSuccess:
    """Tests for POST /payment-success"""

    def test_confirms_then_reports_already_processed(self, client, provider, payments, users):
        provider.add_session(transaction_id="pi_123", kind="plan")

        first = client.post("/payment-success", json={"sessionId": "cs_test_1"})
        second = client.post("/payment-success", json={"sessionId": "cs_test_1"})

        assert first.status_code == 200
        assert first.json()["outcome"] == "confirmed"
        assert second.status_code == 200
        assert second.json()["outcome"] == "already_processed"
        assert list(payments.records) == ["pi_123"]
        assert users.get_by_email("buyer@example.com").is_premium

    def test_unpaid_session_is_400(self, client, provider, payments):
        provider.add_session(status="open", payment_status="unpaid", transaction_id=None)

        response = client.post("/payment-success", json={"sessionId": "cs_test_1"})

        assert response.status_code == 400
        assert response.json()["outcome"] == "not_verified"
        assert payments.records == {}

    def test_unknown_session_is_400(self, client):
        response = client.post("/payment-success", json={"sessionId": "cs_nope"})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_SESSION"

    def test_response_has_no_provider_internals(self, client, provider):
        provider.add_session(kind="lesson", lesson_id="lesson-1")

        data = client.post("/payment-success", json={"sessionId": "cs_test_1"}).json()

        assert set(data) == {"outcome", "transactionId", "kind", "lessonId", "message"}
