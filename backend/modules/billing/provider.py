"""
Stripe payment provider.

Wraps a `stripe.StripeClient` handle (owned by the service container)
and converts SDK objects and errors into billing module types.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

import stripe

from .interfaces import IPaymentProvider
from .models import CheckoutSession, ProviderSession
from .exceptions import InvalidSessionError, PaymentProviderUnavailableError

logger = logging.getLogger(__name__)

CENTS = Decimal("100")


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount (e.g. 5.00) to Stripe's minor units (500)."""
    return int((amount * CENTS).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_minor_units(amount: Optional[int]) -> Optional[Decimal]:
    if amount is None:
        return None
    return Decimal(amount) / CENTS


class StripePaymentProvider(IPaymentProvider):
    """IPaymentProvider backed by Stripe Checkout."""

    def __init__(self, client: stripe.StripeClient, currency: str = "usd"):
        self._client = client
        self._currency = currency

    async def create_checkout_session(
        self,
        *,
        product_name: str,
        amount: Decimal,
        customer_email: str,
        success_url: str,
        cancel_url: str,
        metadata: dict[str, str],
    ) -> CheckoutSession:
        params: dict[str, Any] = {
            "mode": "payment",
            "line_items": [
                {
                    "price_data": {
                        "currency": self._currency,
                        "unit_amount": to_minor_units(amount),
                        "product_data": {"name": product_name},
                    },
                    "quantity": 1,
                }
            ],
            "customer_email": customer_email,
            "success_url": success_url,
            "cancel_url": cancel_url,
            "metadata": metadata,
        }

        try:
            session = await self._client.checkout.sessions.create_async(params=params)
        except stripe.StripeError as e:
            logger.error(f"Stripe checkout creation failed: {e}")
            raise PaymentProviderUnavailableError("Could not create checkout session") from e

        if not session.url:
            raise PaymentProviderUnavailableError("Checkout session has no URL")
        return CheckoutSession(url=session.url, session_id=session.id)

    async def retrieve_session(self, session_id: str) -> ProviderSession:
        try:
            session = await self._client.checkout.sessions.retrieve_async(session_id)
        except stripe.InvalidRequestError as e:
            raise InvalidSessionError(session_id, "unknown checkout session") from e
        except stripe.StripeError as e:
            logger.error(f"Stripe session lookup failed for {session_id}: {e}")
            raise PaymentProviderUnavailableError("Could not retrieve checkout session") from e

        return self._to_provider_session(session)

    @staticmethod
    def _to_provider_session(session: Any) -> ProviderSession:
        metadata = dict(session.metadata or {})

        intent = session.payment_intent
        if intent is not None and not isinstance(intent, str):
            # Expanded PaymentIntent object
            intent = intent.id

        email = session.customer_email
        if not email and session.customer_details is not None:
            email = session.customer_details.email

        return ProviderSession(
            id=session.id,
            status=session.status,
            payment_status=session.payment_status,
            transaction_id=intent,
            kind=metadata.get("kind"),
            lesson_id=metadata.get("lesson_id"),
            customer_email=email.strip().lower() if email else None,
            amount_total=from_minor_units(session.amount_total),
            currency=session.currency,
        )
