"""
Billing module interfaces.

IPaymentProvider hides the payment provider SDK; the workflow in
BillingService only sees ProviderSession values.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from .models import (
    CheckoutRequest,
    CheckoutSession,
    PaymentConfirmation,
    ProviderSession,
)


@runtime_checkable
class IPaymentProvider(Protocol):
    """Interface for the external payment provider."""

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
        """
        Create a hosted checkout session for a one-time payment.

        Raises:
            PaymentProviderUnavailableError: If the provider cannot be reached
        """
        ...

    async def retrieve_session(self, session_id: str) -> ProviderSession:
        """
        Fetch a checkout session.

        Raises:
            InvalidSessionError: If the provider does not know the session
            PaymentProviderUnavailableError: If the provider cannot be reached
        """
        ...


@runtime_checkable
class IBillingService(Protocol):
    """Interface for checkout and payment confirmation."""

    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        """
        Start a checkout for a lesson or the premium plan.

        The price is taken from the lesson record (or the configured
        default) or from the configured plan price.

        Raises:
            LessonNotFoundError: If the lesson does not exist
            PaymentProviderUnavailableError: If the provider cannot be reached
        """
        ...

    async def confirm_payment(self, session_id: str) -> PaymentConfirmation:
        """
        Run the confirmation workflow for a checkout session.

        Writes at most one payment record per transaction and applies
        its consequence at most once.

        Returns:
            PaymentConfirmation with outcome CONFIRMED, ALREADY_PROCESSED
            or NOT_VERIFIED (no writes)

        Raises:
            InvalidSessionError: If the session is unknown or unusable
            PaymentProviderUnavailableError: If the provider cannot be reached
            PaymentConsistencyError: If the record was written but the
                entitlement was not
        """
        ...
