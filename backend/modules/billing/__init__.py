"""
Billing module.

Handles Stripe checkout and the payment confirmation workflow.

Public API:
- IBillingService: Interface for checkout and confirmation
- IPaymentProvider: Interface for the payment provider
- PaymentConfirmation, ConfirmationOutcome: Workflow results
- Billing exceptions: InvalidSessionError, etc.
"""

from .interfaces import IBillingService, IPaymentProvider
from .models import (
    PurchaseKind,
    PaymentStatus,
    ConfirmationOutcome,
    PaymentRecord,
    ProviderSession,
    CheckoutRequest,
    CheckoutSession,
    ConfirmPaymentRequest,
    PaymentConfirmation,
)
from .exceptions import (
    InvalidSessionError,
    PaymentProviderUnavailableError,
    PaymentConsistencyError,
)

__all__ = [
    # Interfaces
    "IBillingService",
    "IPaymentProvider",
    # Models
    "PurchaseKind",
    "PaymentStatus",
    "ConfirmationOutcome",
    "PaymentRecord",
    "ProviderSession",
    "CheckoutRequest",
    "CheckoutSession",
    "ConfirmPaymentRequest",
    "PaymentConfirmation",
    # Exceptions
    "InvalidSessionError",
    "PaymentProviderUnavailableError",
    "PaymentConsistencyError",
]
