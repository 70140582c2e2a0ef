"""
Billing module exceptions.

These exceptions are raised by the billing module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    ExternalServiceError,
    InternalError,
    ValidationError,
)


class InvalidSessionError(ValidationError):
    """Raised when a checkout session cannot be used for confirmation."""

    def __init__(self, session_id: str, reason: str):
        super().__init__(
            f"Invalid checkout session {session_id}: {reason}",
            code="INVALID_SESSION",
            details={"session_id": session_id, "reason": reason},
        )


class PaymentProviderUnavailableError(ExternalServiceError):
    """Raised when the payment provider cannot be reached."""

    def __init__(self, message: str):
        super().__init__(
            message,
            service="stripe",
            code="PAYMENT_PROVIDER_UNAVAILABLE",
        )


class PaymentConsistencyError(InternalError):
    """
    Raised when a payment record was written but its consequence was not.

    The record stays in place; confirming the same session again repairs
    the missing entitlement.
    """

    def __init__(self, transaction_id: str, reason: str):
        super().__init__(
            f"Payment {transaction_id} recorded but not applied: {reason}",
            code="PAYMENT_CONSISTENCY",
            details={"transaction_id": transaction_id},
        )
