"""
Billing module data models.

These models define the data structures used by the billing module
and exposed to other modules through the interface.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from shared.models import ApiModel, Email


class PurchaseKind(str, Enum):
    """What a checkout session pays for (stored in session metadata)."""

    LESSON = "lesson"  # A single premium lesson
    PLAN = "plan"      # The premium plan (sets is_premium)


class PaymentStatus(str, Enum):
    """Payment record status."""

    PENDING = "pending"
    COMPLETED = "completed"


class ConfirmationOutcome(str, Enum):
    """Result of running the confirmation workflow on a session."""

    CONFIRMED = "confirmed"
    ALREADY_PROCESSED = "already_processed"
    NOT_VERIFIED = "not_verified"


class PaymentRecord(ApiModel):
    """
    A stored payment.

    At most one record exists per transaction_id (UNIQUE in the store).
    """

    id: str = Field(..., description="Record ID")
    transaction_id: str = Field(..., description="Provider payment intent ID")
    session_id: str = Field(..., description="Provider checkout session ID")
    kind: PurchaseKind
    customer_email: Optional[str] = None
    lesson_id: Optional[str] = None
    amount: Optional[Decimal] = Field(None, description="Amount paid in major units")
    currency: Optional[str] = None
    status: PaymentStatus
    created_at: datetime


@dataclass(frozen=True)
class ProviderSession:
    """
    The fields of a provider checkout session the workflow reads.

    transaction_id is the payment intent, present once the session is paid.
    """

    id: str
    status: Optional[str]
    payment_status: Optional[str]
    transaction_id: Optional[str] = None
    kind: Optional[str] = None
    lesson_id: Optional[str] = None
    customer_email: Optional[str] = None
    amount_total: Optional[Decimal] = None
    currency: Optional[str] = None

    @property
    def is_paid(self) -> bool:
        return self.payment_status == "paid" and self.status == "complete"


class CheckoutRequest(ApiModel):
    """
    Request to start a checkout.

    Exactly one of lesson_id or plan must be given. Any amount the client
    sends is ignored; prices come from the lesson record or configuration.
    """

    lesson_id: Optional[str] = Field(None, description="Lesson to purchase")
    plan: bool = Field(default=False, description="Purchase the premium plan")
    customer_email: Email

    @model_validator(mode="after")
    def _one_purchase(self) -> "CheckoutRequest":
        if bool(self.lesson_id) == self.plan:
            raise ValueError("Provide either lessonId or plan=true")
        return self

    @property
    def kind(self) -> PurchaseKind:
        return PurchaseKind.PLAN if self.plan else PurchaseKind.LESSON


class CheckoutSession(ApiModel):
    """
    Provider checkout session info.

    Returned when initiating a purchase.
    """

    url: str = Field(..., description="Checkout URL to redirect user to")
    session_id: str = Field(..., description="Provider checkout session ID")


class ConfirmPaymentRequest(ApiModel):
    """Request to confirm a completed checkout."""

    session_id: str = Field(..., min_length=1, description="Provider checkout session ID")


class PaymentConfirmation(ApiModel):
    """Result of the confirmation workflow. Carries no provider internals."""

    outcome: ConfirmationOutcome
    transaction_id: Optional[str] = None
    kind: Optional[PurchaseKind] = None
    lesson_id: Optional[str] = None
    message: str = ""
