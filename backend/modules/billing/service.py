"""
Billing service implementation.

Creates checkout sessions with server-side pricing and runs the payment
confirmation workflow:

1. Retrieve the session from the provider
2. Stop (no writes) unless it is paid and complete
3. Look up the payment record by transaction ID (idempotency)
4. Write the record and apply its consequence
"""

import logging
from typing import Optional

from modules.lessons.interfaces import ILessonService
from modules.users.interfaces import IUserService
from shared.config import Settings

from .interfaces import IBillingService, IPaymentProvider
from .models import (
    CheckoutRequest,
    CheckoutSession,
    ConfirmationOutcome,
    PaymentConfirmation,
    PaymentRecord,
    PaymentStatus,
    ProviderSession,
    PurchaseKind,
)
from .exceptions import InvalidSessionError, PaymentConsistencyError
from .repository import PaymentRepository

logger = logging.getLogger(__name__)

PLAN_PRODUCT_NAME = "Premium plan"


class BillingService(IBillingService):
    """Checkout and payment confirmation backed by Stripe and Supabase."""

    def __init__(
        self,
        payments: PaymentRepository,
        provider: IPaymentProvider,
        lessons: ILessonService,
        users: IUserService,
        settings: Settings,
    ):
        self._payments = payments
        self._provider = provider
        self._lessons = lessons
        self._users = users
        self._settings = settings

    # -------------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------------

    async def create_checkout_session(self, request: CheckoutRequest) -> CheckoutSession:
        metadata = {"kind": request.kind.value, "customer_email": request.customer_email}

        if request.kind == PurchaseKind.PLAN:
            product_name = PLAN_PRODUCT_NAME
            amount = self._settings.premium_plan_price
        else:
            lesson = await self._lessons.get_lesson(request.lesson_id)
            product_name = lesson.title
            amount = lesson.price if lesson.price is not None else self._settings.default_lesson_price
            metadata["lesson_id"] = lesson.id

        site = self._settings.site_domain.rstrip("/")
        session = await self._provider.create_checkout_session(
            product_name=product_name,
            amount=amount,
            customer_email=request.customer_email,
            success_url=f"{site}/dashboard/payment-success?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{site}/dashboard/payment-cancelled",
            metadata=metadata,
        )

        logger.info(
            f"Checkout {session.session_id} created: {request.kind.value} "
            f"{amount} for {request.customer_email}"
        )
        return session

    # -------------------------------------------------------------------------
    # Confirmation
    # -------------------------------------------------------------------------

    async def confirm_payment(self, session_id: str) -> PaymentConfirmation:
        session = await self._provider.retrieve_session(session_id)

        if not session.is_paid:
            logger.info(
                f"Session {session_id} not verified "
                f"(status={session.status}, payment_status={session.payment_status})"
            )
            return PaymentConfirmation(
                outcome=ConfirmationOutcome.NOT_VERIFIED,
                message="Payment not verified",
            )

        kind = self._parse_kind(session)
        if not session.transaction_id:
            raise InvalidSessionError(session_id, "paid session has no payment intent")
        transaction_id = session.transaction_id

        existing = self._payments.get_by_transaction_id(transaction_id)
        if existing is not None:
            await self._repair_entitlement(existing)
            return self._already_processed(existing.transaction_id, existing.kind, existing.lesson_id)

        if kind == PurchaseKind.LESSON:
            return await self._confirm_lesson(session)
        return await self._confirm_plan(session)

    async def _confirm_lesson(self, session: ProviderSession) -> PaymentConfirmation:
        if not session.lesson_id:
            raise InvalidSessionError(session.id, "lesson purchase without lesson_id")
        lesson = await self._lessons.find_lesson(session.lesson_id)
        if lesson is None:
            raise InvalidSessionError(session.id, f"lesson {session.lesson_id} no longer exists")

        record = self._payments.insert_once(session, PurchaseKind.LESSON, PaymentStatus.PENDING)
        if record is None:
            return self._already_processed(session.transaction_id, PurchaseKind.LESSON, lesson.id)

        logger.info(f"Payment {record.transaction_id} confirmed: lesson {lesson.id}")
        return PaymentConfirmation(
            outcome=ConfirmationOutcome.CONFIRMED,
            transaction_id=record.transaction_id,
            kind=PurchaseKind.LESSON,
            lesson_id=lesson.id,
            message="Payment confirmed",
        )

    async def _confirm_plan(self, session: ProviderSession) -> PaymentConfirmation:
        if not session.customer_email:
            raise InvalidSessionError(session.id, "plan purchase without customer email")

        record = self._payments.insert_once(session, PurchaseKind.PLAN, PaymentStatus.COMPLETED)
        if record is None:
            return self._already_processed(session.transaction_id, PurchaseKind.PLAN, None)

        await self._grant_premium(record)

        logger.info(f"Payment {record.transaction_id} confirmed: plan for {record.customer_email}")
        return PaymentConfirmation(
            outcome=ConfirmationOutcome.CONFIRMED,
            transaction_id=record.transaction_id,
            kind=PurchaseKind.PLAN,
            message="Payment confirmed",
        )

    async def _grant_premium(self, record: PaymentRecord) -> None:
        """Apply a plan record's entitlement; the record is already stored."""
        try:
            user = await self._users.grant_premium(record.customer_email)
        except Exception as e:
            logger.error(
                f"Entitlement write failed for payment {record.transaction_id}: {e}",
                exc_info=True,
            )
            raise PaymentConsistencyError(record.transaction_id, "entitlement write failed") from e

        if user is None:
            logger.error(
                f"Payment {record.transaction_id} recorded for unknown user {record.customer_email}"
            )
            raise PaymentConsistencyError(record.transaction_id, "no user record for payer")

    async def _repair_entitlement(self, record: PaymentRecord) -> None:
        """Re-apply a plan entitlement that an earlier confirmation failed to write."""
        if record.kind != PurchaseKind.PLAN or not record.customer_email:
            return
        user = await self._users.get_by_email(record.customer_email)
        if user is None:
            logger.error(
                f"Payment {record.transaction_id} still has no user record for {record.customer_email}"
            )
            raise PaymentConsistencyError(record.transaction_id, "no user record for payer")
        if user.is_premium:
            return
        logger.warning(f"Repairing missing entitlement for payment {record.transaction_id}")
        await self._grant_premium(record)

    @staticmethod
    def _parse_kind(session: ProviderSession) -> PurchaseKind:
        try:
            return PurchaseKind(session.kind)
        except ValueError:
            raise InvalidSessionError(session.id, f"unknown purchase kind {session.kind!r}") from None

    @staticmethod
    def _already_processed(
        transaction_id: Optional[str],
        kind: PurchaseKind,
        lesson_id: Optional[str],
    ) -> PaymentConfirmation:
        logger.info(f"Payment {transaction_id} already processed")
        return PaymentConfirmation(
            outcome=ConfirmationOutcome.ALREADY_PROCESSED,
            transaction_id=transaction_id,
            kind=kind,
            lesson_id=lesson_id,
            message="Payment already processed",
        )
