"""
Billing API endpoints.

Neither endpoint requires a principal: checkout carries the payer's email
and confirmation is keyed by the provider session.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_billing_service

from .interfaces import IBillingService
from .models import (
    CheckoutRequest,
    CheckoutSession,
    ConfirmationOutcome,
    ConfirmPaymentRequest,
    PaymentConfirmation,
)

router = APIRouter()


@router.post("/payment-checkout-session", response_model=CheckoutSession)
async def create_checkout_session(
    request: CheckoutRequest,
    service: IBillingService = Depends(get_billing_service),
) -> CheckoutSession:
    """Start a checkout for a lesson or the premium plan."""
    return await service.create_checkout_session(request)


@router.post(
    "/payment-success",
    response_model=PaymentConfirmation,
    responses={400: {"model": PaymentConfirmation, "description": "Payment not verified"}},
)
async def confirm_payment(
    request: ConfirmPaymentRequest,
    service: IBillingService = Depends(get_billing_service),
):
    """
    Confirm a completed checkout.

    Returns 200 for a newly confirmed or already processed payment and
    400 when the provider does not report the session as paid.
    """
    confirmation = await service.confirm_payment(request.session_id)
    if confirmation.outcome == ConfirmationOutcome.NOT_VERIFIED:
        return JSONResponse(
            status_code=400,
            content=confirmation.model_dump(mode="json", by_alias=True),
        )
    return confirmation
