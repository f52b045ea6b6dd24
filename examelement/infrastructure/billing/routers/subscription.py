"""API endpoints for subscription status and Stripe webhooks."""

from typing import Annotated

import stripe
import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError as PydanticValidationError

from examelement.application.billing.use_cases.apply_subscription_event_use_case import (
    ApplySubscriptionEventUseCase,
)
from examelement.application.billing.use_cases.start_checkout_use_case import StartCheckoutUseCase
from examelement.config import get_settings
from examelement.core import container
from examelement.domain.identity.entities.user import User
from examelement.infrastructure.billing.schemas import (
    CheckoutSessionResponse,
    StripeEventPayload,
    SubscriptionStatusResponse,
    WebhookAckResponse,
)
from examelement.infrastructure.common.di import inject_use_case
from examelement.infrastructure.identity.dependencies import get_current_user

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/subscription", tags=["subscription"])


@router.get("/status", response_model=SubscriptionStatusResponse, status_code=status.HTTP_200_OK)
def get_subscription_status(
    current_user: Annotated[User, Depends(get_current_user)],
) -> SubscriptionStatusResponse:
    """Whether the current user has an active subscription."""
    return SubscriptionStatusResponse(is_subscribed=current_user.is_subscribed)


@router.post(
    "/checkout", response_model=CheckoutSessionResponse, status_code=status.HTTP_201_CREATED
)
def start_checkout(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: StartCheckoutUseCase = Depends(inject_use_case(container.start_checkout_use_case)),
) -> CheckoutSessionResponse:
    """
    Open a Stripe checkout for the monthly subscription.

    The user is linked to a Stripe customer first, so the subscription events
    that follow payment can find them.
    """
    if current_user.is_subscribed:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="You already have a subscription"
        )
    session = use_case.start(current_user.id.value)
    return CheckoutSessionResponse(session_id=session.session_id, url=session.url)


@router.post("/webhook", response_model=WebhookAckResponse, status_code=status.HTTP_200_OK)
async def stripe_webhook(
    request: Request,
    use_case: ApplySubscriptionEventUseCase = Depends(
        inject_use_case(container.apply_subscription_event_use_case)
    ),
) -> WebhookAckResponse:
    """
    Receive Stripe subscription events.

    The signature is always verified; without a configured secret the
    endpoint refuses every event. Re-delivered events are acknowledged
    without being applied again.
    """
    secret = get_settings().STRIPE_WEBHOOK_SECRET
    if not secret:
        logger.error("stripe_webhook_secret_not_configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Payment webhooks are not configured",
        )

    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")
    if not sig_header:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing Stripe signature"
        )

    try:
        stripe.Webhook.construct_event(payload, sig_header, secret)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload"
        ) from None
    except stripe.SignatureVerificationError:
        logger.warning("stripe_webhook_invalid_signature")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid signature"
        ) from None

    try:
        event = StripeEventPayload.model_validate_json(payload)
    except PydanticValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload"
        ) from None

    applied = use_case.apply(
        event_id=event.id,
        event_type=event.type,
        customer_id=event.customer_id,
        subscription_id=event.subscription_id,
    )
    return WebhookAckResponse(applied=applied)
