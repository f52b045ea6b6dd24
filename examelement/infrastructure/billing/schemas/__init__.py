from .subscription_schemas import (
    CheckoutSessionResponse,
    StripeEventObject,
    StripeEventPayload,
    SubscriptionStatusResponse,
    WebhookAckResponse,
)

__all__ = [
    "CheckoutSessionResponse",
    "StripeEventObject",
    "StripeEventPayload",
    "SubscriptionStatusResponse",
    "WebhookAckResponse",
]
