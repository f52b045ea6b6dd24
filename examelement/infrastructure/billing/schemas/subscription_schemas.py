"""Pydantic schemas for subscription status and payment webhooks."""

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionStatusResponse(BaseModel):
    is_subscribed: bool


class StripeEventObject(BaseModel):
    """The subset of a Stripe event's data.object used here."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    object: str | None = None
    customer: str | None = None
    subscription: str | None = None


class StripeEventData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    object: StripeEventObject = Field(default_factory=StripeEventObject)


class StripeEventPayload(BaseModel):
    """Stripe event envelope."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    data: StripeEventData = Field(default_factory=StripeEventData)

    @property
    def customer_id(self) -> str | None:
        return self.data.object.customer

    @property
    def subscription_id(self) -> str | None:
        """Subscription events carry it as the object id, invoices as a field."""
        obj = self.data.object
        if obj.object == "subscription":
            return obj.id
        return obj.subscription


class WebhookAckResponse(BaseModel):
    received: bool = True
    applied: bool


class CheckoutSessionResponse(BaseModel):
    session_id: str
    url: str | None = None
