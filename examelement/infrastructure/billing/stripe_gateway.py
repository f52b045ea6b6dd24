"""Payment gateway backed by the Stripe API."""

import stripe
import structlog

from examelement.application.billing.protocols.payment_gateway import CheckoutSession
from examelement.exceptions import PaymentProviderError

logger = structlog.get_logger(__name__)


class StripePaymentGateway:
    """
    Creates Stripe customers and subscription checkout sessions.

    The key is passed on every call rather than set on the stripe module, so
    nothing global changes when settings are overridden in tests.
    """

    def __init__(
        self,
        secret_key: str | None,
        product_name: str,
        price_minor_units: int,
        currency: str,
        client_url: str,
    ) -> None:
        self.secret_key = secret_key
        self.product_name = product_name
        self.price_minor_units = price_minor_units
        self.currency = currency
        self.client_url = client_url.rstrip("/")

    def create_customer(self, email: str, user_id: int) -> str:
        api_key = self._api_key()
        try:
            customer = stripe.Customer.create(
                api_key=api_key,
                email=email,
                metadata={"user_id": str(user_id)},
            )
        except stripe.StripeError as e:
            logger.error("stripe_customer_create_failed", user_id=user_id, error=str(e))
            raise PaymentProviderError() from e
        return customer.id

    def create_checkout_session(self, customer_id: str, user_id: int) -> CheckoutSession:
        api_key = self._api_key()
        try:
            session = stripe.checkout.Session.create(
                api_key=api_key,
                customer=customer_id,
                client_reference_id=str(user_id),
                mode="subscription",
                payment_method_types=["card"],
                line_items=[
                    {
                        "price_data": {
                            "currency": self.currency,
                            "product_data": {"name": self.product_name},
                            "unit_amount": self.price_minor_units,
                            "recurring": {"interval": "month", "interval_count": 1},
                        },
                        "quantity": 1,
                    }
                ],
                success_url=f"{self.client_url}/dashboard?payment=success",
                cancel_url=f"{self.client_url}/dashboard?payment=cancelled",
            )
        except stripe.StripeError as e:
            logger.error("stripe_checkout_create_failed", user_id=user_id, error=str(e))
            raise PaymentProviderError() from e
        return CheckoutSession(session_id=session.id, url=session.url)

    def _api_key(self) -> str:
        if not self.secret_key:
            logger.error("stripe_secret_key_not_configured")
            raise PaymentProviderError("Payments are not configured", status_code=503)
        return self.secret_key
