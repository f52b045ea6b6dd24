"""Protocol for the payment processor used to start subscriptions."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CheckoutSession:
    session_id: str
    url: str | None = None


class PaymentGatewayProtocol(Protocol):
    def create_customer(self, email: str, user_id: int) -> str:
        """
        Register a paying customer.

        Returns:
            The processor's customer id

        Raises:
            PaymentProviderError: If the processor rejects the call
        """
        ...

    def create_checkout_session(self, customer_id: str, user_id: int) -> CheckoutSession:
        """
        Open a hosted checkout for the monthly subscription.

        Raises:
            PaymentProviderError: If the processor rejects the call
        """
        ...
