"""User entity for identity and subscription state."""

from dataclasses import dataclass
from datetime import datetime

from examelement.domain.common.entity import Entity
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 255


@dataclass
class User(Entity[UserId]):
    """
    User entity as seen by the study engine.

    Business Rules:
    - Identity is established by the external identity provider; the engine
      trusts the verified user id and nothing else from the client
    - is_subscribed changes only in response to payment processor events
    - Per-content-type quota state lives in UsageQuota, not on the user
    """

    id: UserId
    email: str
    is_subscribed: bool = False
    payment_customer_id: str | None = None
    payment_subscription_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )

    def subscribe(self, subscription_id: str | None = None) -> None:
        """
        Mark the user as a premium subscriber.

        Args:
            subscription_id: Payment processor subscription id, kept when known
        """
        self.is_subscribed = True
        if subscription_id:
            self.payment_subscription_id = subscription_id

    def link_payment_customer(self, customer_id: str) -> None:
        """
        Remember the payment processor customer that pays for this user.

        Subscription events name the customer, so this link is what lets
        them find the user.

        Raises:
            ValidationError: If customer_id is empty
        """
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer id cannot be empty", field="payment_customer_id")
        self.payment_customer_id = customer_id.strip()

    def unsubscribe(self) -> None:
        """Drop the user back to the free tier."""
        self.is_subscribed = False

    @classmethod
    def create(cls, email: str, payment_customer_id: str | None = None) -> "User":
        """
        Create a new free-tier user.

        Raises:
            ValidationError: If email is invalid
        """
        return cls(
            id=UserId.generate(),
            email=email,
            payment_customer_id=payment_customer_id,
        )
