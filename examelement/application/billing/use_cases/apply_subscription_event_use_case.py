"""Use case for applying payment processor subscription events."""

import structlog

from examelement.application.billing.protocols.subscription_event_repository import (
    SubscriptionEventRepositoryProtocol,
)
from examelement.application.common.clock import ClockProtocol
from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.identity.protocols.user_repository import UserRepositoryProtocol
from examelement.domain.billing.entities.subscription_event import (
    SubscriptionEffect,
    SubscriptionEvent,
    effect_of,
)
from examelement.domain.billing.exceptions import DuplicateSubscriptionEventError
from examelement.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class ApplySubscriptionEventUseCase:
    """
    Update a user's subscription flag from a payment processor event.

    Idempotent by event id: a re-delivered event is acknowledged and
    ignored. The event row and the user change commit together.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        event_repository: SubscriptionEventRepositoryProtocol,
        clock: ClockProtocol,
        uow: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.event_repository = event_repository
        self.clock = clock
        self.uow = uow

    def apply(
        self,
        event_id: str,
        event_type: str,
        customer_id: str | None = None,
        subscription_id: str | None = None,
    ) -> bool:
        """
        Apply one event.

        Args:
            event_id: Processor's unique event id
            event_type: e.g. customer.subscription.created
            customer_id: Processor customer the event concerns
            subscription_id: Processor subscription the event concerns

        Returns:
            True if the event was new, False if it had already been processed
        """
        if self.event_repository.exists(event_id):
            logger.info("subscription_event_duplicate", event_id=event_id, event_type=event_type)
            return False

        effect = effect_of(event_type)
        try:
            with self.uow:
                user = self._find_user(effect, customer_id, subscription_id)
                if user is not None:
                    if effect is SubscriptionEffect.SUBSCRIBE:
                        user.subscribe(subscription_id)
                        self.user_repository.save(user)
                    elif effect is SubscriptionEffect.UNSUBSCRIBE:
                        user.unsubscribe()
                        self.user_repository.save(user)

                self.event_repository.add(
                    SubscriptionEvent.create(
                        event_id=event_id,
                        event_type=event_type,
                        user_id=user.id if user else None,
                        created_at=self.clock.now(),
                    )
                )
                self.uow.commit()
        except DuplicateSubscriptionEventError:
            # Another delivery of the same event committed first
            logger.info("subscription_event_duplicate", event_id=event_id, event_type=event_type)
            return False

        logger.info(
            "subscription_event_applied",
            event_id=event_id,
            event_type=event_type,
            effect=str(effect),
            user_id=user.id.value if user else None,
        )
        return True

    def _find_user(
        self,
        effect: SubscriptionEffect,
        customer_id: str | None,
        subscription_id: str | None,
    ) -> User | None:
        if effect is SubscriptionEffect.NONE:
            return None
        user = None
        if customer_id:
            user = self.user_repository.find_by_payment_customer_id(customer_id)
        if user is None and subscription_id:
            user = self.user_repository.find_by_payment_subscription_id(subscription_id)
        if user is None:
            logger.warning(
                "subscription_event_user_not_found",
                customer_id=customer_id,
                subscription_id=subscription_id,
            )
        return user
