"""Use case for starting a subscription checkout."""

import structlog

from examelement.application.billing.protocols.payment_gateway import (
    CheckoutSession,
    PaymentGatewayProtocol,
)
from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.identity.protocols.user_repository import UserRepositoryProtocol
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class StartCheckoutUseCase:
    """
    Open a checkout for the premium subscription.

    The user is linked to a payment customer before the checkout opens, and
    the link is committed first. Subscription events that arrive after
    payment name that customer, which is how they find the user.
    """

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        payment_gateway: PaymentGatewayProtocol,
        uow: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.payment_gateway = payment_gateway
        self.uow = uow

    def start(self, user_id: int) -> CheckoutSession:
        """
        Create (or reuse) the user's payment customer and open a checkout.

        Args:
            user_id: Verified id of the user subscribing

        Returns:
            The checkout session the client redirects to

        Raises:
            UserNotFoundError: If the user does not exist
            PaymentProviderError: If the payment processor fails
        """
        with self.uow:
            user = self.user_repository.find_by_id(UserId(user_id))
            if user is None:
                raise UserNotFoundError(user_id)

            if user.payment_customer_id is None:
                customer_id = self.payment_gateway.create_customer(user.email, user_id)
                user.link_payment_customer(customer_id)
                user = self.user_repository.save(user)
                self.uow.commit()
                logger.info("payment_customer_linked", user_id=user_id, customer_id=customer_id)

        assert user.payment_customer_id is not None
        session = self.payment_gateway.create_checkout_session(user.payment_customer_id, user_id)
        logger.info("checkout_started", user_id=user_id, session_id=session.session_id)
        return session
