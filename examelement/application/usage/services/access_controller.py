"""Ties the verified subscription flag to quota enforcement."""

import structlog

from examelement.application.identity.protocols.user_repository import UserRepositoryProtocol
from examelement.application.usage.services.quota_gate import QuotaGate
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.exceptions import UserNotFoundError
from examelement.domain.usage.value_objects.usage_quota import QuotaDecision

logger = structlog.get_logger(__name__)


class AccessController:
    """
    Authorizes generation requests.

    The subscription flag is read from the stored user (which only payment
    events change), never from the request.
    """

    def __init__(self, user_repository: UserRepositoryProtocol, quota_gate: QuotaGate) -> None:
        self.user_repository = user_repository
        self.quota_gate = quota_gate

    def authorize_generation(self, user_id: UserId, content_type: ContentType) -> QuotaDecision:
        """
        Consume quota for one generation. Called once, before the generator runs.

        Raises:
            UserNotFoundError: If the user does not exist
            QuotaExceededError: If the user is out of quota
        """
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id.value)
        return self.quota_gate.check_and_consume(user.id, content_type, user.is_subscribed)

    def revoke_generation(
        self, user_id: UserId, content_type: ContentType, decision: QuotaDecision
    ) -> None:
        """Undo an authorization whose generation did not produce an item."""
        if decision.consumed_on is None:
            return
        self.quota_gate.release(user_id, content_type, decision.consumed_on)
