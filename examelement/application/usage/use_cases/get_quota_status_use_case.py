"""Use case for showing today's generation usage."""

from examelement.application.identity.protocols.user_repository import UserRepositoryProtocol
from examelement.application.usage.services.quota_gate import QuotaGate
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.exceptions import UserNotFoundError
from examelement.domain.usage.value_objects.usage_quota import QuotaUsage


class GetQuotaStatusUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol, quota_gate: QuotaGate) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.quota_gate = quota_gate

    def get_status(self, user_id: int) -> list[QuotaUsage]:
        """
        Today's usage per content type.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return self.quota_gate.status(user.id, user.is_subscribed)
