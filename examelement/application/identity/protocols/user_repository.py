"""Protocol for User repository."""

from typing import Protocol

from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_payment_customer_id(self, customer_id: str) -> User | None: ...

    def find_by_payment_subscription_id(self, subscription_id: str) -> User | None: ...

    def save(self, user: User) -> User:
        """Persist subscription state changes. Flushes; the caller commits."""
        ...
