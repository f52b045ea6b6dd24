"""Use case for getting a user by ID (used internally by dependency injection)."""

import structlog

from examelement.application.identity.protocols.user_repository import UserRepositoryProtocol
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.entities.user import User
from examelement.domain.identity.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)


class GetUserByIdUseCase:
    """Resolve the user behind a verified access token."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Args:
            user_id: User's ID taken from the token subject

        Returns:
            User entity, including the current subscription flag

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            logger.info("token_user_not_found", user_id=user_id)
            raise UserNotFoundError(user_id)
        return user
