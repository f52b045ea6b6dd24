"""Identity domain exceptions."""

from examelement.domain.common.exceptions import EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be resolved."""

    def __init__(self, user_id: object) -> None:
        super().__init__("User", user_id)
