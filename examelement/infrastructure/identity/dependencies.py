"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from examelement.application.identity.use_cases.get_user_by_id_use_case import (
    GetUserByIdUseCase,
)
from examelement.core import container
from examelement.domain.identity.entities.user import User
from examelement.domain.identity.exceptions import UserNotFoundError
from examelement.exceptions import CredentialsException
from examelement.infrastructure.common.di import inject_use_case
from examelement.infrastructure.identity.auth.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    use_case: GetUserByIdUseCase = Depends(inject_use_case(container.get_user_by_id_use_case)),
) -> User:
    """
    Get the current authenticated user from the access token.

    The subscription flag comes from the stored user, never from the token
    or the request.

    Args:
        token: JWT access token from Authorization header
        use_case: User lookup bound to the request's session

    Returns:
        User domain entity

    Raises:
        CredentialsException: If token is invalid or user not found
    """
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException

    try:
        return use_case.get_user(user_id)
    except UserNotFoundError:
        raise CredentialsException from None
