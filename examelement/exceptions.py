"""Custom exception hierarchy for the Exam Element application."""

from fastapi import HTTPException
from starlette import status


class ExamElementError(Exception):
    """Base exception for all Exam Element errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(ExamElementError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ForbiddenError(ExamElementError):
    """The caller may not act on the resource."""

    def __init__(self, message: str = "Not allowed to perform this action") -> None:
        """Initialize with message and 403 status code."""
        super().__init__(message, status_code=403)


class ContentAccessDeniedError(ForbiddenError):
    """
    Content item is missing or owned by someone else.

    Both cases share one message so responses never reveal whether an item exists.
    """

    def __init__(self) -> None:
        """Initialize with the shared message."""
        super().__init__("You do not have access to this content item")


class GeneratorError(ExamElementError):
    """The content generator failed, timed out or is unavailable."""

    def __init__(self, message: str = "Content generation failed. Please try again.") -> None:
        """Initialize with message and 502 status code."""
        super().__init__(message, status_code=502)


class PaymentProviderError(ExamElementError):
    """The payment processor rejected a call or is not configured."""

    def __init__(
        self,
        message: str = "Payments are unavailable. Please try again later.",
        status_code: int = 502,
    ) -> None:
        """Initialize with message and a 5xx status code."""
        super().__init__(message, status_code=status_code)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
