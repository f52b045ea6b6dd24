"""Translate application and domain exceptions into HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from examelement.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)
from examelement.domain.study.exceptions import InvalidGeneratedContentError
from examelement.domain.usage.exceptions import QuotaExceededError
from examelement.exceptions import ExamElementError

logger = structlog.get_logger(__name__)


async def exam_element_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ExamElementError)
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def quota_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, QuotaExceededError)
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={
            "detail": exc.message,
            "content_type": str(exc.content_type),
            "limit": exc.limit,
            "needs_subscription": True,
        },
    )


async def invalid_generated_content_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, InvalidGeneratedContentError)
    logger.warning("generated_content_invalid", path=request.url.path, reason=exc.reason)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": "The generated content was malformed. Please try again."},
    )


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainError)
    return JSONResponse(status_code=_domain_status(exc), content={"detail": exc.message})


def _domain_status(exc: DomainError) -> int:
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, BusinessRuleViolationError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install handlers for errors routers let through.

    More specific exception classes are matched first by Starlette, so the
    quota and malformed-content handlers win over the generic domain handler.
    """
    app.add_exception_handler(ExamElementError, exam_element_error_handler)
    app.add_exception_handler(QuotaExceededError, quota_exceeded_handler)
    app.add_exception_handler(InvalidGeneratedContentError, invalid_generated_content_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
