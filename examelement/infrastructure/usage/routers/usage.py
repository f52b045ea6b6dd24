"""API endpoint for today's generation usage."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from examelement.application.usage.use_cases.get_quota_status_use_case import (
    GetQuotaStatusUseCase,
)
from examelement.core import container
from examelement.domain.common.exceptions import DomainError
from examelement.domain.identity.entities.user import User
from examelement.exceptions import ExamElementError
from examelement.infrastructure.common.di import inject_use_case
from examelement.infrastructure.identity.dependencies import get_current_user
from examelement.infrastructure.usage.schemas import QuotaUsageResponse, UsageResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/usage", tags=["usage"])


@router.get("", response_model=UsageResponse, status_code=status.HTTP_200_OK)
def get_usage(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetQuotaStatusUseCase = Depends(inject_use_case(container.get_quota_status_use_case)),
) -> UsageResponse:
    """Generations used and left today, per content type."""
    try:
        quotas = use_case.get_status(current_user.id.value)
        return UsageResponse(
            is_subscribed=current_user.is_subscribed,
            quotas=[QuotaUsageResponse.from_domain(usage) for usage in quotas],
        )
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_get_usage", user_id=current_user.id.value, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
