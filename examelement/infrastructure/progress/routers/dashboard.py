"""API endpoint for the progress dashboard."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from examelement.application.progress.use_cases.get_dashboard_use_case import (
    MAX_HISTORY_DAYS,
    GetDashboardUseCase,
)
from examelement.core import container
from examelement.domain.common.exceptions import DomainError
from examelement.domain.identity.entities.user import User
from examelement.exceptions import ExamElementError
from examelement.infrastructure.common.di import inject_use_case
from examelement.infrastructure.identity.dependencies import get_current_user
from examelement.infrastructure.progress.schemas import (
    DashboardResponse,
    PerformanceHistoryResponse,
    SubjectAnalyticsResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/dashboard", tags=["progress"])


@router.get("", response_model=DashboardResponse, status_code=status.HTTP_200_OK)
def get_dashboard(
    current_user: Annotated[User, Depends(get_current_user)],
    subject: Annotated[str | None, Query(max_length=100)] = None,
    topic: Annotated[str | None, Query(max_length=200)] = None,
    use_case: GetDashboardUseCase = Depends(inject_use_case(container.get_dashboard_use_case)),
) -> DashboardResponse:
    """
    Progress across subjects, topics and content types.

    Figures are recomputed from the progress ledger on every request.
    """
    try:
        dashboard = use_case.get_dashboard(current_user.id.value, subject=subject, topic=topic)
        return DashboardResponse.from_domain(dashboard)
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_build_dashboard", user_id=current_user.id.value, error=str(e), exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/analytics/{subject}",
    response_model=SubjectAnalyticsResponse,
    status_code=status.HTTP_200_OK,
)
def get_subject_analytics(
    subject: Annotated[str, Path(min_length=1, max_length=100)],
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetDashboardUseCase = Depends(inject_use_case(container.get_dashboard_use_case)),
) -> SubjectAnalyticsResponse:
    """Per-topic progress plus the ten latest graded quizzes and mock exams of a subject."""
    analytics = use_case.get_subject_analytics(current_user.id.value, subject)
    return SubjectAnalyticsResponse.from_domain(analytics)


@router.get(
    "/history/{subject}",
    response_model=PerformanceHistoryResponse,
    status_code=status.HTTP_200_OK,
)
def get_performance_history(
    subject: Annotated[str, Path(min_length=1, max_length=100)],
    current_user: Annotated[User, Depends(get_current_user)],
    days: Annotated[int, Query(ge=1, le=MAX_HISTORY_DAYS)] = 30,
    use_case: GetDashboardUseCase = Depends(inject_use_case(container.get_dashboard_use_case)),
) -> PerformanceHistoryResponse:
    """Daily quiz and mock-exam results of a subject, oldest day first, for charts."""
    history = use_case.get_history(current_user.id.value, subject, days=days)
    return PerformanceHistoryResponse.from_domain(history)
