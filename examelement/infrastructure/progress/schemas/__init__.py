from .dashboard_schemas import (
    ContentTypeProgressResponse,
    DailyPerformanceResponse,
    DashboardResponse,
    ItemResultResponse,
    PerformanceHistoryResponse,
    ProgressSummaryResponse,
    SubjectAnalyticsResponse,
    SubjectBreakdownResponse,
    TopicPerformanceResponse,
    WeakTopicResponse,
)

__all__ = [
    "ContentTypeProgressResponse",
    "DailyPerformanceResponse",
    "DashboardResponse",
    "ItemResultResponse",
    "PerformanceHistoryResponse",
    "ProgressSummaryResponse",
    "SubjectAnalyticsResponse",
    "SubjectBreakdownResponse",
    "TopicPerformanceResponse",
    "WeakTopicResponse",
]
