"""Pydantic schemas for the progress dashboard."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from examelement.application.progress.use_cases.get_dashboard_use_case import (
    Dashboard,
    PerformanceHistory,
    SubjectAnalytics,
)
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.progress.services.progress_aggregator import (
    ContentTypeProgress,
    DailyPerformance,
    ItemResult,
    ProgressSummary,
    SubjectBreakdown,
    TopicPerformance,
    WeakTopic,
)


class ContentTypeProgressResponse(BaseModel):
    generated: int
    graded: int
    marks_earned: int
    marks_possible: int
    average_score: float | None = Field(
        None, description="Weighted average percentage; null until something is graded"
    )
    highest_score: float | None = Field(
        None, description="Best single item percentage; null until something is graded"
    )

    @classmethod
    def from_domain(cls, progress: ContentTypeProgress) -> "ContentTypeProgressResponse":
        average = progress.average_score
        return cls(
            generated=progress.generated,
            graded=progress.graded,
            marks_earned=progress.marks_earned,
            marks_possible=progress.marks_possible,
            average_score=float(average) if average is not None else None,
            highest_score=(
                float(progress.highest_score) if progress.highest_score is not None else None
            ),
        )


class ProgressSummaryResponse(BaseModel):
    subject: str | None
    topic: str | None
    total_generated: int
    by_content_type: dict[ContentType, ContentTypeProgressResponse]

    @classmethod
    def from_domain(cls, summary: ProgressSummary) -> "ProgressSummaryResponse":
        return cls(
            subject=summary.subject,
            topic=summary.topic,
            total_generated=summary.total_generated,
            by_content_type={
                content_type: ContentTypeProgressResponse.from_domain(
                    summary.for_type(content_type)
                )
                for content_type in ContentType
            },
        )


class SubjectBreakdownResponse(BaseModel):
    subject: str
    topics: list[str]
    summary: ProgressSummaryResponse

    @classmethod
    def from_domain(cls, breakdown: SubjectBreakdown) -> "SubjectBreakdownResponse":
        return cls(
            subject=breakdown.subject,
            topics=list(breakdown.topics),
            summary=ProgressSummaryResponse.from_domain(breakdown.summary),
        )


class WeakTopicResponse(BaseModel):
    subject: str
    topic: str
    content_type: ContentType
    average_score: float

    @classmethod
    def from_domain(cls, weak_topic: WeakTopic) -> "WeakTopicResponse":
        return cls(
            subject=weak_topic.subject,
            topic=weak_topic.topic,
            content_type=weak_topic.content_type,
            average_score=float(weak_topic.average_score),
        )


class DashboardResponse(BaseModel):
    summary: ProgressSummaryResponse
    subjects: list[SubjectBreakdownResponse]
    weak_topics: list[WeakTopicResponse]

    @classmethod
    def from_domain(cls, dashboard: Dashboard) -> "DashboardResponse":
        return cls(
            summary=ProgressSummaryResponse.from_domain(dashboard.summary),
            subjects=[SubjectBreakdownResponse.from_domain(s) for s in dashboard.subjects],
            weak_topics=[WeakTopicResponse.from_domain(w) for w in dashboard.weak_topics],
        )


class TopicPerformanceResponse(BaseModel):
    topic: str
    summary: ProgressSummaryResponse

    @classmethod
    def from_domain(cls, performance: TopicPerformance) -> "TopicPerformanceResponse":
        return cls(
            topic=performance.topic,
            summary=ProgressSummaryResponse.from_domain(performance.summary),
        )


class ItemResultResponse(BaseModel):
    item_id: int
    topic: str
    content_type: ContentType
    marks_earned: int
    marks_possible: int
    percentage: float
    graded_at: datetime | None

    @classmethod
    def from_domain(cls, result: ItemResult) -> "ItemResultResponse":
        return cls(
            item_id=result.item_id,
            topic=result.topic,
            content_type=result.content_type,
            marks_earned=result.marks_earned,
            marks_possible=result.marks_possible,
            percentage=float(result.percentage),
            graded_at=result.graded_at,
        )


class SubjectAnalyticsResponse(BaseModel):
    subject: str
    topics: list[TopicPerformanceResponse]
    recent_quizzes: list[ItemResultResponse]
    recent_mock_exams: list[ItemResultResponse]

    @classmethod
    def from_domain(cls, analytics: SubjectAnalytics) -> "SubjectAnalyticsResponse":
        return cls(
            subject=analytics.subject,
            topics=[TopicPerformanceResponse.from_domain(t) for t in analytics.topics],
            recent_quizzes=[ItemResultResponse.from_domain(r) for r in analytics.recent_quizzes],
            recent_mock_exams=[
                ItemResultResponse.from_domain(r) for r in analytics.recent_mock_exams
            ],
        )


class DailyPerformanceResponse(BaseModel):
    day: date
    quiz: ContentTypeProgressResponse
    mock_exam: ContentTypeProgressResponse

    @classmethod
    def from_domain(cls, daily: DailyPerformance) -> "DailyPerformanceResponse":
        return cls(
            day=daily.day,
            quiz=ContentTypeProgressResponse.from_domain(daily.for_type(ContentType.QUIZ)),
            mock_exam=ContentTypeProgressResponse.from_domain(
                daily.for_type(ContentType.MOCK_EXAM)
            ),
        )


class PerformanceHistoryResponse(BaseModel):
    subject: str
    since: date
    days: list[DailyPerformanceResponse]

    @classmethod
    def from_domain(cls, history: PerformanceHistory) -> "PerformanceHistoryResponse":
        return cls(
            subject=history.subject,
            since=history.since,
            days=[DailyPerformanceResponse.from_domain(d) for d in history.days],
        )
