"""Daily generation limits per subscription tier."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.content_type import ContentType

DEFAULT_FREE_LIMITS: Mapping[ContentType, int] = MappingProxyType(
    {
        ContentType.FLASHCARD: 1,
        ContentType.QUIZ: 0,
        ContentType.MOCK_EXAM: 3,
    }
)


@dataclass(frozen=True)
class QuotaPolicy:
    """
    Free-tier daily limits. Subscribers are unlimited for every content type.

    A limit of 0 makes the content type premium-only.
    """

    free_limits: Mapping[ContentType, int] = field(default_factory=lambda: DEFAULT_FREE_LIMITS)

    def __post_init__(self) -> None:
        for content_type in ContentType:
            limit = self.free_limits.get(content_type)
            if limit is None or limit < 0:
                raise ValidationError(
                    "Free-tier limit must be a non-negative integer",
                    field=str(content_type),
                    value=limit,
                )

    def daily_limit(self, content_type: ContentType, is_subscribed: bool) -> int | None:
        """Today's limit for the tier, or None when unlimited."""
        if is_subscribed:
            return None
        return self.free_limits[content_type]

    @classmethod
    def from_limits(cls, flashcard: int, quiz: int, mock_exam: int) -> "QuotaPolicy":
        return cls(
            free_limits=MappingProxyType(
                {
                    ContentType.FLASHCARD: flashcard,
                    ContentType.QUIZ: quiz,
                    ContentType.MOCK_EXAM: mock_exam,
                }
            )
        )
