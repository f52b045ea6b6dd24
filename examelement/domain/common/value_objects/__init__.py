from .content_type import ContentType
from .ids import (
    AnswerRecordId,
    ContentItemId,
    LedgerEntryId,
    QuestionId,
    SubscriptionEventId,
    UserId,
)
from .rounding import round_half_up

__all__ = [
    "AnswerRecordId",
    "ContentItemId",
    "ContentType",
    "LedgerEntryId",
    "QuestionId",
    "SubscriptionEventId",
    "UserId",
    "round_half_up",
]
