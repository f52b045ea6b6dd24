"""Use case for fetching and listing a user's content items."""

from examelement.application.study.services.content_store import ContentStore
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, UserId
from examelement.domain.study.entities.content_item import ContentItem


class FetchContentUseCase:
    """Read access to content items, always scoped to the requesting user."""

    def __init__(self, content_store: ContentStore) -> None:
        """Initialize use case with dependencies."""
        self.content_store = content_store

    def get_item(self, item_id: int, user_id: int) -> ContentItem:
        """
        Get one of the user's items.

        Raises:
            ContentAccessDeniedError: If the item is missing or belongs to someone else
        """
        return self.content_store.get(ContentItemId(item_id), UserId(user_id))

    def list_items(
        self,
        user_id: int,
        content_type: ContentType | None = None,
        subject: str | None = None,
        topic: str | None = None,
    ) -> list[ContentItem]:
        """List the user's items, newest first."""
        return self.content_store.list(
            UserId(user_id), content_type=content_type, subject=subject, topic=topic
        )
