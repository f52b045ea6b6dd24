"""Protocol for ContentItem repository."""

from datetime import datetime
from typing import Protocol

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, UserId
from examelement.domain.study.entities.content_item import ContentItem


class ContentRepositoryProtocol(Protocol):
    def find_by_id(self, item_id: ContentItemId, owner_id: UserId) -> ContentItem | None:
        """
        Find a content item by ID with ownership check.

        Returns:
            ContentItem with its questions if found, owned by the user and not
            deleted, None otherwise
        """
        ...

    def find_by_id_for_review(self, item_id: ContentItemId) -> ContentItem | None:
        """
        Find a content item regardless of owner. Only trusted graders go through this.

        Holds a lock on the item until the caller's transaction ends, so two
        reviews of the same item never run at the same time.
        """
        ...

    def find_by_owner(
        self,
        owner_id: UserId,
        content_type: ContentType | None = None,
        subject: str | None = None,
        topic: str | None = None,
    ) -> list[ContentItem]:
        """List a user's items that are not deleted, newest first."""
        ...

    def add(self, item: ContentItem) -> ContentItem:
        """Insert an item together with its questions. Flushes; the caller commits."""
        ...

    def mark_submitted(self, item_id: ContentItemId, submitted_at: datetime) -> bool:
        """
        Set submitted_at only if it is still unset.

        Returns:
            True if this call marked the item, False if it was already submitted
        """
        ...

    def mark_deleted(self, item_id: ContentItemId, deleted_at: datetime) -> bool:
        """
        Hide an item by setting deleted_at, only if it is still unset.

        Returns:
            True if this call deleted the item, False if it was already deleted
        """
        ...
