"""Repository for ContentItem domain entities."""

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, UserId
from examelement.domain.study.entities.content_item import ContentItem
from examelement.infrastructure.study.mappers.content_item_mapper import ContentItemMapper
from examelement.models import ContentItem as ContentItemORM


class ContentRepository:
    """Repository for ContentItem domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ContentItemMapper()

    def find_by_id(self, item_id: ContentItemId, owner_id: UserId) -> ContentItem | None:
        """
        Find a content item by ID with user ownership check.

        Args:
            item_id: The content item ID
            owner_id: The user ID for ownership verification

        Returns:
            ContentItem entity if found and owned by user, None otherwise
            (deleted items count as not found)
        """
        stmt = select(ContentItemORM).where(
            ContentItemORM.id == item_id.value,
            ContentItemORM.user_id == owner_id.value,
            ContentItemORM.deleted_at.is_(None),
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id_for_review(self, item_id: ContentItemId) -> ContentItem | None:
        """
        Load an item for a reviewer and lock its row until the transaction ends.

        Reviews of one item queue behind each other, so the last review always
        sees every earlier review's answers when it checks for completeness.
        """
        stmt = (
            select(ContentItemORM)
            .where(ContentItemORM.id == item_id.value)
            .with_for_update(of=ContentItemORM)
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_owner(
        self,
        owner_id: UserId,
        content_type: ContentType | None = None,
        subject: str | None = None,
        topic: str | None = None,
    ) -> list[ContentItem]:
        """
        Get a user's content items.

        Returns:
            List of content item entities ordered by created_at DESC
        """
        stmt = select(ContentItemORM).where(
            ContentItemORM.user_id == owner_id.value,
            ContentItemORM.deleted_at.is_(None),
        )
        if content_type is not None:
            stmt = stmt.where(ContentItemORM.content_type == str(content_type))
        if subject is not None:
            stmt = stmt.where(ContentItemORM.subject == subject)
        if topic is not None:
            stmt = stmt.where(ContentItemORM.topic == topic)
        stmt = stmt.order_by(ContentItemORM.created_at.desc(), ContentItemORM.id.desc())
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def add(self, item: ContentItem) -> ContentItem:
        """
        Insert a new content item with its questions.

        Returns:
            Saved entity with database-generated ids
        """
        orm_model = self.mapper.to_orm(item)
        self.db.add(orm_model)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def mark_submitted(self, item_id: ContentItemId, submitted_at: datetime) -> bool:
        """
        Set submitted_at if it is still NULL.

        The WHERE clause makes concurrent submissions of one item race safely:
        only one UPDATE can match.
        """
        stmt = (
            update(ContentItemORM)
            .where(
                ContentItemORM.id == item_id.value,
                ContentItemORM.submitted_at.is_(None),
            )
            .values(submitted_at=submitted_at)
        )
        result = self.db.execute(stmt)
        return (getattr(result, "rowcount", 0) or 0) == 1

    def mark_deleted(self, item_id: ContentItemId, deleted_at: datetime) -> bool:
        """Set deleted_at if it is still NULL. The row and its questions stay."""
        stmt = (
            update(ContentItemORM)
            .where(
                ContentItemORM.id == item_id.value,
                ContentItemORM.deleted_at.is_(None),
            )
            .values(deleted_at=deleted_at)
        )
        result = self.db.execute(stmt)
        return (getattr(result, "rowcount", 0) or 0) == 1
