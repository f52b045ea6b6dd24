"""Repository for processed payment processor events."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from examelement.domain.billing.entities.subscription_event import SubscriptionEvent
from examelement.domain.billing.exceptions import DuplicateSubscriptionEventError
from examelement.infrastructure.billing.mappers.subscription_event_mapper import (
    SubscriptionEventMapper,
)
from examelement.models import SubscriptionEvent as SubscriptionEventORM


class SubscriptionEventRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SubscriptionEventMapper()

    def exists(self, event_id: str) -> bool:
        stmt = select(SubscriptionEventORM.id).where(SubscriptionEventORM.event_id == event_id)
        return self.db.execute(stmt).first() is not None

    def add(self, event: SubscriptionEvent) -> SubscriptionEvent:
        """
        Record an event.

        Raises:
            DuplicateSubscriptionEventError: If the event id is already stored
        """
        orm_model = self.mapper.to_orm(event)
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError as e:
            raise DuplicateSubscriptionEventError(event.event_id) from e
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
