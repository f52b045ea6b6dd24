"""Mapper for SubscriptionEvent ORM ↔ Domain conversion."""

from examelement.domain.billing.entities.subscription_event import SubscriptionEvent
from examelement.domain.common.value_objects.ids import SubscriptionEventId, UserId
from examelement.models import SubscriptionEvent as SubscriptionEventORM


class SubscriptionEventMapper:
    def to_domain(self, orm_model: SubscriptionEventORM) -> SubscriptionEvent:
        return SubscriptionEvent(
            id=SubscriptionEventId(orm_model.id),
            event_id=orm_model.event_id,
            event_type=orm_model.event_type,
            user_id=UserId(orm_model.user_id) if orm_model.user_id else None,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: SubscriptionEvent) -> SubscriptionEventORM:
        orm_model = SubscriptionEventORM(
            event_id=domain_entity.event_id,
            event_type=domain_entity.event_type,
            user_id=domain_entity.user_id.value if domain_entity.user_id else None,
        )
        if domain_entity.created_at is not None:
            orm_model.created_at = domain_entity.created_at
        return orm_model
