"""Mapper for User ORM ↔ Domain conversion."""

from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.entities.user import User
from examelement.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=UserId(orm_model.id),
            email=orm_model.email,
            is_subscribed=orm_model.is_subscribed,
            payment_customer_id=orm_model.payment_customer_id,
            payment_subscription_id=orm_model.payment_subscription_id,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.email = domain_entity.email
            orm_model.is_subscribed = domain_entity.is_subscribed
            orm_model.payment_customer_id = domain_entity.payment_customer_id
            orm_model.payment_subscription_id = domain_entity.payment_subscription_id
            return orm_model

        # Create new
        return UserORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            email=domain_entity.email,
            is_subscribed=domain_entity.is_subscribed,
            payment_customer_id=domain_entity.payment_customer_id,
            payment_subscription_id=domain_entity.payment_subscription_id,
        )
