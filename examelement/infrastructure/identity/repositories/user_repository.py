"""Repository for User domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.entities.user import User
from examelement.infrastructure.identity.mappers.user_mapper import UserMapper
from examelement.models import User as UserORM


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        orm_model = self.db.get(UserORM, user_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_payment_customer_id(self, customer_id: str) -> User | None:
        stmt = select(UserORM).where(UserORM.payment_customer_id == customer_id)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_payment_subscription_id(self, subscription_id: str) -> User | None:
        stmt = select(UserORM).where(UserORM.payment_subscription_id == subscription_id)
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity (create or update).

        Args:
            user: The user entity to save

        Returns:
            Saved user entity with database-generated values
        """
        if user.id.value == 0:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
        else:
            existing = self.db.get(UserORM, user.id.value)
            if not existing:
                raise ValueError(f"User {user.id.value} not found")
            orm_model = self.mapper.to_orm(user, existing)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
