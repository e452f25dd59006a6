"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ecommerce.dao.user import UserORM
from ecommerce.domain.common.value_objects.ids import UserId
from ecommerce.domain.identity.entities.user import User
from ecommerce.exceptions import UserNotFoundError
from ecommerce.infrastructure.identity.mappers.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_username(self, username: str) -> User | None:
        stmt = select(UserORM).where(UserORM.username == username)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Returns:
            Saved user entity with database-generated values

        Raises:
            IntegrityError: If the username or email is already taken
            UserNotFoundError: If an already persisted user has disappeared
        """
        if not user.id.is_persisted():
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.warning(f"Duplicate username or email: {user.username}")
                raise
            self.db.refresh(orm_model)
            logger.info(f"Created user {orm_model.username} (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

        stmt = select(UserORM).where(UserORM.id == user.id.value)
        existing = self.db.execute(stmt).scalar_one_or_none()
        if not existing:
            raise UserNotFoundError(f"用户不存在: {user.id.value}")

        orm_model = self.mapper.to_orm(user, existing)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated user {user.id.value}")
        return self.mapper.to_domain(orm_model)
