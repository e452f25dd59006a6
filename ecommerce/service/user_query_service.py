"""Service for looking users up by identifier."""

import structlog

from ecommerce.domain.common.value_objects.ids import UserId
from ecommerce.domain.identity.entities.user import User
from ecommerce.exceptions import UserNotFoundError
from ecommerce.service.protocols import UserRepositoryProtocol

logger = structlog.get_logger(__name__)


class UserQueryService:
    """Read-side access to user records."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Args:
            user_id: User's ID

        Returns:
            User entity

        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = None
        if UserId.in_range(user_id):
            user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            logger.info("user_not_found", user_id=user_id)
            raise UserNotFoundError(f"用户不存在: {user_id}")
        return user
