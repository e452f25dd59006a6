from typing import Protocol

from ecommerce.domain.common.value_objects.ids import UserId
from ecommerce.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_username(self, username: str) -> User | None: ...

    def save(self, user: User) -> User: ...


class TokenVerifierProtocol(Protocol):
    def verify_access_token(self, token: str) -> int:
        """Return the user id carried by the token or raise InvalidTokenError."""
        ...
