"""Resolve the user behind a bearer token."""

from ecommerce.domain.identity.entities.user import User
from ecommerce.exceptions import InvalidTokenError
from ecommerce.service.protocols import TokenVerifierProtocol
from ecommerce.service.user_query_service import UserQueryService


class CurrentUserService:
    """Authenticate a request token and load its user."""

    def __init__(
        self,
        token_verifier: TokenVerifierProtocol,
        user_query_service: UserQueryService,
    ) -> None:
        self.token_verifier = token_verifier
        self.user_query_service = user_query_service

    def get_current_user(self, token: str | None) -> User:
        """
        Raises:
            InvalidTokenError: Token absent, malformed, expired or not an access token
            UserNotFoundError: Token subject has no user record
        """
        if not token:
            raise InvalidTokenError()
        user_id = self.token_verifier.verify_access_token(token)
        return self.user_query_service.get_user(user_id)
