"""FastAPI dependencies for authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ecommerce.core import container, inject_service
from ecommerce.domain.identity.entities.user import User
from ecommerce.service.current_user_service import CurrentUserService

# auto_error is off so a missing header surfaces as INVALID_TOKEN
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    service: Annotated[
        CurrentUserService, Depends(inject_service(container.current_user_service))
    ],
) -> User:
    """
    Get the current authenticated user from the bearer token.

    Raises:
        InvalidTokenError: If the token is absent or invalid
        UserNotFoundError: If the token's user no longer exists
    """
    token = credentials.credentials if credentials else None
    return service.get_current_user(token)


CurrentUser = Annotated[User, Depends(get_current_user)]
