from typing import Annotated

from fastapi import APIRouter, Depends

from ecommerce.core import container, inject_service
from ecommerce.infrastructure.identity.dependencies import CurrentUser
from ecommerce.infrastructure.identity.schemas import UserResponse
from ecommerce.service.user_query_service import UserQueryService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me")
async def get_me(current_user: CurrentUser) -> UserResponse:
    """Get the current user's profile information."""
    return UserResponse.from_domain(current_user)


@router.get("/{user_id}")
async def get_user(
    user_id: int,
    service: Annotated[UserQueryService, Depends(inject_service(container.user_query_service))],
) -> UserResponse:
    """Get a user by ID. Unknown IDs answer USER_NOT_FOUND."""
    return UserResponse.from_domain(service.get_user(user_id))
