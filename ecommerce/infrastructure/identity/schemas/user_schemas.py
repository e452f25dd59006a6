"""Pydantic schemas for user API responses."""

from datetime import datetime

from pydantic import BaseModel, Field

from ecommerce.domain.identity.entities.user import User


class UserResponse(BaseModel):
    """Public view of a user record."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Login name")
    email: str = Field(..., description="Email address")
    phone: str | None = Field(None, description="Contact phone number")
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.value,
            username=user.username,
            email=user.email,
            phone=user.phone,
            created_at=user.created_at,
        )
