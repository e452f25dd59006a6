"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from ecommerce.domain.common.entity import Entity
from ecommerce.domain.common.exceptions import ValidationError
from ecommerce.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_USERNAME_LENGTH = 64
MAX_EMAIL_LENGTH = 100
MAX_PHONE_LENGTH = 20


def _require_text(field: str, value: str, max_length: int) -> None:
    if not value:
        raise ValidationError(f"{field.capitalize()} cannot be empty", field=field, value=value)
    if len(value) > max_length:
        raise ValidationError(
            f"{field.capitalize()} cannot exceed {max_length} characters", field=field, value=value
        )


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing a customer or operator account.

    Business Rules:
    - Username and email must be unique (enforced at repository level)
    - Username must be non-empty, max MAX_USERNAME_LENGTH chars
    - Email must be non-empty, max MAX_EMAIL_LENGTH chars
    - Phone is optional, max MAX_PHONE_LENGTH chars
    """

    id: UserId
    username: str
    email: str
    phone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _require_text("username", self.username, MAX_USERNAME_LENGTH)
        _require_text("email", self.email, MAX_EMAIL_LENGTH)
        if self.phone is not None and len(self.phone) > MAX_PHONE_LENGTH:
            raise ValidationError(
                f"Phone cannot exceed {MAX_PHONE_LENGTH} characters",
                field="phone",
                value=self.phone,
            )

    def update_email(self, new_email: str) -> None:
        """
        Update the user's email address.

        Raises:
            ValidationError: If email is invalid
        """
        _require_text("email", new_email, MAX_EMAIL_LENGTH)
        self.email = new_email

    @classmethod
    def create(cls, username: str, email: str, phone: str | None = None) -> "User":
        """Create a new, not yet persisted user."""
        return cls(id=UserId.generate(), username=username, email=email, phone=phone)

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        username: str,
        email: str,
        phone: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            username=username,
            email=email,
            phone=phone,
            created_at=created_at,
            updated_at=updated_at,
        )
