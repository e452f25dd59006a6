"""Identity domain layer."""

from ecommerce.domain.identity.entities.user import User

__all__ = ["User"]
