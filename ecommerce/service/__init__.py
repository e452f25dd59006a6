"""
Business service layer.

Implements the core business logic: transaction management and data
consistency, caching strategies, and conversion between DTOs and domain
objects. Services depend on repository and verifier protocols, never on
concrete infrastructure.
"""

from ecommerce.service.current_user_service import CurrentUserService
from ecommerce.service.user_query_service import UserQueryService

__all__ = ["CurrentUserService", "UserQueryService"]
