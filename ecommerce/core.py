from collections.abc import Callable
from typing import TypeVar

from dependency_injector import containers, providers
from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from ecommerce.cache import CacheManager
from ecommerce.config import Settings, get_settings
from ecommerce.database import DatabaseSession
from ecommerce.infrastructure.identity.auth.token_verifier import JwtTokenVerifier
from ecommerce.infrastructure.identity.repositories.user_repository import UserRepository
from ecommerce.service.current_user_service import CurrentUserService
from ecommerce.service.user_query_service import UserQueryService

T = TypeVar("T")


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Application-scoped infrastructure
    cache = providers.Singleton(CacheManager.from_settings, settings=settings)
    token_verifier = providers.Singleton(
        JwtTokenVerifier,
        secret_key=settings.provided.SECRET_KEY,
    )

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)

    # Services
    user_query_service = providers.Factory(
        UserQueryService,
        user_repository=user_repository,
    )
    current_user_service = providers.Factory(
        CurrentUserService,
        token_verifier=token_verifier,
        user_query_service=user_query_service,
    )


# Initialize container
container = Container()


def configure_container(settings: Settings) -> None:
    """
    Bind the container to the settings of the application being built.

    Singletons built from earlier settings are dropped so the cache and the
    token verifier pick up the new values on next use.
    """
    container.settings.reset_override()
    container.settings.override(providers.Object(settings))
    container.cache.reset()
    container.token_verifier.reset()


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency that builds a service for the current request.

    The request's database session is bound to ``container.db`` only while
    the provider resolves; the built service keeps its own reference.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
