"""Application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecommerce.config import Settings, configure_logging, get_settings
from ecommerce.core import configure_container, container
from ecommerce.database import create_tables, dispose_engine, initialize_database, scan_mappers
from ecommerce.infrastructure.common.error_handlers import register_exception_handlers
from ecommerce.infrastructure.identity.routers import router as users_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Bring up the database, mappers and cache; tear them down on shutdown."""
    settings: Settings = app.state.settings

    initialize_database(settings)
    modules = scan_mappers()
    if settings.AUTO_CREATE_TABLES:
        create_tables()

    cache = container.cache()
    if settings.CACHE_ENABLED:
        cache.enable()
    else:
        cache.disable()

    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        mappers=len(modules),
        cache_enabled=cache.enabled,
    )
    try:
        yield
    finally:
        cache.clear()
        dispose_engine()
        logger.info("application_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    configure_container(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(users_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    async def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()


def main() -> None:
    uvicorn.run("ecommerce.main:app", host="0.0.0.0", port=8000)  # noqa: S104


if __name__ == "__main__":
    main()
