"""Application entry point and composition root."""

import structlog

from roleidm import __version__
from roleidm.application.identity_manager import IdentityManager
from roleidm.config import Settings, get_settings
from roleidm.infrastructure.persistence.memory import (
    MemoryRoleStore,
    create_memory_uow_factory,
)
from roleidm.infrastructure.persistence.postgres.connection import create_pool
from roleidm.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from roleidm.interfaces.api.app import create_app
from roleidm.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from roleidm.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def build_store(settings: Settings) -> tuple[object, list]:
    """Return the unit-of-work factory and middleware for the configured backend."""
    if settings.store_backend == "postgres":
        pool = create_pool(
            settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )
        return create_uow_factory(pool), [PoolLifespanMiddleware(pool)]

    store = MemoryRoleStore(seed_roles=settings.seed_role_names)
    return create_memory_uow_factory(store), []


def create_roleidm_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level, json_output=not settings.debug)

    uow_factory, middleware = build_store(settings)
    identity_manager = IdentityManager(uow_factory)

    logger.info(
        "app_created",
        version=__version__,
        store_backend=settings.store_backend,
        environment=settings.environment,
    )
    return create_app(identity_manager, uow_factory, middleware=middleware)


def main() -> None:
    """CLI entry point - run the API under uvicorn."""
    import uvicorn

    uvicorn.run(create_roleidm_app(), host="0.0.0.0", port=8000)
