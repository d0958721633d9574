"""FastAPI application with lifespan management."""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import FastAPI

from tabsense_ml import __version__
from tabsense_ml.api.exception_handlers import setup_exception_handlers
from tabsense_ml.config import Settings, configure_logging, get_settings
from tabsense_ml.inference import ClassifierHandle, SharedInfrastructure

logger = logging.getLogger(__name__)

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


def _log_settings(settings: Settings) -> None:
    """Log current settings for debugging."""
    logger.info("=" * 60)
    logger.info("TabSense ML Service Configuration")
    logger.info("=" * 60)
    logger.info("  Log level: %s", settings.log_level)
    logger.info("  Classifier:")
    logger.info("    Model: %s (%s)", settings.classifier_model, settings.model_version)
    logger.info("    Device: %s", settings.device)
    logger.info("    Timeout: %s", settings.classifier_timeout_seconds)
    logger.info("    Preload: %s", settings.preload_model)
    logger.info("  Orchestration:")
    logger.info("    Batch size: %d (delay %.2fs)", settings.batch_size, settings.batch_delay_seconds)
    logger.info("    Cache TTL: %.1fh", settings.cache_ttl_hours)
    logger.info("    Pass 2 threshold: %.0f%%", settings.pass2_min_uncertain_ratio * 100)
    logger.info("  Cache backend: %s", settings.cache_backend)
    if settings.cache_backend == "database":
        logger.info("    Database: %s", settings.database_url.split("@")[-1])  # Hide password
    logger.info("=" * 60)


def make_lifespan(
    settings: Settings,
    handle: ClassifierHandle | None = None,
) -> Lifespan:
    """Lifespan that wires shared infrastructure into ``app.state``."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        _log_settings(settings)

        infra = await SharedInfrastructure.create(settings, handle=handle)
        app.state.infra = infra
        logger.info("ML service ready - orchestrator initialized")
        yield

        logger.info("Shutting down")
        await infra.close()
        del app.state.infra

    return lifespan


def create_app(
    settings: Settings | None = None,
    handle: ClassifierHandle | None = None,
) -> FastAPI:
    """Create FastAPI application.

    ``handle`` replaces the HuggingFace-backed classifier, e.g. in tests.
    """
    from tabsense_ml.api.routes import classify, health

    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="TabSense ML Service",
        description="Multi-dimensional browser tab classification",
        version=__version__,
        lifespan=make_lifespan(settings, handle),
    )
    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(classify.router, tags=["classification"])

    return app
