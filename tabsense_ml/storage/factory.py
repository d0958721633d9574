"""Cache backend selection."""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine

from tabsense_ml.config.settings import Settings

from .memory import InMemoryClassificationCache
from .protocols import ClassificationCache
from .sqlalchemy import (
    SQLClassificationCache,
    create_engine,
    create_session_maker,
    create_tables,
)

logger = logging.getLogger(__name__)


@dataclass
class CacheBundle:
    """The configured cache plus the engine to dispose at shutdown."""

    cache: ClassificationCache
    engine: AsyncEngine | None = None

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


async def create_cache(settings: Settings) -> CacheBundle:
    """Build the cache backend named by ``settings.cache_backend``."""
    if settings.cache_backend == "memory":
        logger.info("Using in-memory classification cache")
        return CacheBundle(cache=InMemoryClassificationCache())

    engine = create_engine(settings)
    await create_tables(engine)
    logger.info("Using database classification cache")
    return CacheBundle(
        cache=SQLClassificationCache(create_session_maker(engine)),
        engine=engine,
    )
