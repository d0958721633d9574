"""Shared infrastructure for the classification engine.

Heavy or stateful resources created once by the host process (API
lifespan or CLI run) and shared by every request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tabsense_ml.inference._models import ClassifierHandle
from tabsense_ml.inference.classification import TabClassificationOrchestrator
from tabsense_ml.storage import CacheBundle, create_cache

if TYPE_CHECKING:
    from tabsense_ml.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class SharedInfrastructure:
    """Resources shared across all requests (singleton in app lifespan).

    - handle: the lazily loaded zero-shot model
    - caches: result cache plus the engine to dispose on shutdown
    - settings: application settings
    """

    handle: ClassifierHandle
    caches: CacheBundle
    settings: Settings
    orchestrator: TabClassificationOrchestrator = field(init=False)

    def __post_init__(self) -> None:
        self.orchestrator = TabClassificationOrchestrator(
            self.handle, self.caches.cache, self.settings
        )

    @classmethod
    async def create(
        cls,
        settings: Settings,
        handle: ClassifierHandle | None = None,
    ) -> SharedInfrastructure:
        """Create shared infrastructure from settings.

        With ``settings.preload_model`` the model is loaded and warmed up
        here instead of on the first request.
        """
        handle = handle or ClassifierHandle.from_settings(settings)
        caches = await create_cache(settings)
        infra = cls(handle=handle, caches=caches, settings=settings)
        if settings.preload_model:
            await handle.warmup()
        return infra

    async def close(self) -> None:
        await self.caches.close()
        logger.debug("Shared infrastructure closed")
