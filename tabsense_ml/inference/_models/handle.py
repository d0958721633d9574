"""One-shot loader for the zero-shot classifier.

The handle replaces a module-level singleton: it is created once by the
host and injected into the orchestrator. The first call to ``get()``
starts the load in a task of its own; every caller, the first one
included, awaits that task and sees the same result or the same error.
Cancelling a caller never cancels the load. A failed load resets the
handle so a later call can retry.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from tabsense_ml.data_models import DIMENSIONS
from tabsense_ml.errors import ModelLoadError

from .nli import NLIClassifier
from .protocol import ZeroShotModel

if TYPE_CHECKING:
    from tabsense_ml.config.settings import Settings

logger = logging.getLogger(__name__)

ModelLoader = Callable[[], ZeroShotModel]


def _retrieve_exception(task: asyncio.Task[ZeroShotModel]) -> None:
    # Every caller may have been cancelled before a failed load finished
    if not task.cancelled():
        task.exception()


class ClassifierHandle:
    """Lazily loaded, shared zero-shot classifier."""

    def __init__(self, loader: ModelLoader, model_name: str = "zero-shot"):
        self._loader = loader
        self._model_name = model_name
        self._model: ZeroShotModel | None = None
        self._pending: asyncio.Task[ZeroShotModel] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> ClassifierHandle:
        """Handle that loads the HuggingFace pipeline named in settings."""
        def _load() -> ZeroShotModel:
            return NLIClassifier.load(settings.classifier_model, device=settings.device)

        return cls(_load, model_name=settings.classifier_model)

    @classmethod
    def from_model(cls, model: ZeroShotModel) -> ClassifierHandle:
        """Handle around an already loaded model."""
        handle = cls(lambda: model, model_name=model.model_name)
        handle._model = model
        return handle

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def is_loaded(self) -> bool:
        return self._model is not None

    @property
    def is_loading(self) -> bool:
        return self._pending is not None

    async def get(self) -> ZeroShotModel:
        """Return the loaded model, loading it on first use.

        Raises
        ------
        ModelLoadError
            If loading failed. Every caller waiting on that load receives
            the same error instance.
        """
        if self._model is not None:
            return self._model

        if self._pending is None:
            self._pending = asyncio.create_task(self._load())
            self._pending.add_done_callback(_retrieve_exception)

        # Shield so a cancelled caller does not cancel the shared load
        return await asyncio.shield(self._pending)

    async def _load(self) -> ZeroShotModel:
        logger.info("Loading classifier model: %s", self._model_name)
        start = time.perf_counter()

        try:
            model = await asyncio.to_thread(self._loader)
        except Exception as exc:
            logger.exception("Failed to load classifier model %s", self._model_name)
            raise ModelLoadError(self._model_name, str(exc) or type(exc).__name__) from exc
        finally:
            self._pending = None

        self._model = model
        logger.info(
            "Classifier model loaded in %dms: %s",
            (time.perf_counter() - start) * 1000,
            self._model_name,
        )
        return model

    async def warmup(self) -> None:
        """Load the model and run one dummy classification per dimension."""
        model = await self.get()
        for dimension in DIMENSIONS:
            await asyncio.to_thread(model.classify, "warmup", dimension.labels, True)
        logger.debug("Classifier warmed up: %s", self._model_name)

    def reset(self) -> None:
        """Forget the loaded model (the next ``get()`` loads again)."""
        self._model = None
