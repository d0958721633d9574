"""Classifier adapter: three concurrent zero-shot calls per tab."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from tabsense_ml.data_models import DIMENSIONS, Dimension, DimensionScore, LabelScore
from tabsense_ml.errors import ClassificationError, ModelLoadError

if TYPE_CHECKING:
    from tabsense_ml.inference._models import ClassifierHandle

logger = logging.getLogger(__name__)


class ClassifierAdapter:
    """Runs the shared zero-shot model off the event loop.

    Every call first awaits the handle, so a model that cannot be loaded
    surfaces as ``ModelLoadError`` instead of a per-tab failure.
    """

    def __init__(self, handle: ClassifierHandle, timeout: float | None = None):
        self._handle = handle
        self._timeout = timeout

    async def classify(
        self,
        text: str,
        labels: Sequence[str],
        multi_label: bool = True,
    ) -> list[LabelScore]:
        """Score ``text`` against ``labels`` with the loaded model."""
        model = await self._handle.get()
        call = asyncio.to_thread(model.classify, text, tuple(labels), multi_label)
        if self._timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=self._timeout)

    async def classify_dimensions(
        self,
        text: str,
        tab_id: str | None = None,
    ) -> dict[Dimension, DimensionScore]:
        """Classify ``text`` on all dimensions concurrently.

        Raises
        ------
        ModelLoadError
            If the model could not be loaded.
        ClassificationError
            If any dimension call failed or timed out. The other calls
            still run to completion.
        """
        # Load (or join the pending load) before fanning out
        await self._handle.get()

        outcomes = await asyncio.gather(
            *(self.classify(text, dimension.labels) for dimension in DIMENSIONS),
            return_exceptions=True,
        )

        scores: dict[Dimension, DimensionScore] = {}
        failures: dict[str, str] = {}
        for dimension, outcome in zip(DIMENSIONS, outcomes):
            if isinstance(outcome, ModelLoadError | asyncio.CancelledError):
                raise outcome
            if isinstance(outcome, TimeoutError):
                failures[dimension.value] = "timed out"
            elif isinstance(outcome, BaseException):
                failures[dimension.value] = str(outcome) or type(outcome).__name__
            else:
                scores[dimension] = DimensionScore.from_ranked(dimension, outcome)

        if failures:
            raise ClassificationError(failures, tab_id=tab_id)
        return scores
