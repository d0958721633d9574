"""Two-pass tab classification orchestrator.

Pass 1 classifies every tab without a fresh cached result, in batches
with a cooperative yield between them. The learned patterns of Pass 1
then decide whether a second pass is worth it: uncertain tabs are
re-classified with the patterns feeding the heuristic booster.

Usage:
    orchestrator = TabClassificationOrchestrator(handle, cache, settings)
    run = await orchestrator.classify_two_pass(tabs)
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tabsense_ml.config.settings import get_settings
from tabsense_ml.data_models import (
    ClassificationMetadata,
    ClassificationResult,
    SessionContext,
    TabRecord,
)
from tabsense_ml.errors import ClassificationError, RunCancelledError

from .adapter import ClassifierAdapter
from .booster import HeuristicBooster
from .context import build_session_context
from .defaults import default_classification
from .features import extract_features, is_sufficient
from .patterns import PatternLearner
from .result import (
    OrchestrationResult,
    OrchestrationStats,
    ProgressCallback,
    RunProgress,
)

if TYPE_CHECKING:
    from tabsense_ml.config.settings import Settings
    from tabsense_ml.inference._models import ClassifierHandle
    from tabsense_ml.storage import ClassificationCache

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Pass 2 reports progress every n-th tab
PASS2_PROGRESS_EVERY = 5


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class TabClassificationOrchestrator:
    """Application service for tab classification.

    Created once by the host with an injected classifier handle and
    cache. A ``ModelLoadError`` aborts the run and reaches the caller;
    per-tab classifier failures fall back to the default classification.
    """

    def __init__(
        self,
        handle: ClassifierHandle,
        cache: ClassificationCache,
        settings: Settings | None = None,
        *,
        booster: HeuristicBooster | None = None,
        learner: PatternLearner | None = None,
        clock: Clock = _utcnow,
    ) -> None:
        self._settings = settings or get_settings()
        self._cache = cache
        self._adapter = ClassifierAdapter(handle, self._settings.classifier_timeout_seconds)
        self._booster = booster if booster is not None else HeuristicBooster(self._settings)
        self._learner = learner if learner is not None else PatternLearner(self._settings)
        self._clock = clock

    # ------------------------------------------------------------------
    # Single tab
    # ------------------------------------------------------------------

    async def classify_tab(
        self,
        tab: TabRecord,
        context: SessionContext | None = None,
    ) -> ClassificationResult:
        """Classify one tab, bypassing the cache."""
        return await self._classify(tab, context, self._clock())

    async def get_or_classify(
        self,
        tab: TabRecord,
        context: SessionContext | None = None,
    ) -> tuple[ClassificationResult, bool]:
        """Cache-first classification of one tab.

        Returns the result and whether it came from the cache.
        """
        now = self._clock()
        cached = await self._fresh_cached(tab, now)
        if cached is not None:
            return cached, True

        result = await self._classify(tab, context, now)
        await self._cache.set(tab.id, result)
        return result, False

    async def _classify(
        self,
        tab: TabRecord,
        context: SessionContext | None,
        now: datetime,
    ) -> ClassificationResult:
        text = extract_features(tab, self._settings.max_feature_chars)
        if text is None or not is_sufficient(text, self._settings.min_feature_length):
            logger.debug("Tab %s: insufficient features, using default", tab.id)
            return default_classification(tab.id, now)

        try:
            raw = await self._adapter.classify_dimensions(text, tab_id=tab.id)
        except ClassificationError as exc:
            logger.warning("Tab %s: %s, using default", tab.id, exc)
            return default_classification(tab.id, now)

        boosted = self._booster.boost(raw, context or SessionContext(), tab, now)
        return ClassificationResult(
            tab_id=tab.id,
            classifications=boosted,
            metadata=ClassificationMetadata(
                model_version=self._settings.model_version,
                classified_at=now,
                session_context_summary=context.summary() if context else None,
            ),
        )

    async def _fresh_cached(self, tab: TabRecord, now: datetime) -> ClassificationResult | None:
        cached = await self._cache.get(tab.id)
        if cached is not None and cached.is_fresh(now, self._settings.cache_ttl):
            return cached
        return None

    # ------------------------------------------------------------------
    # Sweeps
    # ------------------------------------------------------------------

    async def classify_all(
        self,
        tabs: Sequence[TabRecord],
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> list[ClassificationResult]:
        """Single-pass sweep: classify every tab without a fresh cached result.

        Returns one result per tab, in input order.
        """
        now = self._clock()
        context = build_session_context(tabs, now)
        results, _ = await self._run_pass1(tabs, context, now, on_progress, cancel_event)
        return results

    async def classify_two_pass(
        self,
        tabs: Sequence[TabRecord],
        force_pass2: bool = False,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> OrchestrationResult:
        """Run Pass 1, learn patterns, then refine uncertain tabs in Pass 2.

        Raises
        ------
        ModelLoadError
            If the classifier could not be loaded.
        RunCancelledError
            If ``cancel_event`` was set; checked between batches.
        """
        now = self._clock()
        context = build_session_context(tabs, now)
        logger.info("Starting two-pass classification: %d tabs", len(tabs))

        # === Pass 1 ===
        start = time.perf_counter()
        results, cache_hits = await self._run_pass1(
            tabs, context, now, on_progress, cancel_event
        )
        pass1_time = _elapsed_ms(start)
        logger.info("Pass 1 complete in %.0fms (%d cache hits)", pass1_time, cache_hits)

        # === Patterns ===
        patterns = self._learner.extract_patterns(results, tabs, now)
        uncertain = patterns.uncertain_tabs
        ratio = patterns.stats.uncertain_ratio
        should_run = force_pass2 or (
            len(uncertain) > 0 and ratio >= self._settings.pass2_min_uncertain_ratio
        )

        if not should_run:
            logger.info("Skipping Pass 2 (%.1f%% uncertain)", ratio * 100)
            return OrchestrationResult(
                results=results,
                patterns=patterns,
                stats=OrchestrationStats(
                    total_tabs=len(tabs),
                    pass1_time_ms=pass1_time,
                    pass2_time_ms=0.0,
                    uncertain_refined=0,
                    average_improvement=0.0,
                    cache_hits=cache_hits,
                ),
            )

        # === Pass 2 ===
        logger.info("Pass 2: re-classifying %d uncertain tabs", len(uncertain))
        start = time.perf_counter()
        enriched = context.with_patterns(patterns)
        total_improvement = 0.0

        for i, item in enumerate(uncertain):
            if cancel_event is not None and cancel_event.is_set():
                raise RunCancelledError("pass2", i, len(uncertain))

            tab = tabs[item.tab_index]
            refined = await self._classify(tab, enriched, now)
            improvement = refined.avg_top_score - item.avg_confidence
            total_improvement += improvement

            refined = replace(refined, refined_in_pass2=True, confidence_improvement=improvement)
            results[item.tab_index] = refined
            await self._cache.set(tab.id, refined)

            if on_progress is not None and i % PASS2_PROGRESS_EVERY == 0:
                on_progress(RunProgress("pass2", i + 1, len(uncertain)))

        pass2_time = _elapsed_ms(start)
        average = total_improvement / len(uncertain) if uncertain else 0.0
        logger.info(
            "Pass 2 complete in %.0fms, average confidence improvement %+.3f",
            pass2_time,
            average,
        )

        return OrchestrationResult(
            results=results,
            patterns=patterns,
            stats=OrchestrationStats(
                total_tabs=len(tabs),
                pass1_time_ms=pass1_time,
                pass2_time_ms=pass2_time,
                uncertain_refined=len(uncertain),
                average_improvement=average,
                cache_hits=cache_hits,
            ),
        )

    async def _run_pass1(
        self,
        tabs: Sequence[TabRecord],
        context: SessionContext,
        now: datetime,
        on_progress: ProgressCallback | None,
        cancel_event: asyncio.Event | None,
    ) -> tuple[list[ClassificationResult], int]:
        """Classify stale or missing tabs in batches; reuse fresh cache hits."""
        slots: list[ClassificationResult | None] = []
        pending: list[int] = []
        for index, tab in enumerate(tabs):
            cached = await self._fresh_cached(tab, now)
            if cached is None:
                pending.append(index)
            else:
                logger.debug("Tab %s: cache hit", tab.id)
                # Pass 2 markers belong to the run that refined the result
                cached = replace(cached, refined_in_pass2=False, confidence_improvement=None)
            slots.append(cached)

        cache_hits = len(tabs) - len(pending)
        logger.info("%d of %d tabs need classification", len(pending), len(tabs))

        batch_size = self._settings.batch_size
        for offset in range(0, len(pending), batch_size):
            if cancel_event is not None and cancel_event.is_set():
                raise RunCancelledError("pass1", offset, len(pending))

            for index in pending[offset : offset + batch_size]:
                tab = tabs[index]
                result = await self._classify(tab, context, now)
                await self._cache.set(tab.id, result)
                slots[index] = result

            processed = min(offset + batch_size, len(pending))
            if on_progress is not None:
                on_progress(RunProgress("pass1", processed, len(pending)))

            if processed < len(pending):
                await asyncio.sleep(self._settings.batch_delay_seconds)

        results = [slot for slot in slots if slot is not None]
        return results, cache_hits
