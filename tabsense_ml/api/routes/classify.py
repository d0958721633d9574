"""Tab classification endpoints."""

import logging
import time

from fastapi import APIRouter
from tabsense_ml_contracts import (
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyTabRequest,
    ClassifyTabResponse,
    PatternSummary,
    RunStats,
)

from tabsense_ml.api.dependencies import OrchestratorDep
from tabsense_ml.inference import OrchestrationResult
from tabsense_ml.mappers import to_tab_classification, to_tab_record

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_batch_response(run: OrchestrationResult) -> ClassifyBatchResponse:
    stats = run.stats
    return ClassifyBatchResponse(
        results=[to_tab_classification(r) for r in run.results],
        stats=RunStats(
            total_tabs=stats.total_tabs,
            cache_hits=stats.cache_hits,
            pass1_time_ms=stats.pass1_time_ms,
            pass2_time_ms=stats.pass2_time_ms,
            total_time_ms=stats.total_time_ms,
            uncertain_refined=stats.uncertain_refined,
            average_improvement=stats.average_improvement,
        ),
        patterns=PatternSummary(
            domains_classified=run.patterns.stats.domains_classified,
            uncertain_count=run.patterns.stats.uncertain_count,
            global_distribution={
                dimension.value: counts
                for dimension, counts in run.patterns.global_distribution.items()
            },
        ),
    )


@router.post("/classify/tab", response_model=ClassifyTabResponse)
async def classify_tab(
    request: ClassifyTabRequest,
    orchestrator: OrchestratorDep,
) -> ClassifyTabResponse:
    """Classify a single tab (cache-first unless ``use_cache`` is false)."""
    start_time = time.perf_counter()
    tab = to_tab_record(request.tab)

    if request.use_cache:
        result, cached = await orchestrator.get_or_classify(tab)
    else:
        result, cached = await orchestrator.classify_tab(tab), False

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)
    logger.debug("POST /classify/tab: tab=%s cached=%s in %dms", tab.id, cached, elapsed_ms)
    return ClassifyTabResponse(
        result=to_tab_classification(result, cached=cached),
        inference_time_ms=elapsed_ms,
    )


@router.post("/classify/batch", response_model=ClassifyBatchResponse)
async def classify_batch(
    request: ClassifyBatchRequest,
    orchestrator: OrchestratorDep,
) -> ClassifyBatchResponse:
    """Run the two-pass classification over a tab snapshot."""
    logger.info(
        "POST /classify/batch: tabs=%d, force_pass2=%s",
        len(request.tabs),
        request.force_pass2,
    )
    tabs = [to_tab_record(tab) for tab in request.tabs]
    run = await orchestrator.classify_two_pass(tabs, force_pass2=request.force_pass2)
    return _to_batch_response(run)
