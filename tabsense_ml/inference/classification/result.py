"""Orchestration run structures."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from tabsense_ml.data_models import ClassificationResult, LearnedPatterns

Phase = Literal["pass1", "pass2"]


@dataclass(frozen=True)
class RunProgress:
    phase: Phase
    processed: int
    total: int


ProgressCallback = Callable[[RunProgress], None]


@dataclass(frozen=True)
class OrchestrationStats:
    """Timing and refinement figures for one run (times in milliseconds)."""

    total_tabs: int
    pass1_time_ms: float
    pass2_time_ms: float
    uncertain_refined: int
    average_improvement: float
    cache_hits: int = 0

    @property
    def total_time_ms(self) -> float:
        return self.pass1_time_ms + self.pass2_time_ms


@dataclass
class OrchestrationResult:
    """Final output of a two-pass run; ``results`` follows the input order."""

    results: list[ClassificationResult]
    patterns: LearnedPatterns
    stats: OrchestrationStats

