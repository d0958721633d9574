"""Patterns learned from Pass 1 and fed into Pass 2 boosting."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

from .taxonomy import Dimension

ONE_WEEK = timedelta(days=7)
ONE_MONTH = timedelta(days=30)
SIX_MONTHS = 6 * ONE_MONTH


class AgeBucket(str, Enum):
    RECENT = "recent"  # < 1 week
    ACTIVE = "active"  # 1 week - 1 month
    STALE = "stale"  # 1 month - 6 months
    OLD = "old"  # > 6 months


def age_bucket(age: timedelta) -> AgeBucket:
    """Map a tab age onto its bucket (7d / 30d / 180d thresholds)."""
    if age < ONE_WEEK:
        return AgeBucket.RECENT
    if age < ONE_MONTH:
        return AgeBucket.ACTIVE
    if age < SIX_MONTHS:
        return AgeBucket.STALE
    return AgeBucket.OLD


@dataclass(frozen=True)
class LabelConfidence:
    label: str
    confidence: float


@dataclass(frozen=True)
class DomainDimensionMapping:
    """Dominant label for one domain/dimension, with up to two runners-up."""

    dominant: str
    confidence: float
    alternatives: tuple[LabelConfidence, ...] = ()


@dataclass(frozen=True)
class UncertainTab:
    tab_index: int
    tab_id: str
    avg_confidence: float


@dataclass(frozen=True)
class PatternStats:
    total_tabs: int
    uncertain_count: int
    domains_classified: int

    @property
    def uncertain_ratio(self) -> float:
        """Uncertain share of all tabs in the run (cache hits included)."""
        if self.total_tabs == 0:
            return 0.0
        return self.uncertain_count / self.total_tabs


@dataclass(frozen=True)
class LearnedPatterns:
    """Aggregate statistics of one run's Pass 1; never cached across runs."""

    domain_mappings: dict[str, dict[Dimension, DomainDimensionMapping]] = field(
        default_factory=dict
    )
    temporal_patterns: dict[AgeBucket, dict[Dimension, dict[str, int]]] = field(
        default_factory=lambda: {bucket: {} for bucket in AgeBucket}
    )
    global_distribution: dict[Dimension, dict[str, int]] = field(
        default_factory=lambda: {dimension: {} for dimension in Dimension}
    )
    uncertain_tabs: list[UncertainTab] = field(default_factory=list)
    stats: PatternStats = field(default_factory=lambda: PatternStats(0, 0, 0))

    def dominant_temporal_label(
        self,
        bucket: AgeBucket,
        dimension: Dimension,
    ) -> tuple[str, int] | None:
        """Most frequent top label for a bucket/dimension, with its count."""
        counts = self.temporal_patterns.get(bucket, {}).get(dimension)
        if not counts:
            return None
        label, count = max(counts.items(), key=lambda item: item[1])
        return label, count
