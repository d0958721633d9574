"""Pattern learning: aggregate Pass 1 results for Pass 2 boosting."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

import numpy as np

from tabsense_ml.data_models import (
    DIMENSIONS,
    AgeBucket,
    ClassificationResult,
    Dimension,
    DomainDimensionMapping,
    LabelConfidence,
    LearnedPatterns,
    PatternStats,
    TabRecord,
    UncertainTab,
    age_bucket,
)

if TYPE_CHECKING:
    from tabsense_ml.config.settings import Settings

logger = logging.getLogger(__name__)

SYNTHETIC_DOMAIN = "about"
MAX_ALTERNATIVES = 2


class _DomainVotes:
    """Score-weighted label votes for one domain."""

    def __init__(self) -> None:
        self.count = 0
        self.votes: dict[Dimension, dict[str, float]] = {d: {} for d in DIMENSIONS}

    def add(self, top_labels: dict[Dimension, tuple[str, float]]) -> None:
        for dimension, (label, score) in top_labels.items():
            bucket = self.votes[dimension]
            bucket[label] = bucket.get(label, 0.0) + score
        self.count += 1

    def normalize(self) -> dict[Dimension, DomainDimensionMapping]:
        mappings: dict[Dimension, DomainDimensionMapping] = {}
        for dimension, votes in self.votes.items():
            if not votes:
                continue
            ranked = sorted(votes.items(), key=lambda item: item[1], reverse=True)
            (dominant, total), rest = ranked[0], ranked[1 : 1 + MAX_ALTERNATIVES]
            mappings[dimension] = DomainDimensionMapping(
                dominant=dominant,
                confidence=total / self.count,
                alternatives=tuple(
                    LabelConfidence(label, vote / self.count) for label, vote in rest
                ),
            )
        return mappings


class PatternLearner:
    """Extracts domain, temporal and uncertainty patterns from a run.

    ``results`` and ``tabs`` are index-aligned. Results without a topK
    entry for a dimension simply do not vote on it.
    """

    def __init__(self, settings: Settings):
        self._min_score = settings.domain_mapping_min_score
        self._uncertainty_threshold = settings.uncertainty_threshold

    def extract_patterns(
        self,
        results: Sequence[ClassificationResult],
        tabs: Sequence[TabRecord],
        now: datetime,
    ) -> LearnedPatterns:
        domain_votes: dict[str, _DomainVotes] = defaultdict(_DomainVotes)
        temporal: dict[AgeBucket, dict[Dimension, Counter[str]]] = {
            bucket: {} for bucket in AgeBucket
        }
        distribution: dict[Dimension, Counter[str]] = {d: Counter() for d in DIMENSIONS}
        uncertain: list[UncertainTab] = []

        for index, (result, tab) in enumerate(zip(results, tabs)):
            tops: dict[Dimension, tuple[str, float]] = {}
            for dimension in DIMENSIONS:
                top_k = result.classifications[dimension].top_k
                if top_k:
                    tops[dimension] = (top_k[0].label, top_k[0].score)

            # 1. Domain mappings: only when every dimension is confident
            if self._usable_domain(tab.domain) and len(tops) == len(DIMENSIONS):
                if all(score > self._min_score for _, score in tops.values()):
                    domain_votes[tab.domain].add(tops)

            # 2. Temporal tallies and 3. global distribution
            bucket = temporal[age_bucket(tab.age(now))]
            for dimension, (label, _) in tops.items():
                bucket.setdefault(dimension, Counter())[label] += 1
                distribution[dimension][label] += 1

            # 4. Uncertainty
            avg_top = float(np.mean([result.classifications[d].top_score for d in DIMENSIONS]))
            if avg_top < self._uncertainty_threshold:
                uncertain.append(UncertainTab(index, tab.id, avg_top))

        patterns = LearnedPatterns(
            domain_mappings={
                domain: votes.normalize() for domain, votes in domain_votes.items()
            },
            temporal_patterns={
                bucket: {d: dict(c) for d, c in dims.items()}
                for bucket, dims in temporal.items()
            },
            global_distribution={d: dict(c) for d, c in distribution.items()},
            uncertain_tabs=uncertain,
            stats=PatternStats(
                total_tabs=len(tabs),
                uncertain_count=len(uncertain),
                domains_classified=len(domain_votes),
            ),
        )

        logger.info(
            "Extracted patterns: domains=%d, uncertain=%d (%.1f%%)",
            patterns.stats.domains_classified,
            patterns.stats.uncertain_count,
            patterns.stats.uncertain_ratio * 100,
        )
        return patterns

    @staticmethod
    def _usable_domain(domain: str) -> bool:
        return bool(domain) and domain != SYNTHETIC_DOMAIN
