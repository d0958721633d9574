"""Heuristic score boosting.

Boosts are applied in a fixed order, each on the result of the previous
one:

1. Learned patterns (Pass 2 only): domain mappings and age-bucket trends
2. Curated domain knowledge
3. Temporal decay for tabs older than a week
4. Fallback communication/search heuristics (only without a knowledge hit)
5. Inactive tabs

Inputs are never modified; every boost produces a new ``DimensionScore``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING

from tabsense_ml.config.domains import COMMUNICATION_DOMAINS, SEARCH_DOMAINS
from tabsense_ml.data_models import (
    DIMENSIONS,
    Dimension,
    DimensionScore,
    LearnedPatterns,
    SessionContext,
    TabRecord,
    age_bucket,
)

from .domain_knowledge import DomainHint, DomainKnowledge

if TYPE_CHECKING:
    from tabsense_ml.config.settings import Settings

logger = logging.getLogger(__name__)

Scores = dict[Dimension, DimensionScore]


def _matches(domain: str, candidates: tuple[str, ...]) -> bool:
    return any(domain == d or domain.endswith("." + d) for d in candidates)


class HeuristicBooster:
    """Adjusts raw classifier scores using domain, age and session signals."""

    def __init__(self, settings: Settings, knowledge: DomainKnowledge | None = None):
        self._settings = settings
        self._knowledge = knowledge if knowledge is not None else DomainKnowledge()

    def boost(
        self,
        raw: Mapping[Dimension, DimensionScore],
        context: SessionContext,
        tab: TabRecord,
        now: datetime,
    ) -> Scores:
        scores: Scores = dict(raw)

        if context.learned_patterns is not None:
            self._apply_learned(scores, context.learned_patterns, tab, now)

        hint = self._knowledge.lookup(tab.domain)
        if hint is not None:
            self._apply_knowledge(scores, hint)

        self._apply_decay(scores, tab, now)

        if hint is None:
            self._apply_fallback(scores, tab.domain)

        if tab.inactive:
            self._boost(scores, Dimension.STATUS, "maybe", self._settings.inactive_maybe_boost)
            self._boost(scores, Dimension.STATUS, "to-do", -self._settings.inactive_todo_penalty)

        return scores

    @staticmethod
    def _boost(scores: Scores, dimension: Dimension, label: str, amount: float) -> None:
        if dimension in scores:
            scores[dimension] = scores[dimension].with_boost(label, amount)

    def _apply_learned(
        self,
        scores: Scores,
        patterns: LearnedPatterns,
        tab: TabRecord,
        now: datetime,
    ) -> None:
        s = self._settings

        mappings = patterns.domain_mappings.get(tab.domain, {}) if tab.domain else {}
        for dimension, mapping in mappings.items():
            if mapping.confidence <= s.learned_min_confidence:
                continue
            self._boost(
                scores, dimension, mapping.dominant,
                mapping.confidence * s.learned_dominant_weight,
            )
            for alt in mapping.alternatives:
                if alt.confidence > s.learned_alternative_min_confidence:
                    self._boost(
                        scores, dimension, alt.label,
                        alt.confidence * s.learned_alternative_weight,
                    )

        total = patterns.stats.total_tabs
        if total <= 0:
            return
        bucket = age_bucket(tab.age(now))
        for dimension in DIMENSIONS:
            dominant = patterns.dominant_temporal_label(bucket, dimension)
            if dominant is None:
                continue
            label, count = dominant
            share = count / total
            if share > s.temporal_min_share:
                self._boost(scores, dimension, label, share * s.temporal_weight)

    def _apply_knowledge(self, scores: Scores, hint: DomainHint) -> None:
        s = self._settings
        if hint.content_type in ("communication", "search"):
            amount = s.knowledge_content_type_boost
        else:
            amount = s.knowledge_content_boost
        self._boost(scores, Dimension.CONTENT_TYPE, hint.content_type, amount)
        self._boost(scores, Dimension.INTENT, hint.common_intent, s.knowledge_intent_boost)

    def _apply_decay(self, scores: Scores, tab: TabRecord, now: datetime) -> None:
        if tab.age(now) > self._settings.stale_after:
            self._boost(scores, Dimension.STATUS, "reference", self._settings.stale_boost)
            self._boost(scores, Dimension.STATUS, "maybe", self._settings.stale_boost)

    def _apply_fallback(self, scores: Scores, domain: str) -> None:
        if not domain:
            return
        s = self._settings
        if _matches(domain, COMMUNICATION_DOMAINS):
            self._boost(
                scores, Dimension.CONTENT_TYPE, "communication", s.fallback_communication_boost
            )
        if _matches(domain, SEARCH_DOMAINS):
            self._boost(scores, Dimension.CONTENT_TYPE, "search", s.fallback_search_boost)
            self._boost(scores, Dimension.INTENT, "informational", s.fallback_search_intent_boost)
