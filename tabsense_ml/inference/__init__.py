"""Inference module.

Orchestrator (for the API layer and CLI):
- TabClassificationOrchestrator: cache-aware two-pass classification

Pipeline components (for testing):
- extract_features, ClassifierAdapter, HeuristicBooster, PatternLearner
- DomainKnowledge: curated domain hints
"""

from __future__ import annotations

from ._models import ClassifierHandle, NLIClassifier, ZeroShotModel
from .classification import (
    ClassifierAdapter,
    DomainKnowledge,
    HeuristicBooster,
    OrchestrationResult,
    OrchestrationStats,
    PatternLearner,
    RunProgress,
    TabClassificationOrchestrator,
    build_session_context,
    default_classification,
    extract_features,
)
from .shared import SharedInfrastructure

__all__ = [
    # Orchestrator
    "TabClassificationOrchestrator",
    "SharedInfrastructure",
    "OrchestrationResult",
    "OrchestrationStats",
    "RunProgress",
    # Model
    "ClassifierHandle",
    "NLIClassifier",
    "ZeroShotModel",
    # Components
    "ClassifierAdapter",
    "DomainKnowledge",
    "HeuristicBooster",
    "PatternLearner",
    "build_session_context",
    "default_classification",
    "extract_features",
]
