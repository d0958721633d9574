"""Tab classification pipeline.

Components, in data-flow order:
- extract_features (tab -> text)
- ClassifierAdapter (text -> raw scores, one call per dimension)
- HeuristicBooster (raw -> boosted scores)
- PatternLearner (Pass 1 results -> learned patterns)
- TabClassificationOrchestrator (batching, cache, two passes)
"""

from .adapter import ClassifierAdapter
from .booster import HeuristicBooster
from .context import build_session_context
from .defaults import DEFAULT_CLASSIFICATIONS, DEFAULT_MODEL_VERSION, default_classification
from .domain_knowledge import DomainHint, DomainKnowledge
from .features import extract_features, is_sufficient
from .orchestrator import TabClassificationOrchestrator
from .patterns import PatternLearner
from .result import OrchestrationResult, OrchestrationStats, ProgressCallback, RunProgress

__all__ = [
    "DEFAULT_CLASSIFICATIONS",
    "DEFAULT_MODEL_VERSION",
    "ClassifierAdapter",
    "DomainHint",
    "DomainKnowledge",
    "HeuristicBooster",
    "OrchestrationResult",
    "OrchestrationStats",
    "PatternLearner",
    "ProgressCallback",
    "RunProgress",
    "TabClassificationOrchestrator",
    "build_session_context",
    "default_classification",
    "extract_features",
    "is_sufficient",
]
