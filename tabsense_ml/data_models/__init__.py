"""Engine data models.

These are plain immutable value objects; persistence mappings live in
``tabsense_ml.storage`` and API models in ``tabsense_ml_contracts``.
"""

from .classification import (
    TOP_K_SIZE,
    TOP_K_THRESHOLD,
    ClassificationMetadata,
    ClassificationResult,
    DimensionScore,
    LabelScore,
    SessionSummary,
)
from .patterns import (
    AgeBucket,
    DomainDimensionMapping,
    LabelConfidence,
    LearnedPatterns,
    PatternStats,
    UncertainTab,
    age_bucket,
)
from .session import SessionContext, TemporalPattern
from .tab import EpochUnit, TabRecord, domain_from_url, normalize_epoch
from .taxonomy import DIMENSION_LABELS, DIMENSIONS, Dimension

__all__ = [
    # Taxonomy
    "DIMENSIONS",
    "DIMENSION_LABELS",
    "Dimension",
    # Tabs
    "EpochUnit",
    "TabRecord",
    "domain_from_url",
    "normalize_epoch",
    # Results
    "TOP_K_SIZE",
    "TOP_K_THRESHOLD",
    "ClassificationMetadata",
    "ClassificationResult",
    "DimensionScore",
    "LabelScore",
    "SessionSummary",
    # Session
    "SessionContext",
    "TemporalPattern",
    # Patterns
    "AgeBucket",
    "DomainDimensionMapping",
    "LabelConfidence",
    "LearnedPatterns",
    "PatternStats",
    "UncertainTab",
    "age_bucket",
]
