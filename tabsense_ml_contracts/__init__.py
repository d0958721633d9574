"""Tab classification API contracts.

This package defines the API contract between a host UI and the
classification service.
"""

from tabsense_ml_contracts.classify import (
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyTabRequest,
    ClassifyTabResponse,
    PatternSummary,
    RunStats,
    TabClassification,
)
from tabsense_ml_contracts.common import DimensionScores, LabelScore
from tabsense_ml_contracts.health import HealthResponse
from tabsense_ml_contracts.tabs import TabInput, TimestampUnit

__all__ = [
    # Common
    "DimensionScores",
    "LabelScore",
    # Tabs
    "TabInput",
    "TimestampUnit",
    # Classification
    "ClassifyTabRequest",
    "ClassifyTabResponse",
    "ClassifyBatchRequest",
    "ClassifyBatchResponse",
    "PatternSummary",
    "RunStats",
    "TabClassification",
    # Health
    "HealthResponse",
]
