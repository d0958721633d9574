"""Static fallback classification.

Used when a tab has too little text to classify or the classifier call
failed. The scores are fixed so the fallback is identical on every call.
"""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType

from tabsense_ml.data_models import (
    ClassificationMetadata,
    ClassificationResult,
    Dimension,
    DimensionScore,
)

DEFAULT_MODEL_VERSION = "default"

DEFAULT_CLASSIFICATIONS = MappingProxyType(
    {
        Dimension.INTENT: DimensionScore(
            labels=Dimension.INTENT.labels,
            scores=(0.5, 0.3, 0.2),
        ),
        Dimension.STATUS: DimensionScore(
            labels=Dimension.STATUS.labels,
            scores=(0.4, 0.3, 0.2, 0.1, 0.0),
        ),
        Dimension.CONTENT_TYPE: DimensionScore(
            labels=Dimension.CONTENT_TYPE.labels,
            scores=(0.6, 0.3, 0.1),
        ),
    }
)


def default_classification(tab_id: str, classified_at: datetime) -> ClassificationResult:
    """Fallback result: informational / to-read / content."""
    return ClassificationResult(
        tab_id=tab_id,
        classifications=DEFAULT_CLASSIFICATIONS,
        metadata=ClassificationMetadata(
            model_version=DEFAULT_MODEL_VERSION,
            classified_at=classified_at,
        ),
    )
