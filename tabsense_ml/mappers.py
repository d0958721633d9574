"""Conversions between API contracts and engine data models."""

from tabsense_ml_contracts import (
    DimensionScores,
    LabelScore,
    TabClassification,
    TabInput,
    TimestampUnit,
)

from tabsense_ml.data_models import ClassificationResult, TabRecord


def to_tab_record(tab: TabInput, unit: TimestampUnit | None = None) -> TabRecord:
    """Convert an API tab, normalizing its timestamp.

    ``unit`` overrides the tab's own ``timestamp_unit``.
    """
    return TabRecord.from_raw(
        tab.id,
        title=tab.title,
        url=tab.url,
        domain=tab.domain,
        last_active=tab.last_active,
        unit=unit or tab.timestamp_unit,
        inactive=tab.inactive,
    )


def to_tab_classification(
    result: ClassificationResult,
    cached: bool = False,
) -> TabClassification:
    return TabClassification(
        tab_id=result.tab_id,
        classifications={
            dimension.value: DimensionScores(
                labels=list(score.labels),
                scores=list(score.scores),
                top_k=[LabelScore(label=i.label, score=i.score) for i in score.top_k],
            )
            for dimension, score in result.classifications.items()
        },
        model_version=result.metadata.model_version,
        classified_at=result.metadata.classified_at,
        cached=cached,
        refined_in_pass2=result.refined_in_pass2,
        confidence_improvement=result.confidence_improvement,
    )
