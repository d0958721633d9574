"""Classification result structures."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any

from .taxonomy import DIMENSIONS, Dimension

# topK shortlist: labels scoring strictly above the threshold, at most 3
TOP_K_THRESHOLD = 0.3
TOP_K_SIZE = 3


@dataclass(frozen=True)
class LabelScore:
    label: str
    score: float


@dataclass(frozen=True)
class DimensionScore:
    """Scores for one dimension, index-aligned with its label set.

    ``top_k`` is always derived from ``scores``; it is never stored.
    """

    labels: tuple[str, ...]
    scores: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.scores):
            msg = f"labels/scores length mismatch: {len(self.labels)} != {len(self.scores)}"
            raise ValueError(msg)

    @classmethod
    def from_ranked(
        cls,
        dimension: Dimension,
        ranked: Iterable[LabelScore],
    ) -> DimensionScore:
        """Build the index-aligned form from classifier output.

        Labels missing from the output get a score of 0.
        """
        score_map = {item.label: float(item.score) for item in ranked}
        labels = dimension.labels
        return cls(labels=labels, scores=tuple(score_map.get(label, 0.0) for label in labels))

    @property
    def top_k(self) -> tuple[LabelScore, ...]:
        ranked = sorted(
            (LabelScore(label, score) for label, score in zip(self.labels, self.scores)),
            key=lambda item: item.score,
            reverse=True,
        )
        return tuple(item for item in ranked if item.score > TOP_K_THRESHOLD)[:TOP_K_SIZE]

    @property
    def top_label(self) -> str | None:
        top = self.top_k
        return top[0].label if top else None

    @property
    def top_score(self) -> float:
        top = self.top_k
        return top[0].score if top else 0.0

    def score_of(self, label: str) -> float | None:
        if label not in self.labels:
            return None
        return self.scores[self.labels.index(label)]

    def with_boost(self, label: str, amount: float) -> DimensionScore:
        """Return a copy with ``label`` moved by ``amount``, clamped to [0, 1].

        Unknown labels leave the value untouched.
        """
        if label not in self.labels:
            return self
        index = self.labels.index(label)
        scores = list(self.scores)
        scores[index] = max(0.0, min(1.0, scores[index] + amount))
        return replace(self, scores=tuple(scores))

    def to_dict(self) -> dict[str, Any]:
        return {
            "labels": list(self.labels),
            "scores": list(self.scores),
            "top_k": [{"label": item.label, "score": item.score} for item in self.top_k],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DimensionScore:
        return cls(
            labels=tuple(data["labels"]),
            scores=tuple(float(s) for s in data["scores"]),
        )


@dataclass(frozen=True)
class SessionSummary:
    """Compact session info recorded on a result."""

    total_tabs: int
    co_occurring_domains: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassificationMetadata:
    model_version: str
    classified_at: datetime
    session_context_summary: SessionSummary | None = None


@dataclass(frozen=True)
class ClassificationResult:
    """Final output for one tab.

    Results are never mutated; a refresh or a Pass 2 refinement produces
    a new instance that supersedes the old one.
    """

    tab_id: str
    classifications: Mapping[Dimension, DimensionScore]
    metadata: ClassificationMetadata
    refined_in_pass2: bool = False
    confidence_improvement: float | None = None

    @property
    def is_default(self) -> bool:
        return self.metadata.model_version == "default"

    @property
    def avg_top_score(self) -> float:
        """Mean of the top score of each dimension (0 for an empty topK)."""
        return sum(self.classifications[d].top_score for d in DIMENSIONS) / len(DIMENSIONS)

    def top_labels(self) -> dict[Dimension, str | None]:
        return {d: self.classifications[d].top_label for d in DIMENSIONS}

    def age(self, now: datetime) -> timedelta:
        return now - self.metadata.classified_at

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        return self.age(now) < ttl

    def to_dict(self) -> dict[str, Any]:
        summary = self.metadata.session_context_summary
        return {
            "tab_id": self.tab_id,
            "classifications": {
                d.value: self.classifications[d].to_dict() for d in DIMENSIONS
            },
            "metadata": {
                "model_version": self.metadata.model_version,
                "classified_at": self.metadata.classified_at.isoformat(),
                "session_context_summary": (
                    {
                        "total_tabs": summary.total_tabs,
                        "co_occurring_domains": list(summary.co_occurring_domains),
                    }
                    if summary
                    else None
                ),
            },
            "refined_in_pass2": self.refined_in_pass2,
            "confidence_improvement": self.confidence_improvement,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClassificationResult:
        meta = data["metadata"]
        summary = meta.get("session_context_summary")
        return cls(
            tab_id=str(data["tab_id"]),
            classifications={
                Dimension(key): DimensionScore.from_dict(value)
                for key, value in data["classifications"].items()
            },
            metadata=ClassificationMetadata(
                model_version=meta["model_version"],
                classified_at=datetime.fromisoformat(meta["classified_at"]),
                session_context_summary=(
                    SessionSummary(
                        total_tabs=summary["total_tabs"],
                        co_occurring_domains=tuple(summary["co_occurring_domains"]),
                    )
                    if summary
                    else None
                ),
            ),
            refined_in_pass2=bool(data.get("refined_in_pass2", False)),
            confidence_improvement=data.get("confidence_improvement"),
        )
