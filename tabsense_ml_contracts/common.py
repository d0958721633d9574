"""Shared models for classification contracts."""

from pydantic import BaseModel, Field


class LabelScore(BaseModel):
    label: str
    score: float = Field(..., ge=0.0, le=1.0)


class DimensionScores(BaseModel):
    """Scores of one dimension, index-aligned with ``labels``."""

    labels: list[str]
    scores: list[float]
    top_k: list[LabelScore] = Field(default_factory=list)
