"""Classification request/response models."""

from datetime import datetime

from pydantic import BaseModel, Field

from .common import DimensionScores
from .tabs import TabInput

# -----------------------------------------------------------------------------
# Single tab
# -----------------------------------------------------------------------------


class ClassifyTabRequest(BaseModel):
    tab: TabInput
    use_cache: bool = True


class TabClassification(BaseModel):
    """Classification of one tab on all dimensions."""

    tab_id: str
    classifications: dict[str, DimensionScores]
    model_version: str
    classified_at: datetime
    cached: bool = False
    refined_in_pass2: bool = False
    confidence_improvement: float | None = None


class ClassifyTabResponse(BaseModel):
    result: TabClassification
    inference_time_ms: int = Field(..., ge=0)


# -----------------------------------------------------------------------------
# Two-pass batch
# -----------------------------------------------------------------------------


class ClassifyBatchRequest(BaseModel):
    tabs: list[TabInput] = Field(..., min_length=1, max_length=5000)
    force_pass2: bool = False


class RunStats(BaseModel):
    """Timing and refinement statistics of a two-pass run."""

    total_tabs: int = Field(..., ge=0)
    cache_hits: int = Field(0, ge=0)
    pass1_time_ms: float = Field(..., ge=0)
    pass2_time_ms: float = Field(..., ge=0)
    total_time_ms: float = Field(..., ge=0)
    uncertain_refined: int = Field(..., ge=0)
    average_improvement: float


class PatternSummary(BaseModel):
    domains_classified: int = Field(..., ge=0)
    uncertain_count: int = Field(..., ge=0)
    global_distribution: dict[str, dict[str, int]] = Field(default_factory=dict)


class ClassifyBatchResponse(BaseModel):
    results: list[TabClassification]
    stats: RunStats
    patterns: PatternSummary
