from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils import resolve_env_file_path


class Settings(BaseSettings):
    """Tab classification engine configuration."""

    log_level: str = "INFO"

    # Zero-shot classifier
    classifier_model: str = "typeform/distilbert-base-uncased-mnli"
    model_version: str = "distilbert-v1"
    device: str = "cpu"  # cuda, or mps -> untested!
    classifier_timeout_seconds: float | None = 30.0
    preload_model: bool = False

    # Feature extraction (1 token ~= 4 chars, no real tokenizer involved)
    max_input_tokens: int = 512
    chars_per_token: int = 4
    min_feature_length: int = 3

    # Orchestration
    cache_ttl_hours: float = 24
    batch_size: int = 10
    batch_delay_seconds: float = 0.2
    uncertainty_threshold: float = 0.5
    pass2_min_uncertain_ratio: float = 0.05

    # Pattern learning
    domain_mapping_min_score: float = 0.4

    # Boosting: learned patterns (Pass 2 only)
    learned_min_confidence: float = 0.5
    learned_dominant_weight: float = 0.3
    learned_alternative_min_confidence: float = 0.3
    learned_alternative_weight: float = 0.15
    temporal_min_share: float = 0.1
    temporal_weight: float = 0.15

    # Boosting: curated domain knowledge
    knowledge_content_type_boost: float = 0.2
    knowledge_content_boost: float = 0.15
    knowledge_intent_boost: float = 0.15

    # Boosting: temporal decay
    stale_after_days: float = 7
    stale_boost: float = 0.1

    # Boosting: fallback domain heuristics
    fallback_communication_boost: float = 0.15
    fallback_search_boost: float = 0.15
    fallback_search_intent_boost: float = 0.1

    # Boosting: inactive tabs
    inactive_maybe_boost: float = 0.1
    inactive_todo_penalty: float = 0.1

    # Result cache
    cache_backend: Literal["memory", "database"] = "memory"
    database_url: str = "sqlite+aiosqlite:///tabsense_ml.db"
    database_echo: bool = False

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="TABSENSE_ML_",
        extra="ignore",
    )

    @property
    def max_feature_chars(self) -> int:
        return self.max_input_tokens * self.chars_per_token

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(hours=self.cache_ttl_hours)

    @property
    def stale_after(self) -> timedelta:
        return timedelta(days=self.stale_after_days)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
