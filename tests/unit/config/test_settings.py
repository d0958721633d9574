"""Tests for settings and engine errors."""

from datetime import timedelta

import pytest
from tabsense_ml.config.settings import Settings
from tabsense_ml.errors import (
    ClassificationError,
    ErrorCode,
    ModelLoadError,
    RunCancelledError,
    TabsenseMLError,
)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.batch_size == 10
        assert settings.cache_ttl == timedelta(hours=24)
        assert settings.stale_after == timedelta(days=7)
        assert settings.max_feature_chars == 2048
        assert settings.uncertainty_threshold == 0.5
        assert settings.pass2_min_uncertain_ratio == 0.05

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABSENSE_ML_BATCH_SIZE", "25")
        monkeypatch.setenv("TABSENSE_ML_CACHE_BACKEND", "database")

        settings = Settings(_env_file=None)

        assert settings.batch_size == 25
        assert settings.cache_backend == "database"

    def test_rejects_unknown_backend(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, cache_backend="redis")


class TestErrors:
    def test_model_load_error(self) -> None:
        error = ModelLoadError("distilbert", "no such file")

        assert isinstance(error, TabsenseMLError)
        assert error.code == ErrorCode.MODEL_LOAD_FAILED
        assert "distilbert" in str(error)
        assert error.details == {"model_name": "distilbert", "reason": "no such file"}

    def test_classification_error_lists_dimensions(self) -> None:
        error = ClassificationError({"status": "timed out", "intent": "boom"}, tab_id="3")

        assert str(error) == "Classification failed for dimension(s): intent, status"
        assert error.failures["status"] == "timed out"
        assert error.details["tab_id"] == "3"

    def test_run_cancelled_error(self) -> None:
        error = RunCancelledError("pass2", 4, 9)

        assert error.code == ErrorCode.RUN_CANCELLED
        assert "pass2 (4/9)" in str(error)
