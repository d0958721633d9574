"""Test fixtures for the tab classification engine."""

import pytest
from tabsense_ml.config.settings import Settings
from tabsense_ml.inference import ClassifierHandle, TabClassificationOrchestrator
from tabsense_ml.storage import InMemoryClassificationCache

from tests.shared.fixtures import NOW, FakeZeroShotModel


@pytest.fixture
def settings() -> Settings:
    """Settings without env files and without inter-batch delay."""
    return Settings(
        _env_file=None,
        batch_delay_seconds=0.0,
        cache_backend="memory",
        classifier_timeout_seconds=5.0,
    )


@pytest.fixture
def fake_model() -> FakeZeroShotModel:
    return FakeZeroShotModel()


@pytest.fixture
def handle(fake_model: FakeZeroShotModel) -> ClassifierHandle:
    return ClassifierHandle.from_model(fake_model)


@pytest.fixture
def cache() -> InMemoryClassificationCache:
    return InMemoryClassificationCache()


@pytest.fixture
def orchestrator(
    handle: ClassifierHandle,
    cache: InMemoryClassificationCache,
    settings: Settings,
) -> TabClassificationOrchestrator:
    return TabClassificationOrchestrator(handle, cache, settings, clock=lambda: NOW)
