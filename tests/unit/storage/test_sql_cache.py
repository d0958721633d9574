"""Tests for the SQL result cache (SQLite via aiosqlite)."""

from collections.abc import AsyncGenerator
from dataclasses import replace
from pathlib import Path

import pytest
import pytest_asyncio
from tabsense_ml.config.settings import Settings
from tabsense_ml.data_models import ClassificationMetadata, SessionSummary
from tabsense_ml.inference import default_classification
from tabsense_ml.storage import (
    CacheBundle,
    InMemoryClassificationCache,
    SQLClassificationCache,
    create_cache,
    create_engine,
    create_session_maker,
    create_tables,
)

from tests.shared.fixtures import NOW


@pytest.fixture
def db_settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        cache_backend="database",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'cache.db'}",
    )


@pytest_asyncio.fixture
async def sql_cache(db_settings: Settings) -> AsyncGenerator[SQLClassificationCache, None]:
    engine = create_engine(db_settings)
    await create_tables(engine)
    yield SQLClassificationCache(create_session_maker(engine))
    await engine.dispose()


class TestSQLClassificationCache:
    @pytest.mark.asyncio
    async def test_get_missing(self, sql_cache: SQLClassificationCache) -> None:
        assert await sql_cache.get("nope") is None

    @pytest.mark.asyncio
    async def test_round_trip(self, sql_cache: SQLClassificationCache) -> None:
        result = replace(
            default_classification("42", NOW),
            metadata=ClassificationMetadata(
                model_version="distilbert-v1",
                classified_at=NOW,
                session_context_summary=SessionSummary(3, ("a.com", "b.com")),
            ),
            refined_in_pass2=True,
            confidence_improvement=0.12,
        )

        await sql_cache.set("42", result)
        loaded = await sql_cache.get("42")

        assert loaded is not None
        assert loaded.tab_id == "42"
        assert loaded.metadata == result.metadata
        assert loaded.refined_in_pass2
        assert loaded.confidence_improvement == pytest.approx(0.12)
        assert loaded.top_labels() == result.top_labels()

    @pytest.mark.asyncio
    async def test_set_upserts(self, sql_cache: SQLClassificationCache) -> None:
        await sql_cache.set("1", default_classification("1", NOW))
        newer = replace(
            default_classification("1", NOW),
            metadata=ClassificationMetadata(model_version="distilbert-v1", classified_at=NOW),
        )
        await sql_cache.set("1", newer)

        loaded = await sql_cache.get("1")
        assert loaded is not None
        assert loaded.metadata.model_version == "distilbert-v1"

    @pytest.mark.asyncio
    async def test_clear(self, sql_cache: SQLClassificationCache) -> None:
        await sql_cache.set("1", default_classification("1", NOW))
        await sql_cache.set("2", default_classification("2", NOW))

        assert await sql_cache.clear() == 2
        assert await sql_cache.get("1") is None


class TestCreateCache:
    @pytest.mark.asyncio
    async def test_memory_backend(self, settings: Settings) -> None:
        bundle = await create_cache(settings)

        assert isinstance(bundle.cache, InMemoryClassificationCache)
        assert bundle.engine is None
        await bundle.close()

    @pytest.mark.asyncio
    async def test_database_backend(self, db_settings: Settings) -> None:
        bundle: CacheBundle = await create_cache(db_settings)
        try:
            assert isinstance(bundle.cache, SQLClassificationCache)
            await bundle.cache.set("1", default_classification("1", NOW))
            assert await bundle.cache.get("1") is not None
        finally:
            await bundle.close()
