from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tabsense_ml.data_models import ClassificationResult
from tabsense_ml.storage.sqlalchemy.tables import ClassificationCacheTable


class SQLClassificationCache:
    """Result cache persisted in a SQL table.

    Opens a short-lived session per call so it can be shared by
    concurrent requests.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def get(self, tab_id: str) -> ClassificationResult | None:
        async with self._session_maker() as session:
            stmt = select(ClassificationCacheTable).where(
                ClassificationCacheTable.tab_id == tab_id
            )
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()

        if row is None:
            return None
        return ClassificationResult.from_dict(row.payload)

    async def set(self, tab_id: str, result: ClassificationResult) -> None:
        row = ClassificationCacheTable(
            tab_id=tab_id,
            model_version=result.metadata.model_version,
            classified_at=result.metadata.classified_at,
            payload=result.to_dict(),
        )
        async with self._session_maker() as session:
            await session.merge(row)
            await session.commit()

    async def clear(self) -> int:
        """Clear all cache entries. Returns count of deleted."""
        async with self._session_maker() as session:
            result = await session.execute(delete(ClassificationCacheTable))
            await session.commit()
        return result.rowcount or 0  # type: ignore[union-attr, return-value]
