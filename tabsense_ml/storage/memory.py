"""In-process result cache."""

from tabsense_ml.data_models import ClassificationResult


class InMemoryClassificationCache:
    """Dict-backed cache; lives as long as the process."""

    def __init__(self) -> None:
        self._entries: dict[str, ClassificationResult] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, tab_id: str) -> ClassificationResult | None:
        return self._entries.get(tab_id)

    async def set(self, tab_id: str, result: ClassificationResult) -> None:
        self._entries[tab_id] = result

    async def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count
