"""Storage layer protocols."""

from typing import Protocol, runtime_checkable

from tabsense_ml.data_models import ClassificationResult


@runtime_checkable
class ClassificationCache(Protocol):
    """Per-tab result store.

    The store does not judge freshness: ``get`` returns whatever was
    stored last, and callers compare ``classified_at`` against their TTL.
    """

    async def get(self, tab_id: str) -> ClassificationResult | None:
        """Return the stored result for a tab, if any."""
        ...

    async def set(self, tab_id: str, result: ClassificationResult) -> None:
        """Store a result, replacing any previous one for the tab."""
        ...

    async def clear(self) -> int:
        """Remove all entries. Returns the number removed."""
        ...
