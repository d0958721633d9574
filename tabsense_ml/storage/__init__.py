"""Result cache storage.

This module provides:
- `InMemoryClassificationCache`: process-local dict store (default)
- `sqlalchemy`: SQL persistence (table, engine helpers, repository)
"""

from .factory import CacheBundle, create_cache
from .memory import InMemoryClassificationCache
from .protocols import ClassificationCache
from .sqlalchemy import (
    Base,
    ClassificationCacheTable,
    SQLClassificationCache,
    create_engine,
    create_session_maker,
    create_tables,
)

__all__ = [
    # Protocol
    "ClassificationCache",
    # Stores
    "InMemoryClassificationCache",
    "SQLClassificationCache",
    # Wiring
    "CacheBundle",
    "create_cache",
    # SQLAlchemy
    "Base",
    "ClassificationCacheTable",
    "create_engine",
    "create_session_maker",
    "create_tables",
]
