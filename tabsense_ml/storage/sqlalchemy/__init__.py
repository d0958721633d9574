"""SQLAlchemy persistence layer for the result cache."""

from .engine import create_engine, create_session_maker, create_tables
from .repositories import SQLClassificationCache
from .tables import Base, ClassificationCacheTable

__all__ = [
    # Engine
    "create_engine",
    "create_session_maker",
    "create_tables",
    # Tables
    "Base",
    "ClassificationCacheTable",
    # Repositories
    "SQLClassificationCache",
]
