from .classification import SQLClassificationCache

__all__ = ["SQLClassificationCache"]
