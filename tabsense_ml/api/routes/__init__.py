"""API route handlers."""

from tabsense_ml.api.routes import classify, health

__all__ = ["classify", "health"]
