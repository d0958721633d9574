"""Shared test fixtures."""

from tests.shared.fixtures.models import (
    CONFIDENT,
    NOW,
    UNCERTAIN,
    FakeZeroShotModel,
    make_tab,
)

__all__ = ["CONFIDENT", "NOW", "UNCERTAIN", "FakeZeroShotModel", "make_tab"]
