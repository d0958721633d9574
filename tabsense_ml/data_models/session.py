"""Per-run session context derived from the full tab snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import TYPE_CHECKING

from .classification import SessionSummary

if TYPE_CHECKING:
    from .patterns import LearnedPatterns


@dataclass(frozen=True)
class TemporalPattern:
    all_recent: bool = False
    has_stale_tabs: bool = False
    age_spread: timedelta = timedelta(0)


@dataclass(frozen=True)
class SessionContext:
    """Read-only input to heuristic boosting, rebuilt for every run.

    ``learned_patterns`` is only set for Pass 2.
    """

    total_tabs: int = 0
    co_occurring_domains: frozenset[str] = frozenset()
    domain_clusters: dict[str, int] = field(default_factory=dict)
    session_age: timedelta = timedelta(0)
    temporal_pattern: TemporalPattern = field(default_factory=TemporalPattern)
    learned_patterns: LearnedPatterns | None = None

    def with_patterns(self, patterns: LearnedPatterns) -> SessionContext:
        return replace(self, learned_patterns=patterns)

    def summary(self, max_domains: int = 5) -> SessionSummary:
        return SessionSummary(
            total_tabs=self.total_tabs,
            co_occurring_domains=tuple(sorted(self.co_occurring_domains)[:max_domains]),
        )
