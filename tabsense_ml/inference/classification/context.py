"""Session context built once per orchestration run."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timedelta

from tabsense_ml.data_models import SessionContext, TabRecord, TemporalPattern

RECENT_WINDOW = timedelta(days=1)
STALE_AFTER = timedelta(days=7)


def build_session_context(tabs: Sequence[TabRecord], now: datetime) -> SessionContext:
    """Summarize the tab snapshot for heuristic boosting.

    Tabs without a timestamp count as age 0.
    """
    if not tabs:
        return SessionContext()

    domains = Counter(tab.domain for tab in tabs if tab.domain)
    ages = [tab.age(now) for tab in tabs]
    oldest, newest = max(ages), min(ages)

    return SessionContext(
        total_tabs=len(tabs),
        co_occurring_domains=frozenset(domains),
        domain_clusters=dict(domains),
        session_age=oldest,
        temporal_pattern=TemporalPattern(
            all_recent=oldest < RECENT_WINDOW,
            has_stale_tabs=oldest > STALE_AFTER,
            age_spread=oldest - newest,
        ),
    )
