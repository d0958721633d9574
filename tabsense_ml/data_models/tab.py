"""Tab snapshot records handed to the engine by the host."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Literal
from urllib.parse import urlsplit

EpochUnit = Literal["ms", "s", "auto"]

# Legacy heuristic for sources that do not say which unit they use
_SECONDS_CUTOFF = 10_000_000_000


def normalize_epoch(value: float | None, unit: EpochUnit = "ms") -> datetime | None:
    """Convert a raw epoch timestamp into an aware UTC datetime.

    This is the single place where epoch units are resolved. ``"auto"``
    treats values below 10^10 as seconds and everything else as
    milliseconds. Missing or non-positive values yield None.
    """
    if value is None or value <= 0:
        return None
    if unit == "auto":
        unit = "s" if value < _SECONDS_CUTOFF else "ms"
    seconds = value if unit == "s" else value / 1000
    return datetime.fromtimestamp(seconds, tz=UTC)


def domain_from_url(url: str) -> str:
    """Hostname of a URL, lowercased; empty string when it has none."""
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""


@dataclass(frozen=True)
class TabRecord:
    """Immutable tab snapshot for one classification run."""

    id: str
    title: str = ""
    url: str = ""
    domain: str = ""
    last_active_at: datetime | None = None
    inactive: bool = False

    @classmethod
    def from_raw(
        cls,
        tab_id: str | int,
        *,
        title: str | None = None,
        url: str | None = None,
        domain: str | None = None,
        last_active: float | None = None,
        unit: EpochUnit = "ms",
        inactive: bool = False,
    ) -> TabRecord:
        """Build a record from host data, normalizing the timestamp once."""
        url = url or ""
        return cls(
            id=str(tab_id),
            title=title or "",
            url=url,
            domain=(domain or domain_from_url(url)).lower(),
            last_active_at=normalize_epoch(last_active, unit),
            inactive=inactive,
        )

    def age(self, now: datetime) -> timedelta:
        """Time since the tab was last active (zero when unknown)."""
        if self.last_active_at is None:
            return timedelta(0)
        return now - self.last_active_at
