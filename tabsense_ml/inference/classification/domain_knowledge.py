"""Lookup over the curated domain knowledge table."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tabsense_ml.config.domains import KNOWN_DOMAINS

_MOBILE_PREFIX = re.compile(r"^(www\.|m\.|mobile\.)")


@dataclass(frozen=True)
class DomainHint:
    category: str
    content_type: str
    common_intent: str


class DomainKnowledge:
    """Static domain -> hint table.

    Matching order: exact domain, domain without a ``www.``/``m.``/
    ``mobile.`` prefix, then the last two labels (``docs.github.com`` ->
    ``github.com``).
    """

    def __init__(self, domains: Mapping[str, tuple[str, str, str]] | None = None):
        table = KNOWN_DOMAINS if domains is None else domains
        self._domains = {
            domain: DomainHint(*hint) for domain, hint in table.items()
        }

    def __len__(self) -> int:
        return len(self._domains)

    def lookup(self, domain: str | None) -> DomainHint | None:
        if not domain:
            return None

        domain = domain.lower()
        if domain in self._domains:
            return self._domains[domain]

        normalized = _MOBILE_PREFIX.sub("", domain, count=1)
        if normalized in self._domains:
            return self._domains[normalized]

        parts = domain.split(".")
        if len(parts) > 2:
            return self._domains.get(".".join(parts[-2:]))
        return None

    def is_known(self, domain: str | None) -> bool:
        return self.lookup(domain) is not None

    def by_category(self, category: str) -> list[str]:
        return [d for d, hint in self._domains.items() if hint.category == category]

    def stats(self) -> dict[str, Any]:
        hints = self._domains.values()
        return {
            "total_domains": len(self._domains),
            "categories": dict(Counter(h.category for h in hints)),
            "content_types": dict(Counter(h.content_type for h in hints)),
            "intents": dict(Counter(h.common_intent for h in hints)),
        }
