"""Feature extraction: turn a tab into a compact text for the classifier."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from tabsense_ml.data_models import TabRecord

UNTITLED = "Untitled"
SYNTHETIC_DOMAIN = "about"
DEFAULT_MAX_CHARS = 512 * 4

_PATH_SEPARATORS = re.compile(r"[/_\-]")
_WHITESPACE = re.compile(r"\s+")


def _url_path(url: str) -> str:
    try:
        return urlsplit(url).path
    except ValueError:
        return ""


def extract_features(tab: TabRecord, max_chars: int = DEFAULT_MAX_CHARS) -> str | None:
    """Build the classifier input for a tab.

    Fragments in priority order: title, domain, URL path words. The
    joined text is cut to ``max_chars`` (a rough token budget, no real
    tokenizer). Returns None when nothing usable is left.
    """
    fragments: list[str] = []

    title = tab.title.strip()
    if title and title != UNTITLED:
        fragments.append(title)

    if tab.domain and tab.domain != SYNTHETIC_DOMAIN:
        fragments.append(tab.domain)

    path_words = _WHITESPACE.sub(" ", _PATH_SEPARATORS.sub(" ", _url_path(tab.url))).strip()
    if path_words:
        fragments.append(path_words)

    text = " ".join(fragments)[:max_chars].strip()
    return text or None


def is_sufficient(text: str | None, min_length: int = 3) -> bool:
    """Whether text is long enough to be worth a classifier call."""
    return text is not None and len(text) >= min_length
