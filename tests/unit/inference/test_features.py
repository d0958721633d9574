"""Tests for feature extraction."""

from tabsense_ml.data_models import TabRecord
from tabsense_ml.inference.classification import extract_features, is_sufficient


class TestExtractFeatures:
    def test_joins_title_domain_and_path(self) -> None:
        tab = TabRecord(
            id="1",
            title="Asyncio docs",
            url="https://docs.python.org/3/library/asyncio-task_groups",
            domain="docs.python.org",
        )

        assert extract_features(tab) == (
            "Asyncio docs docs.python.org 3 library asyncio task groups"
        )

    def test_skips_untitled(self) -> None:
        tab = TabRecord(id="1", title="Untitled", url="https://a.com/", domain="a.com")

        assert extract_features(tab) == "a.com"

    def test_skips_about_domain_but_keeps_path(self) -> None:
        tab = TabRecord(id="1", title="New Tab", url="about:newtab", domain="about")

        assert extract_features(tab) == "New Tab newtab"

    def test_returns_none_without_fragments(self) -> None:
        tab = TabRecord(id="1", title="Untitled", url="", domain="")

        assert extract_features(tab) is None

    def test_truncates_to_char_budget(self) -> None:
        tab = TabRecord(id="1", title="x" * 5000, domain="a.com")

        text = extract_features(tab, max_chars=2048)

        assert text is not None
        assert len(text) == 2048

    def test_ignores_query_string(self) -> None:
        tab = TabRecord(id="1", url="https://a.com/search?q=secret", domain="a.com")

        assert extract_features(tab) == "a.com search"


class TestIsSufficient:
    def test_short_text(self) -> None:
        assert not is_sufficient("ab")

    def test_none(self) -> None:
        assert not is_sufficient(None)

    def test_three_chars(self) -> None:
        assert is_sufficient("abc")
