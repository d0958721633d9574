"""Tests for domain knowledge lookups."""

import pytest
from tabsense_ml.config.domains import KNOWN_DOMAINS
from tabsense_ml.inference import DomainKnowledge

TABLE = {
    "github.com": ("development", "content", "navigational"),
    "mail.google.com": ("communication", "communication", "navigational"),
    "google.com": ("search", "search", "informational"),
}


@pytest.fixture
def knowledge() -> DomainKnowledge:
    return DomainKnowledge(TABLE)


class TestLookup:
    def test_exact_match(self, knowledge: DomainKnowledge) -> None:
        hint = knowledge.lookup("mail.google.com")

        assert hint is not None
        assert hint.content_type == "communication"

    @pytest.mark.parametrize("domain", ["www.github.com", "m.github.com", "mobile.github.com"])
    def test_strips_mobile_prefixes(self, knowledge: DomainKnowledge, domain: str) -> None:
        assert knowledge.lookup(domain) == knowledge.lookup("github.com")

    def test_parent_domain(self, knowledge: DomainKnowledge) -> None:
        hint = knowledge.lookup("gist.github.com")

        assert hint is not None
        assert hint.category == "development"

    def test_exact_match_wins_over_parent(self, knowledge: DomainKnowledge) -> None:
        hint = knowledge.lookup("mail.google.com")

        assert hint is not None
        assert hint.category == "communication"

    @pytest.mark.parametrize("domain", ["", None, "unknown.example", "github.io"])
    def test_unknown(self, knowledge: DomainKnowledge, domain: str | None) -> None:
        assert knowledge.lookup(domain) is None
        assert not knowledge.is_known(domain)

    def test_case_insensitive(self, knowledge: DomainKnowledge) -> None:
        assert knowledge.is_known("GitHub.com")


class TestQueries:
    def test_by_category(self, knowledge: DomainKnowledge) -> None:
        assert knowledge.by_category("search") == ["google.com"]

    def test_stats(self, knowledge: DomainKnowledge) -> None:
        stats = knowledge.stats()

        assert stats["total_domains"] == 3
        assert stats["content_types"] == {"content": 1, "communication": 1, "search": 1}
        assert stats["intents"] == {"navigational": 2, "informational": 1}


class TestCuratedTable:
    def test_default_table_is_loaded(self) -> None:
        assert len(DomainKnowledge()) == len(KNOWN_DOMAINS)

    def test_hints_use_known_labels(self) -> None:
        for domain, (_, content_type, intent) in KNOWN_DOMAINS.items():
            assert content_type in ("content", "communication", "search"), domain
            assert intent in ("informational", "navigational", "transactional"), domain

    def test_gmail_is_communication(self) -> None:
        hint = DomainKnowledge().lookup("mail.google.com")

        assert hint is not None
        assert hint.content_type == "communication"
