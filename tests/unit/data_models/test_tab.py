"""Tests for tab records and timestamp normalization."""

from datetime import UTC, datetime, timedelta

import pytest
from tabsense_ml.data_models import TabRecord, domain_from_url, normalize_epoch

from tests.shared.fixtures import NOW

EPOCH_MS = 1_762_162_517_587
EPOCH_S = 1_762_162_517


class TestNormalizeEpoch:
    def test_milliseconds(self) -> None:
        assert normalize_epoch(EPOCH_MS, "ms") == datetime.fromtimestamp(EPOCH_MS / 1000, tz=UTC)

    def test_seconds(self) -> None:
        assert normalize_epoch(EPOCH_S, "s") == datetime.fromtimestamp(EPOCH_S, tz=UTC)

    @pytest.mark.parametrize("value", [EPOCH_S, EPOCH_MS])
    def test_auto_detects_unit(self, value: int) -> None:
        result = normalize_epoch(value, "auto")

        assert result is not None
        assert result.year == 2025

    @pytest.mark.parametrize("value", [None, 0, -5])
    def test_missing_values(self, value: int | None) -> None:
        assert normalize_epoch(value) is None

    def test_result_is_timezone_aware(self) -> None:
        result = normalize_epoch(EPOCH_MS)

        assert result is not None
        assert result.tzinfo is not None


class TestTabRecord:
    def test_from_raw_derives_domain_from_url(self) -> None:
        tab = TabRecord.from_raw(7, title="Docs", url="https://Docs.Python.org/3/library/")

        assert tab.id == "7"
        assert tab.domain == "docs.python.org"

    def test_from_raw_keeps_explicit_domain(self) -> None:
        tab = TabRecord.from_raw("a", url="https://x.com/home", domain="Twitter.com")

        assert tab.domain == "twitter.com"

    def test_from_raw_normalizes_seconds(self) -> None:
        tab = TabRecord.from_raw("a", last_active=EPOCH_S, unit="s")

        assert tab.last_active_at == datetime.fromtimestamp(EPOCH_S, tz=UTC)

    def test_age_of_tab_without_timestamp_is_zero(self) -> None:
        assert TabRecord(id="a").age(NOW) == timedelta(0)

    def test_age(self) -> None:
        tab = TabRecord(id="a", last_active_at=NOW - timedelta(days=3))

        assert tab.age(NOW) == timedelta(days=3)


class TestDomainFromUrl:
    def test_invalid_url_has_no_domain(self) -> None:
        assert domain_from_url("not a url") == ""

    def test_about_pages(self) -> None:
        assert domain_from_url("about:blank") == ""
