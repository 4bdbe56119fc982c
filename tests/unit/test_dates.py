"""Unit tests for Solr date conversion."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from solr_commander.models.dates import (
    format_solr_datetime,
    is_solr_datetime,
    parse_solr_datetime,
)


class TestParseSolrDatetime:
    def test_parses_zulu_suffix(self) -> None:
        parsed = parse_solr_datetime("2024-01-31T12:00:00Z")
        assert parsed == datetime(2024, 1, 31, 12, tzinfo=timezone.utc)

    def test_parses_fractional_seconds(self) -> None:
        parsed = parse_solr_datetime("2024-05-01T10:20:30.123Z")
        assert parsed.microsecond == 123000

    def test_rejects_naive_timestamp(self) -> None:
        with pytest.raises(ValueError):
            parse_solr_datetime("2024-01-31T12:00:00")

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_solr_datetime("yesterday")


class TestFormatSolrDatetime:
    def test_utc_uses_zulu_suffix(self) -> None:
        value = datetime(2024, 1, 31, 12, tzinfo=timezone.utc)
        assert format_solr_datetime(value) == "2024-01-31T12:00:00Z"

    def test_converts_other_offsets_to_utc(self) -> None:
        value = datetime(2024, 1, 31, 21, tzinfo=timezone(timedelta(hours=9)))
        assert format_solr_datetime(value) == "2024-01-31T12:00:00Z"

    def test_naive_is_treated_as_utc(self) -> None:
        assert format_solr_datetime(datetime(2024, 1, 31, 12)) == "2024-01-31T12:00:00Z"


def test_is_solr_datetime() -> None:
    assert is_solr_datetime("2024-01-31T12:00:00Z")
    assert not is_solr_datetime("10")
