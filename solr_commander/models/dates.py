"""Conversion between Solr date strings and timezone-aware datetimes.

Solr dates are ISO-8601 UTC timestamps with a trailing ``Z``
(``2024-01-31T12:00:00Z``). ``datetime.fromisoformat`` and
``datetime.isoformat`` use ``+00:00`` for UTC instead, so the suffix is
swapped in both directions.
"""

from __future__ import annotations

from datetime import datetime, timezone

_UTC_SUFFIX = "+00:00"


def parse_solr_datetime(value: str) -> datetime:
    """Parse a Solr date string into an offset-aware datetime.

    Raises:
        ValueError: If the value is not an ISO-8601 timestamp.
    """
    if value.endswith("Z"):
        value = value[:-1] + _UTC_SUFFIX
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"Solr date has no timezone: {value!r}")
    return parsed


def format_solr_datetime(value: datetime) -> str:
    """Format a datetime the way Solr expects it.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat()
    if text.endswith(_UTC_SUFFIX):
        text = text[: -len(_UTC_SUFFIX)] + "Z"
    return text


def is_solr_datetime(value: str) -> bool:
    """Return whether ``value`` parses as a Solr date."""
    try:
        parse_solr_datetime(value)
    except ValueError:
        return False
    return True
