"""Rendering of Python values as Solr parameter text."""

from __future__ import annotations

from datetime import datetime

from solr_commander.models.dates import format_solr_datetime


def format_number(value: int | float) -> str:
    """Render a number without a trailing ``.0`` for integral floats.

    ``10.0`` renders as ``10`` and ``1.5`` as ``1.5``.
    """
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_bool(value: bool) -> str:
    """Render a boolean as ``true``/``false``."""
    return "true" if value else "false"


def format_value(value: object) -> str:
    """Render any parameter value (number, bool, datetime or text)."""
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, datetime):
        return format_solr_datetime(value)
    return str(value)
