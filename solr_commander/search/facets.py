"""Builders for field and range facet parameters.

Each builder renders to a flat list of ``(key, value)`` pairs. Options are
field-qualified (``f.<field>.facet.<option>``) so several facets can share
one request without clashing, and only options that were set are emitted.
"""

from __future__ import annotations

import enum
from typing import Protocol

from solr_commander.search.formatting import format_bool, format_value

FacetParams = list[tuple[str, str]]


class FacetBuilder(Protocol):
    """Anything that renders facet parameters."""

    def build(self) -> FacetParams: ...


class FieldFacetSortOrder(enum.Enum):
    """Order of the returned facet constraints (``facet.sort``)."""

    INDEX = "index"
    COUNT = "count"


class FieldFacetMethod(enum.Enum):
    """Faceting algorithm Solr should use (``facet.method``)."""

    ENUM = "enum"
    FC = "fc"
    FCS = "fcs"


class RangeFacetOtherOptions(enum.Enum):
    """Extra counts outside the ranges (``facet.range.other``)."""

    NONE = "none"
    BEFORE = "before"
    AFTER = "after"
    BETWEEN = "between"
    ALL = "all"


class RangeFacetIncludeOptions(enum.Enum):
    """Which bucket edges are inclusive (``facet.range.include``)."""

    LOWER = "lower"
    UPPER = "upper"
    EDGE = "edge"
    OUTER = "outer"
    ALL = "all"


class _LocalParamsMixin:
    """``{!key=value ...}`` prefix for the faceted field name."""

    field: str
    local_params: list[tuple[str, str]]

    def local_param(self, key: str, value: object):
        """Add a local parameter, e.g. ``local_param("ex", "dt")``."""
        self.local_params.append((key, format_value(value)))
        return self

    def _facet_target(self) -> str:
        if not self.local_params:
            return self.field
        inner = " ".join(f"{key}={value}" for key, value in self.local_params)
        return f"{{!{inner}}}{self.field}"


class FieldFacetBuilder(_LocalParamsMixin):
    """Parameters for faceting on the distinct values of one field."""

    def __init__(self, field: str) -> None:
        self.field = field
        self.local_params: list[tuple[str, str]] = []
        self._prefix: str | None = None
        self._contains: str | None = None
        self._ignore_case: bool | None = None
        self._sort: FieldFacetSortOrder | None = None
        self._limit: int | None = None
        self._offset: int | None = None
        self._min_count: int | None = None
        self._missing: bool | None = None
        self._method: FieldFacetMethod | None = None
        self._exists: bool | None = None

    def prefix(self, prefix: str) -> FieldFacetBuilder:
        self._prefix = prefix
        return self

    def contains(self, contains: str) -> FieldFacetBuilder:
        self._contains = contains
        return self

    def ignore_case(self, ignore_case: bool) -> FieldFacetBuilder:
        self._ignore_case = ignore_case
        return self

    def sort(self, sort: FieldFacetSortOrder) -> FieldFacetBuilder:
        self._sort = sort
        return self

    def limit(self, limit: int) -> FieldFacetBuilder:
        self._limit = limit
        return self

    def offset(self, offset: int) -> FieldFacetBuilder:
        self._offset = offset
        return self

    def min_count(self, min_count: int) -> FieldFacetBuilder:
        self._min_count = min_count
        return self

    def missing(self, missing: bool) -> FieldFacetBuilder:
        self._missing = missing
        return self

    def method(self, method: FieldFacetMethod) -> FieldFacetBuilder:
        self._method = method
        return self

    def exists(self, exists: bool) -> FieldFacetBuilder:
        self._exists = exists
        return self

    def build(self) -> FacetParams:
        key = f"f.{self.field}.facet"
        result: FacetParams = [("facet.field", self._facet_target())]

        if self._prefix is not None:
            result.append((f"{key}.prefix", self._prefix))
        if self._contains is not None:
            result.append((f"{key}.contains", self._contains))
        if self._ignore_case is not None:
            result.append((f"{key}.contains.ignoreCase", format_bool(self._ignore_case)))
        if self._sort is not None:
            result.append((f"{key}.sort", self._sort.value))
        if self._limit is not None:
            result.append((f"{key}.limit", str(self._limit)))
        if self._offset is not None:
            result.append((f"{key}.offset", str(self._offset)))
        if self._min_count is not None:
            result.append((f"{key}.mincount", str(self._min_count)))
        if self._missing is not None:
            result.append((f"{key}.missing", format_bool(self._missing)))
        if self._method is not None:
            result.append((f"{key}.method", self._method.value))
        if self._exists is not None:
            result.append((f"{key}.exists", format_bool(self._exists)))

        return result


class RangeFacetBuilder(_LocalParamsMixin):
    """Parameters for faceting a numeric or date field into fixed-size buckets.

    ``start``, ``end`` and ``gap`` are required. Numbers and datetimes are
    rendered for the wire; strings (e.g. date math such as ``+1MONTH``) are
    passed through unchanged.
    """

    def __init__(self, field: str, start: object, end: object, gap: object) -> None:
        self.field = field
        self.local_params: list[tuple[str, str]] = []
        self.start = format_value(start)
        self.end = format_value(end)
        self.gap = format_value(gap)
        self._hardend: bool | None = None
        self._other: RangeFacetOtherOptions | None = None
        self._include: RangeFacetIncludeOptions | None = None

    def hardend(self, hardend: bool) -> RangeFacetBuilder:
        self._hardend = hardend
        return self

    def other(self, other: RangeFacetOtherOptions) -> RangeFacetBuilder:
        self._other = other
        return self

    def include(self, include: RangeFacetIncludeOptions) -> RangeFacetBuilder:
        self._include = include
        return self

    def build(self) -> FacetParams:
        key = f"f.{self.field}.facet.range"
        result: FacetParams = [
            ("facet.range", self._facet_target()),
            (f"{key}.start", self.start),
            (f"{key}.end", self.end),
            (f"{key}.gap", self.gap),
        ]

        if self._hardend is not None:
            result.append((f"{key}.hardend", format_bool(self._hardend)))
        if self._other is not None:
            result.append((f"{key}.other", self._other.value))
        if self._include is not None:
            result.append((f"{key}.include", self._include.value))

        return result
