"""Typed models of Solr JSON responses.

Each model is a dataclass with a ``from_dict`` constructor that reads the
decoded JSON body. A body that does not have the expected shape raises
``KeyError``, ``TypeError`` or ``ValueError``; the client layer turns those
into :class:`~solr_commander.exceptions.SolrDeserializeError`.

Error bodies (``{"error": {...}}``) are detected by the client before a
model is built, so the models only describe successful responses.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from solr_commander.models.dates import is_solr_datetime, parse_solr_datetime

T = TypeVar("T")

DocumentLoader = Callable[[dict[str, Any]], Any]


@dataclass
class SolrResponseHeader:
    status: int
    qtime: int
    params: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrResponseHeader:
        return cls(
            status=int(data["status"]),
            qtime=int(data["QTime"]),
            params=data.get("params"),
        )


@dataclass
class SolrErrorInfo:
    """The ``error`` object Solr returns for failed requests."""

    code: int
    msg: str
    metadata: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrErrorInfo:
        return cls(
            code=int(data.get("code", 0)),
            msg=str(data.get("msg", "")),
            metadata=[str(m) for m in data.get("metadata") or []],
        )


@dataclass
class LuceneInfo:
    solr_spec_version: str
    solr_impl_version: str
    lucene_spec_version: str
    lucene_impl_version: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LuceneInfo:
        return cls(
            solr_spec_version=data["solr-spec-version"],
            solr_impl_version=data["solr-impl-version"],
            lucene_spec_version=data["lucene-spec-version"],
            lucene_impl_version=data["lucene-impl-version"],
        )


@dataclass
class SolrSystemInfo:
    """Response of ``/solr/admin/info/system``.

    ``jvm``, ``security`` and ``system`` are kept as raw JSON.
    """

    header: SolrResponseHeader
    mode: str
    solr_home: str
    core_root: str
    lucene: LuceneInfo
    jvm: dict[str, Any] = field(default_factory=dict)
    security: dict[str, Any] = field(default_factory=dict)
    system: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrSystemInfo:
        return cls(
            header=SolrResponseHeader.from_dict(data["responseHeader"]),
            mode=data["mode"],
            solr_home=data["solr_home"],
            core_root=data["core_root"],
            lucene=LuceneInfo.from_dict(data["lucene"]),
            jvm=data.get("jvm") or {},
            security=data.get("security") or {},
            system=data.get("system") or {},
        )


@dataclass
class SolrIndexInfo:
    num_docs: int
    max_doc: int
    deleted_docs: int
    version: int = 0
    segment_count: int = 0
    current: bool = False
    has_deletions: bool = False
    directory: str = ""
    segments_file: str = ""
    segments_file_size_in_bytes: int = 0
    user_data: dict[str, Any] = field(default_factory=dict)
    size_in_bytes: int = 0
    size: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrIndexInfo:
        return cls(
            num_docs=int(data["numDocs"]),
            max_doc=int(data["maxDoc"]),
            deleted_docs=int(data["deletedDocs"]),
            version=int(data.get("version", 0)),
            segment_count=int(data.get("segmentCount", 0)),
            current=bool(data.get("current", False)),
            has_deletions=bool(data.get("hasDeletions", False)),
            directory=str(data.get("directory", "")),
            segments_file=str(data.get("segmentsFile", "")),
            segments_file_size_in_bytes=int(data.get("segmentsFileSizeInBytes", 0)),
            user_data=data.get("userData") or {},
            size_in_bytes=int(data.get("sizeInBytes", 0)),
            size=str(data.get("size", "")),
        )


@dataclass
class SolrCoreStatus:
    name: str
    instance_dir: str
    data_dir: str
    config: str
    schema: str
    start_time: str
    uptime: int
    index: SolrIndexInfo

    @property
    def started_at(self) -> datetime:
        """``start_time`` as a timezone-aware datetime."""
        return parse_solr_datetime(self.start_time)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrCoreStatus:
        return cls(
            name=data["name"],
            instance_dir=data["instanceDir"],
            data_dir=data["dataDir"],
            config=data["config"],
            schema=data["schema"],
            start_time=data["startTime"],
            uptime=int(data["uptime"]),
            index=SolrIndexInfo.from_dict(data["index"]),
        )


@dataclass
class SolrCoreList:
    """Response of ``/solr/admin/cores``, keyed by core name."""

    header: SolrResponseHeader
    init_failures: dict[str, Any] = field(default_factory=dict)
    status: dict[str, SolrCoreStatus] | None = None

    def as_list(self) -> list[str] | None:
        """Names of the cores, or None when the response has no status map."""
        if self.status is None:
            return None
        return list(self.status.keys())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrCoreList:
        raw_status = data.get("status")
        status = None
        if raw_status is not None:
            status = {
                name: SolrCoreStatus.from_dict(core) for name, core in raw_status.items()
            }
        return cls(
            header=SolrResponseHeader.from_dict(data["responseHeader"]),
            init_failures=data.get("initFailures") or {},
            status=status,
        )


@dataclass
class SolrSimpleResponse:
    """Response that only carries a header (reload, update)."""

    header: SolrResponseHeader

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrSimpleResponse:
        return cls(header=SolrResponseHeader.from_dict(data["responseHeader"]))


# ---------------------------------------------------------------------------
# Facets
# ---------------------------------------------------------------------------


def _counts(values: list[Any]) -> list[tuple[str, int]]:
    """Pair up Solr's flat ``[label, count, label, count, ...]`` arrays."""
    return [
        ("" if label is None else str(label), int(count))
        for label, count in zip(values[::2], values[1::2])
    ]


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass
class SolrIntegerRangeFacet:
    counts: list[tuple[str, int]]
    gap: int
    start: int
    end: int
    before: int | None = None
    after: int | None = None
    between: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrIntegerRangeFacet:
        return cls(
            counts=_counts(data["counts"]),
            gap=int(data["gap"]),
            start=int(data["start"]),
            end=int(data["end"]),
            before=_optional_int(data.get("before")),
            after=_optional_int(data.get("after")),
            between=_optional_int(data.get("between")),
        )


@dataclass
class SolrFloatRangeFacet:
    counts: list[tuple[str, int]]
    gap: float
    start: float
    end: float
    before: int | None = None
    after: int | None = None
    between: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrFloatRangeFacet:
        return cls(
            counts=_counts(data["counts"]),
            gap=float(data["gap"]),
            start=float(data["start"]),
            end=float(data["end"]),
            before=_optional_int(data.get("before")),
            after=_optional_int(data.get("after")),
            between=_optional_int(data.get("between")),
        )


@dataclass
class SolrDateTimeRangeFacet:
    """Date range facet; ``gap`` stays in Solr date-math form (``+1MONTH``)."""

    counts: list[tuple[str, int]]
    gap: str
    start: datetime
    end: datetime
    before: int | None = None
    after: int | None = None
    between: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrDateTimeRangeFacet:
        return cls(
            counts=_counts(data["counts"]),
            gap=str(data["gap"]),
            start=parse_solr_datetime(data["start"]),
            end=parse_solr_datetime(data["end"]),
            before=_optional_int(data.get("before")),
            after=_optional_int(data.get("after")),
            between=_optional_int(data.get("between")),
        )


SolrRangeFacet = SolrIntegerRangeFacet | SolrFloatRangeFacet | SolrDateTimeRangeFacet


def infer_range_facet_kind(
    data: dict[str, Any],
) -> type[SolrIntegerRangeFacet] | type[SolrFloatRangeFacet] | type[SolrDateTimeRangeFacet]:
    """Pick the range facet model from the type of its ``start`` value.

    Raises:
        ValueError: If ``start`` is neither a number nor a Solr date.
    """
    start = data.get("start")
    if isinstance(start, bool):
        raise ValueError(f"Mismatched range facet value type: {start!r}")
    if isinstance(start, int):
        return SolrIntegerRangeFacet
    if isinstance(start, float):
        return SolrFloatRangeFacet
    if isinstance(start, str) and is_solr_datetime(start):
        return SolrDateTimeRangeFacet
    raise ValueError(f"Unexpected range facet value type: {start!r}")


def parse_range_facet(data: dict[str, Any]) -> SolrRangeFacet:
    return infer_range_facet_kind(data).from_dict(data)


@dataclass
class SolrFacetBody:
    """The ``facet_counts`` section of a select response."""

    facet_queries: dict[str, Any] = field(default_factory=dict)
    facet_fields: dict[str, list[tuple[str, int]]] = field(default_factory=dict)
    facet_ranges: dict[str, SolrRangeFacet] = field(default_factory=dict)
    facet_intervals: dict[str, Any] = field(default_factory=dict)
    facet_heatmaps: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolrFacetBody:
        return cls(
            facet_queries=data.get("facet_queries") or {},
            facet_fields={
                name: _counts(values) for name, values in (data.get("facet_fields") or {}).items()
            },
            facet_ranges={
                name: parse_range_facet(value)
                for name, value in (data.get("facet_ranges") or {}).items()
            },
            facet_intervals=data.get("facet_intervals") or {},
            facet_heatmaps=data.get("facet_heatmaps") or {},
        )


# ---------------------------------------------------------------------------
# Select
# ---------------------------------------------------------------------------


def load_document(document: type[T] | DocumentLoader, raw: dict[str, Any]) -> T:
    """Convert one raw document with ``document``.

    Dataclass types are called with the document fields they declare as
    keyword arguments, so stored fields such as ``_version_`` that the
    dataclass does not name are dropped. Any other callable receives the
    raw dict.
    """
    if isinstance(document, type) and dataclasses.is_dataclass(document):
        names = {f.name for f in dataclasses.fields(document) if f.init}
        return document(**{k: v for k, v in raw.items() if k in names})
    return document(raw)


@dataclass
class SolrSelectBody(Generic[T]):
    num_found: int
    start: int
    num_found_exact: bool
    docs: list[T]

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], document: type[T] | DocumentLoader = dict
    ) -> SolrSelectBody[T]:
        return cls(
            num_found=int(data["numFound"]),
            start=int(data["start"]),
            num_found_exact=bool(data.get("numFoundExact", True)),
            docs=[load_document(document, doc) for doc in data["docs"]],
        )


@dataclass
class SolrSelectResponse(Generic[T]):
    """Response of ``/select`` with documents converted to ``T``."""

    header: SolrResponseHeader
    response: SolrSelectBody[T]
    facet_counts: SolrFacetBody | None = None

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], document: type[T] | DocumentLoader = dict
    ) -> SolrSelectResponse[T]:
        facet_counts = data.get("facet_counts")
        return cls(
            header=SolrResponseHeader.from_dict(data["responseHeader"]),
            response=SolrSelectBody.from_dict(data["response"], document),
            facet_counts=SolrFacetBody.from_dict(facet_counts) if facet_counts else None,
        )
