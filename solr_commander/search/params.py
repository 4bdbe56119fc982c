"""Request parameter builders for Solr's query parsers.

Each builder collects parameters through a fluent chain and flattens them
with :meth:`CommonQueryBuilder.build`::

    params = (
        StandardQueryBuilder()
        .q(StandardQueryOperand("title", "rust"))
        .fq(RangeQueryOperand("year").ge(2020))
        .sort(SortOrderBuilder().desc("score"))
        .rows(20)
        .build()
    )

The dialects share one implementation of the common parameters:

* :class:`CommonQueryBuilder` - parameters understood by every parser
* :class:`StandardQueryBuilder` - the standard (lucene) query parser
* :class:`DisMaxQueryBuilder` - the DisMax query parser
* :class:`EDisMaxQueryBuilder` - the Extended DisMax parser, a superset of DisMax

Single-valued parameters keep the last value written. Repeatable
parameters (``fq``, ``facet.field``, ``bq``, ``bf``) keep every value in
call order and are emitted once per value.
"""

from __future__ import annotations

from typing import Self

from solr_commander.exceptions import BuilderConsumedError
from solr_commander.search.expressions import Operator, QueryItem
from solr_commander.search.facets import FacetBuilder
from solr_commander.search.formatting import format_bool, format_number
from solr_commander.search.sanitizer import sanitize
from solr_commander.search.sort import SortOrderBuilder

Params = list[tuple[str, str]]

# Facet keys that may appear once per faceted field.
_REPEATABLE_FACET_KEYS: frozenset[str] = frozenset({"facet.field"})


class CommonQueryBuilder:
    """Builder for the parameters shared by all query parsers.

    A builder is single-use: :meth:`build` consumes it and any further call
    raises :class:`~solr_commander.exceptions.BuilderConsumedError`.
    """

    def __init__(self) -> None:
        self.params: dict[str, str] = {}
        self.multi_params: dict[str, list[str]] = {}
        self._consumed = False

    # -- storage -----------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(type(self).__name__)

    def _set(self, key: str, value: str) -> Self:
        self._ensure_open()
        self.params[key] = value
        return self

    def _append(self, key: str, value: str) -> Self:
        self._ensure_open()
        self.multi_params.setdefault(key, []).append(value)
        return self

    # -- common parameters -------------------------------------------------

    def sort(self, sort: SortOrderBuilder) -> Self:
        return self._set("sort", sort.build())

    def start(self, start: int) -> Self:
        return self._set("start", str(start))

    def rows(self, rows: int) -> Self:
        return self._set("rows", str(rows))

    def fq(self, fq: QueryItem | str) -> Self:
        """Add a filter query. Every call adds one more ``fq`` parameter."""
        return self._append("fq", str(fq))

    def fl(self, fl: str) -> Self:
        return self._set("fl", fl)

    def debug(self) -> Self:
        """Request structured debug output (``debug=all``)."""
        self._set("debug", "all")
        return self._set("debug.explain.structured", "true")

    def wt(self, wt: str) -> Self:
        return self._set("wt", wt)

    def facet(self, facet: FacetBuilder) -> Self:
        """Enable faceting and merge in the parameters of ``facet``.

        ``facet.field`` accumulates across calls. Other facet keys are
        single-valued, so a later facet setting the same option replaces
        the earlier value.
        """
        self._set("facet", "true")
        for key, value in facet.build():
            if key in _REPEATABLE_FACET_KEYS:
                self._append(key, value)
            else:
                self._set(key, value)
        return self

    def op(self, op: Operator) -> Self:
        """Set the default operator (``q.op``)."""
        return self._set("q.op", op.value)

    def sanitize(self, text: str) -> str:
        """Escape Solr special characters in ``text``."""
        return sanitize(text)

    def build(self) -> Params:
        """Flatten the collected parameters and consume the builder.

        Single-valued parameters come first; repeatable parameters follow
        with one pair per value.
        """
        self._ensure_open()
        self._consumed = True

        result: Params = list(self.params.items())
        for key, values in self.multi_params.items():
            result.extend((key, value) for value in values)
        return result


class _SplitOnWhitespaceMixin:
    """``sow`` parameter, understood by the standard and eDisMax parsers."""

    def sow(self, sow: bool) -> Self:
        return self._set("sow", format_bool(sow))


class StandardQueryBuilder(_SplitOnWhitespaceMixin, CommonQueryBuilder):
    """Builder for the standard query parser.

    ``q`` takes a query operand or expression whose text is already
    escaped by construction and stores it verbatim.
    """

    def q(self, q: QueryItem | str) -> Self:
        return self._set("q", str(q))

    def df(self, df: str) -> Self:
        return self._set("df", df)


class DisMaxQueryBuilder(CommonQueryBuilder):
    """Builder for the DisMax query parser.

    Unlike :meth:`StandardQueryBuilder.q`, :meth:`q` takes raw user input
    and escapes it before storing.
    """

    DEF_TYPE = "dismax"

    def __init__(self) -> None:
        super().__init__()
        self.params["defType"] = self.DEF_TYPE

    def q(self, q: str) -> Self:
        return self._set("q", self.sanitize(str(q)))

    def qf(self, qf: str) -> Self:
        return self._set("qf", qf)

    def qs(self, qs: int) -> Self:
        return self._set("qs", str(qs))

    def pf(self, pf: str) -> Self:
        return self._set("pf", pf)

    def ps(self, ps: int) -> Self:
        return self._set("ps", str(ps))

    def mm(self, mm: str) -> Self:
        return self._set("mm", mm)

    def q_alt(self, q: QueryItem | str) -> Self:
        """Set the alternate query (``q.alt``) used when ``q`` is empty."""
        return self._set("q.alt", str(q))

    def tie(self, tie: float) -> Self:
        return self._set("tie", format_number(tie))

    def bq(self, bq: QueryItem | str) -> Self:
        """Add a boost query. Every call adds one more ``bq`` parameter."""
        return self._append("bq", str(bq))

    def bf(self, bf: str) -> Self:
        """Add a boost function. Every call adds one more ``bf`` parameter."""
        return self._append("bf", bf)


class EDisMaxQueryBuilder(_SplitOnWhitespaceMixin, DisMaxQueryBuilder):
    """Builder for the Extended DisMax query parser."""

    DEF_TYPE = "edismax"

    def boost(self, boost: str) -> Self:
        return self._set("boost", boost)

    def lowercase_operators(self, flag: bool) -> Self:
        return self._set("lowercaseOperators", format_bool(flag))

    def pf2(self, pf: str) -> Self:
        return self._set("pf2", pf)

    def ps2(self, ps: int) -> Self:
        return self._set("ps2", str(ps))

    def pf3(self, pf: str) -> Self:
        return self._set("pf3", pf)

    def ps3(self, ps: int) -> Self:
        return self._set("ps3", str(ps))

    def stopwords(self, flag: bool) -> Self:
        return self._set("stopwords", format_bool(flag))

    def uf(self, uf: str) -> Self:
        return self._set("uf", uf)
