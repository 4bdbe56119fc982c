"""Query operands and boolean query expressions for the standard query parser.

Operands are single search clauses (``title:rust``). Combining operands
with ``+`` (OR) or ``*`` (AND) builds a :class:`QueryExpression` tree whose
string form is the query text Solr expects::

    >>> a = StandardQueryOperand("name", "alice")
    >>> b = StandardQueryOperand("name", "bob")
    >>> c = RangeQueryOperand("age").ge(20)
    >>> str((a + b) * c)
    '(name:alice OR name:bob) AND age:[20 TO *}'

Chains of the same operator are flattened into one node, so
``a + b + c`` renders ``a OR b OR c``. Mixing operators keeps the
sub-expression as a child, which renders in parentheses:
``(a * b) + c`` renders ``(a AND b) OR c``.

``|`` and ``&`` are accepted as aliases of ``+`` and ``*``.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from solr_commander.search.formatting import format_number, format_value
from solr_commander.search.sanitizer import sanitize


class Operator(enum.Enum):
    """Boolean operator joining the children of a query expression."""

    AND = "AND"
    OR = "OR"

    @property
    def separator(self) -> str:
        return f" {self.value} "


class _Combinable:
    """Operator overloads shared by operands, operand models and expressions."""

    def __add__(self, other: object) -> QueryExpression:
        if not isinstance(other, _Combinable):
            return NotImplemented
        return combine(Operator.OR, self, other)

    def __mul__(self, other: object) -> QueryExpression:
        if not isinstance(other, _Combinable):
            return NotImplemented
        return combine(Operator.AND, self, other)

    __or__ = __add__
    __and__ = __mul__


@dataclass(frozen=True)
class QueryOperand(_Combinable):
    """A single search clause, stored as already formatted query text.

    The text is not validated: any clause can be wrapped, which also means
    a malformed clause is passed to Solr as-is.
    """

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class QueryExpression(_Combinable):
    """Operands and sub-expressions joined by a single operator.

    Children keep insertion order, which is the left-to-right order of the
    rendered query.
    """

    operator: Operator
    operands: tuple[QueryOperand | QueryExpression, ...]

    def __str__(self) -> str:
        return self.operator.separator.join(
            f"({child})" if isinstance(child, QueryExpression) else str(child)
            for child in self.operands
        )

    @classmethod
    def sum(cls, items: Iterable[QueryItem]) -> QueryExpression:
        """OR all ``items`` together as direct children of one expression."""
        return cls(Operator.OR, tuple(_as_node(item) for item in items))

    @classmethod
    def prod(cls, items: Iterable[QueryItem]) -> QueryExpression:
        """AND all ``items`` together as direct children of one expression."""
        return cls(Operator.AND, tuple(_as_node(item) for item in items))


def combine(operator: Operator, left: _Combinable, right: _Combinable) -> QueryExpression:
    """Join two query items with ``operator``.

    Same-operator expressions are merged into one flat child list; an
    expression with the other operator becomes a single (parenthesized)
    child. Neither input is modified.
    """
    lhs = _as_node(left)
    rhs = _as_node(right)
    lhs_expr = isinstance(lhs, QueryExpression)
    rhs_expr = isinstance(rhs, QueryExpression)

    if lhs_expr and rhs_expr:
        if lhs.operator is operator and rhs.operator is operator:
            return QueryExpression(operator, lhs.operands + rhs.operands)
        return QueryExpression(operator, (lhs, rhs))

    if rhs_expr and rhs.operator is operator:
        return QueryExpression(operator, (lhs, *rhs.operands))

    if lhs_expr and lhs.operator is operator:
        return QueryExpression(operator, (*lhs.operands, rhs))

    return QueryExpression(operator, (lhs, rhs))


def _as_node(item: object) -> QueryOperand | QueryExpression:
    """Convert operand models to plain operands; pass nodes through."""
    if isinstance(item, (QueryOperand, QueryExpression)):
        return item
    if isinstance(item, QueryOperandModel):
        return item.to_operand()
    raise TypeError(f"Cannot use {type(item).__name__} in a query expression")


# ---------------------------------------------------------------------------
# Operand models
# ---------------------------------------------------------------------------


class QueryOperandModel(_Combinable):
    """Base class of typed operand builders.

    Field and value text is escaped when the operand is rendered.
    """

    def to_operand(self) -> QueryOperand:
        return QueryOperand(str(self))


@dataclass
class StandardQueryOperand(QueryOperandModel):
    """Plain term clause: ``field:word``."""

    field: str
    word: str

    def __str__(self) -> str:
        return f"{sanitize(self.field)}:{sanitize(self.word)}"


@dataclass
class PhraseQueryOperand(QueryOperandModel):
    """Phrase clause: ``field:"some words"``."""

    field: str
    word: str

    def __str__(self) -> str:
        return f'{sanitize(self.field)}:"{sanitize(self.word)}"'


@dataclass
class BoostQueryOperand(QueryOperandModel):
    """Boosted term clause: ``field:word^boost``."""

    field: str
    word: str
    boost: float

    def __str__(self) -> str:
        return f"{sanitize(self.field)}:{sanitize(self.word)}^{format_number(self.boost)}"


@dataclass
class FuzzyQueryOperand(QueryOperandModel):
    """Fuzzy term clause with an edit distance: ``field:word~N``."""

    field: str
    word: str
    fuzzy: int

    def __str__(self) -> str:
        return f"{sanitize(self.field)}:{sanitize(self.word)}~{self.fuzzy}"


@dataclass
class ProximityQueryOperand(QueryOperandModel):
    """Phrase clause with a word-distance slop: ``field:"some words"~N``."""

    field: str
    word: str
    proximity: int

    def __str__(self) -> str:
        return f'{sanitize(self.field)}:"{sanitize(self.word)}"~{self.proximity}'


@dataclass
class ConstantQueryOperand(QueryOperandModel):
    """Constant-score clause: ``field:word^=weight``."""

    field: str
    word: str
    weight: float

    def __str__(self) -> str:
        return f"{sanitize(self.field)}:{sanitize(self.word)}^={format_number(self.weight)}"


class RangeQueryOperand(QueryOperandModel):
    """Range clause: ``field:[start TO end}``.

    Unset bounds render as ``*``. The lower bound is inclusive unless
    :meth:`gt` was called; the upper bound is exclusive unless :meth:`le`
    was called. Setting a bound twice keeps the last value and openness.
    """

    def __init__(self, field: str) -> None:
        self.field = sanitize(field)
        self.start: str | None = None
        self.end: str | None = None
        self.left_open = False
        self.right_open = True

    def gt(self, start: object) -> RangeQueryOperand:
        self.start = format_value(start)
        self.left_open = True
        return self

    def ge(self, start: object) -> RangeQueryOperand:
        self.start = format_value(start)
        self.left_open = False
        return self

    def lt(self, end: object) -> RangeQueryOperand:
        self.end = format_value(end)
        self.right_open = True
        return self

    def le(self, end: object) -> RangeQueryOperand:
        self.end = format_value(end)
        self.right_open = False
        return self

    def __str__(self) -> str:
        left = "{" if self.left_open else "["
        right = "}" if self.right_open else "]"
        start = sanitize(self.start) if self.start is not None else "*"
        end = sanitize(self.end) if self.end is not None else "*"
        return f"{self.field}:{left}{start} TO {end}{right}"

    def __repr__(self) -> str:
        return f"RangeQueryOperand({str(self)!r})"


QueryItem = QueryOperand | QueryExpression | QueryOperandModel
