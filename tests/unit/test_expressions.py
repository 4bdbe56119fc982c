"""Unit tests for query operands and the expression algebra."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from solr_commander.search.expressions import (
    BoostQueryOperand,
    ConstantQueryOperand,
    FuzzyQueryOperand,
    Operator,
    PhraseQueryOperand,
    ProximityQueryOperand,
    QueryExpression,
    QueryOperand,
    RangeQueryOperand,
    StandardQueryOperand,
)

A = QueryOperand("name:alice")
B = QueryOperand("name:bob")
C = QueryOperand("name:charlie")
D = QueryOperand("name:dave")


class TestOperands:
    def test_standard(self) -> None:
        assert str(StandardQueryOperand("name", "alice")) == "name:alice"

    def test_standard_escapes_field_and_word(self) -> None:
        assert str(StandardQueryOperand("lang", "C++")) == r"lang:C\+\+"
        assert str(StandardQueryOperand("text_ja", "高橋?")) == "text_ja:高橋\\?"

    def test_phrase(self) -> None:
        assert str(PhraseQueryOperand("name", "alice wonder")) == 'name:"alice wonder"'

    def test_phrase_escapes_quotes(self) -> None:
        assert str(PhraseQueryOperand("title", 'say "hi"')) == r'title:"say \"hi\""'

    def test_boost(self) -> None:
        assert str(BoostQueryOperand("name", "alice", 10)) == "name:alice^10"

    def test_boost_integral_float_has_no_fraction(self) -> None:
        assert str(BoostQueryOperand("name", "alice", 10.0)) == "name:alice^10"
        assert str(BoostQueryOperand("name", "alice", 1.5)) == "name:alice^1.5"

    def test_fuzzy(self) -> None:
        assert str(FuzzyQueryOperand("name", "alice", 2)) == "name:alice~2"

    def test_proximity(self) -> None:
        operand = ProximityQueryOperand("name", "alice wonder", 2)
        assert str(operand) == 'name:"alice wonder"~2'

    def test_constant(self) -> None:
        assert str(ConstantQueryOperand("name", "alice", 0)) == "name:alice^=0"

    def test_operand_model_converts_to_plain_operand(self) -> None:
        operand = StandardQueryOperand("name", "alice").to_operand()
        assert operand == QueryOperand("name:alice")

    def test_raw_operand_is_not_escaped(self) -> None:
        assert str(QueryOperand("*:*")) == "*:*"


class TestRangeOperand:
    def test_unbounded(self) -> None:
        assert str(RangeQueryOperand("age")) == "age:[* TO *}"

    def test_gt(self) -> None:
        assert str(RangeQueryOperand("age").gt(10)) == "age:{10 TO *}"

    def test_ge(self) -> None:
        assert str(RangeQueryOperand("age").ge(10)) == "age:[10 TO *}"

    def test_lt(self) -> None:
        assert str(RangeQueryOperand("age").lt(20)) == "age:[* TO 20}"

    def test_le(self) -> None:
        assert str(RangeQueryOperand("age").le(20)) == "age:[* TO 20]"

    def test_both_bounds(self) -> None:
        assert str(RangeQueryOperand("age").gt(10).le(20)) == "age:{10 TO 20]"
        assert str(RangeQueryOperand("age").ge(10).lt(20)) == "age:[10 TO 20}"

    def test_last_bound_wins(self) -> None:
        operand = RangeQueryOperand("age").gt(10).ge(15)
        assert str(operand) == "age:[15 TO *}"

    def test_float_bounds(self) -> None:
        assert str(RangeQueryOperand("price").ge(9.5).le(100.0)) == "price:[9.5 TO 100]"

    def test_datetime_bound_is_escaped(self) -> None:
        operand = RangeQueryOperand("released").ge(datetime(2024, 1, 1, tzinfo=timezone.utc))
        assert str(operand) == r"released:[2024\-01\-01T00\:00\:00Z TO *}"

    def test_field_is_escaped(self) -> None:
        assert str(RangeQueryOperand("a:b").ge(1)) == r"a\:b:[1 TO *}"


class TestAlgebra:
    def test_or(self) -> None:
        assert str(A + B) == "name:alice OR name:bob"

    def test_and(self) -> None:
        assert str(A * B) == "name:alice AND name:bob"

    def test_aliases(self) -> None:
        assert A | B == A + B
        assert A & B == A * B

    def test_models_combine(self) -> None:
        expr = StandardQueryOperand("name", "alice") + PhraseQueryOperand("name", "bob smith")
        assert str(expr) == 'name:alice OR name:"bob smith"'

    def test_same_operator_chain_is_flat(self) -> None:
        expr = A + B + C
        assert expr.operator is Operator.OR
        assert expr.operands == (A, B, C)
        assert str(expr) == "name:alice OR name:bob OR name:charlie"

    def test_leaf_plus_expression_prepends(self) -> None:
        expr = A + (B + C)
        assert expr.operands == (A, B, C)

    def test_two_matching_expressions_merge(self) -> None:
        expr = (A + B) + (C + D)
        assert expr.operands == (A, B, C, D)

    def test_mixed_operators_group(self) -> None:
        assert str((A * B) + C) == "(name:alice AND name:bob) OR name:charlie"
        assert str(A + (B * C)) == "name:alice OR (name:bob AND name:charlie)"

    def test_two_non_matching_expressions_are_wrapped(self) -> None:
        expr = (A + B) * (C + D)
        assert str(expr) == "(name:alice OR name:bob) AND (name:charlie OR name:dave)"

    def test_one_matching_one_not_keeps_both_as_children(self) -> None:
        expr = (A + B) + (C * D)
        assert len(expr.operands) == 2
        assert str(expr) == "(name:alice OR name:bob) OR (name:charlie AND name:dave)"

    def test_inputs_are_not_modified(self) -> None:
        left = A + B
        right = C + D
        _ = left + right
        assert left.operands == (A, B)
        assert right.operands == (C, D)

    def test_with_range(self) -> None:
        expr = (StandardQueryOperand("name", "alice") + StandardQueryOperand("name", "bob")) * (
            RangeQueryOperand("age").ge(20)
        )
        assert str(expr) == "(name:alice OR name:bob) AND age:[20 TO *}"

    def test_sum_and_prod(self) -> None:
        assert str(QueryExpression.sum([A, B, C])) == "name:alice OR name:bob OR name:charlie"
        assert str(QueryExpression.prod([A, StandardQueryOperand("age", "3")])) == (
            "name:alice AND age:3"
        )

    def test_rejects_non_query_operand(self) -> None:
        with pytest.raises(TypeError):
            A + "name:bob"  # type: ignore[operator]


def _leaf_count(expr: QueryExpression) -> int:
    return sum(
        _leaf_count(child) if isinstance(child, QueryExpression) else 1 for child in expr.operands
    )


SHAPES = {
    "leaf": A,
    "or": B + C,
    "and": B * C,
}


@pytest.mark.parametrize("left", SHAPES)
@pytest.mark.parametrize("right", SHAPES)
@pytest.mark.parametrize("operator", [Operator.OR, Operator.AND])
def test_combination_properties(left: str, right: str, operator: Operator) -> None:
    lhs = SHAPES[left]
    rhs = SHAPES[right]
    expr = lhs + rhs if operator is Operator.OR else lhs * rhs

    assert expr.operator is operator
    # No leaf is lost or duplicated
    left_leaves = 1 if left == "leaf" else 2
    right_leaves = 1 if right == "leaf" else 2
    assert _leaf_count(expr) == left_leaves + right_leaves
    # Sub-expressions with the other operator are always parenthesized
    for child in expr.operands:
        if isinstance(child, QueryExpression) and child.operator is not operator:
            assert f"({child})" in str(expr)
