"""Unit tests for the query parameter builders."""

from __future__ import annotations

import pytest

from solr_commander.exceptions import BuilderConsumedError
from solr_commander.search import (
    CommonQueryBuilder,
    DisMaxQueryBuilder,
    EDisMaxQueryBuilder,
    FieldFacetBuilder,
    Operator,
    QueryOperand,
    RangeFacetBuilder,
    RangeQueryOperand,
    SortOrderBuilder,
    StandardQueryBuilder,
    StandardQueryOperand,
)


class TestCommonQueryBuilder:
    def test_empty(self) -> None:
        assert CommonQueryBuilder().build() == []

    def test_single_valued_parameters(self) -> None:
        params = (
            CommonQueryBuilder()
            .start(10)
            .rows(20)
            .fl("id,title")
            .wt("json")
            .op(Operator.OR)
            .sort(SortOrderBuilder().desc("score"))
            .build()
        )

        assert sorted(params) == sorted(
            [
                ("start", "10"),
                ("rows", "20"),
                ("fl", "id,title"),
                ("wt", "json"),
                ("q.op", "OR"),
                ("sort", "score desc"),
            ]
        )

    def test_last_write_wins(self) -> None:
        params = CommonQueryBuilder().rows(10).rows(50).build()
        assert params == [("rows", "50")]

    def test_debug_is_idempotent(self) -> None:
        params = CommonQueryBuilder().debug().debug().build()
        assert params == [("debug", "all"), ("debug.explain.structured", "true")]

    def test_fq_repeats_in_call_order(self) -> None:
        params = (
            CommonQueryBuilder()
            .fq(StandardQueryOperand("lang", "rust"))
            .fq(RangeQueryOperand("year").ge(2020))
            .fq("in_stock:true")
            .build()
        )

        assert params == [
            ("fq", "lang:rust"),
            ("fq", "year:[2020 TO *}"),
            ("fq", "in_stock:true"),
        ]

    def test_two_field_facets_keep_both_fields(self) -> None:
        params = (
            CommonQueryBuilder()
            .facet(FieldFacetBuilder("category"))
            .facet(FieldFacetBuilder("author"))
            .build()
        )

        assert ("facet", "true") in params
        assert [value for key, value in params if key == "facet.field"] == ["category", "author"]

    def test_multi_valued_parameters_come_last(self) -> None:
        params = CommonQueryBuilder().fq("a:1").rows(5).build()
        assert params == [("rows", "5"), ("fq", "a:1")]

    def test_sanitize_helper(self) -> None:
        assert CommonQueryBuilder().sanitize("C++") == r"C\+\+"

    def test_build_consumes_builder(self) -> None:
        builder = CommonQueryBuilder().rows(5)
        builder.build()

        with pytest.raises(BuilderConsumedError):
            builder.rows(10)
        with pytest.raises(BuilderConsumedError):
            builder.build()


class TestStandardQueryBuilder:
    def test_q(self) -> None:
        params = StandardQueryBuilder().q(QueryOperand("text_ja:hoge")).build()
        assert params == [("q", "text_ja:hoge")]

    def test_q_is_not_escaped_again(self) -> None:
        params = StandardQueryBuilder().q(StandardQueryOperand("lang", "C++")).build()
        assert params == [("q", r"lang:C\+\+")]

    def test_q_with_expression(self) -> None:
        expr = StandardQueryOperand("name", "alice") + StandardQueryOperand("name", "bob")
        params = StandardQueryBuilder().q(expr).build()
        assert params == [("q", "name:alice OR name:bob")]

    def test_sample_query(self) -> None:
        params = (
            StandardQueryBuilder()
            .q(StandardQueryOperand("text_ja", "高橋?"))
            .op(Operator.AND)
            .sow(True)
            .df("text_ja")
            .sort(SortOrderBuilder().desc("score").desc("difficulty"))
            .facet(FieldFacetBuilder("category"))
            .facet(RangeFacetBuilder("difficulty", 0, 2000, 400))
            .build()
        )

        expected = [
            ("q", "text_ja:高橋\\?"),
            ("df", "text_ja"),
            ("q.op", "AND"),
            ("sow", "true"),
            ("sort", "score desc,difficulty desc"),
            ("facet", "true"),
            ("facet.field", "category"),
            ("facet.range", "difficulty"),
            ("f.difficulty.facet.range.start", "0"),
            ("f.difficulty.facet.range.end", "2000"),
            ("f.difficulty.facet.range.gap", "400"),
        ]
        assert len(params) == 11
        assert sorted(params) == sorted(expected)


class TestDisMaxQueryBuilder:
    def test_def_type_is_set_on_construction(self) -> None:
        assert DisMaxQueryBuilder().build() == [("defType", "dismax")]

    def test_q_is_escaped(self) -> None:
        params = DisMaxQueryBuilder().q("Programming C++").build()
        assert sorted(params) == [("defType", "dismax"), ("q", r"Programming C\+\+")]

    def test_q_plain_text(self) -> None:
        params = DisMaxQueryBuilder().q("プログラミング Rust").qf("title text").build()
        assert sorted(params) == sorted(
            [("defType", "dismax"), ("q", "プログラミング Rust"), ("qf", "title text")]
        )

    def test_sample_query(self) -> None:
        params = (
            DisMaxQueryBuilder()
            .q("すぬけ 耳")
            .qf("text_ja")
            .op(Operator.AND)
            .wt("json")
            .debug()
            .q_alt(QueryOperand("*:*"))
            .sort(SortOrderBuilder().desc("score").asc("start_at"))
            .fl("problem_title")
            .build()
        )

        assert sorted(params) == sorted(
            [
                ("defType", "dismax"),
                ("q", "すぬけ 耳"),
                ("qf", "text_ja"),
                ("q.op", "AND"),
                ("wt", "json"),
                ("debug", "all"),
                ("debug.explain.structured", "true"),
                ("q.alt", "*:*"),
                ("sort", "score desc,start_at asc"),
                ("fl", "problem_title"),
            ]
        )

    def test_dismax_parameters(self) -> None:
        params = (
            DisMaxQueryBuilder()
            .qs(2)
            .pf("title")
            .ps(3)
            .mm("2<75%")
            .tie(0.1)
            .bq("category:books^2")
            .bq(StandardQueryOperand("lang", "en"))
            .bf("recip(ms(NOW,released),3.16e-11,1,1)")
            .build()
        )

        assert params == [
            ("defType", "dismax"),
            ("qs", "2"),
            ("pf", "title"),
            ("ps", "3"),
            ("mm", "2<75%"),
            ("tie", "0.1"),
            ("bq", "category:books^2"),
            ("bq", "lang:en"),
            ("bf", "recip(ms(NOW,released),3.16e-11,1,1)"),
        ]


class TestEDisMaxQueryBuilder:
    def test_def_type_is_set_on_construction(self) -> None:
        assert EDisMaxQueryBuilder().build() == [("defType", "edismax")]

    def test_is_a_dismax_builder(self) -> None:
        assert isinstance(EDisMaxQueryBuilder(), DisMaxQueryBuilder)

    def test_sample_query(self) -> None:
        params = (
            EDisMaxQueryBuilder()
            .q("すぬけ 耳")
            .qf("text_ja text_en")
            .op(Operator.AND)
            .wt("json")
            .sow(True)
            .boost("boost")
            .debug()
            .q_alt(QueryOperand("*:*"))
            .sort(SortOrderBuilder().desc("score").asc("start_at"))
            .fl("problem_title")
            .build()
        )

        assert sorted(params) == sorted(
            [
                ("defType", "edismax"),
                ("q", "すぬけ 耳"),
                ("qf", "text_ja text_en"),
                ("sow", "true"),
                ("boost", "boost"),
                ("q.op", "AND"),
                ("wt", "json"),
                ("debug", "all"),
                ("debug.explain.structured", "true"),
                ("q.alt", "*:*"),
                ("sort", "score desc,start_at asc"),
                ("fl", "problem_title"),
            ]
        )

    def test_edismax_parameters(self) -> None:
        params = (
            EDisMaxQueryBuilder()
            .lowercase_operators(False)
            .pf2("title")
            .ps2(1)
            .pf3("body")
            .ps3(2)
            .stopwords(True)
            .uf("title body")
            .build()
        )

        assert params == [
            ("defType", "edismax"),
            ("lowercaseOperators", "false"),
            ("pf2", "title"),
            ("ps2", "1"),
            ("pf3", "body"),
            ("ps3", "2"),
            ("stopwords", "true"),
            ("uf", "title body"),
        ]
