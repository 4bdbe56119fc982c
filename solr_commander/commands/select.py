"""Search a core with the standard, DisMax or eDisMax parser."""

from __future__ import annotations

from typing import Any

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.models.response import SolrFacetBody, SolrSelectResponse
from solr_commander.search import (
    CommonQueryBuilder,
    DisMaxQueryBuilder,
    EDisMaxQueryBuilder,
    FieldFacetBuilder,
    Operator,
    PhraseQueryOperand,
    SortOrderBuilder,
    StandardQueryBuilder,
    StandardQueryOperand,
)
from solr_commander.utils.output import console, create_table, debug, info, print_json

PARSERS = ("standard", "dismax", "edismax")

# Columns shown when --fl is not given
MAX_AUTO_COLUMNS = 6


def _parse_sort(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Validate ``field:asc|desc`` sort options."""
    result: list[tuple[str, str]] = []
    for value in values:
        field, sep, direction = value.rpartition(":")
        direction = direction.lower()
        if not sep or not field or direction not in ("asc", "desc"):
            raise click.BadParameter(f"expected FIELD:asc or FIELD:desc, got {value!r}")
        result.append((field, direction))
    return result


def build_params(
    parser: str,
    query: str,
    *,
    field: str | None = None,
    qf: str | None = None,
    fq: tuple[str, ...] = (),
    fl: str | None = None,
    sort: list[tuple[str, str]] | None = None,
    rows: int | None = None,
    start: int | None = None,
    facet_fields: tuple[str, ...] = (),
    op: str | None = None,
) -> list[tuple[str, str]]:
    """Translate command-line options into request parameters.

    With the standard parser ``query`` is used as a Lucene query, unless
    ``field`` is given, in which case it is escaped and searched in that
    field (as a phrase when it contains whitespace). DisMax and eDisMax
    always escape ``query`` and search the ``qf`` fields.
    """
    builder: CommonQueryBuilder
    if parser == "standard":
        standard = StandardQueryBuilder()
        if field:
            operand = (
                PhraseQueryOperand(field, query)
                if any(c.isspace() for c in query)
                else StandardQueryOperand(field, query)
            )
            standard.q(operand)
        else:
            standard.q(query)
        builder = standard
    else:
        dismax = EDisMaxQueryBuilder() if parser == "edismax" else DisMaxQueryBuilder()
        dismax.q(query)
        if qf:
            dismax.qf(qf)
        builder = dismax

    for filter_query in fq:
        builder.fq(filter_query)
    if fl:
        builder.fl(fl)
    if sort:
        order = SortOrderBuilder()
        for sort_field, direction in sort:
            if direction == "asc":
                order.asc(sort_field)
            else:
                order.desc(sort_field)
        builder.sort(order)
    if rows is not None:
        builder.rows(rows)
    if start is not None:
        builder.start(start)
    for facet_field in facet_fields:
        builder.facet(FieldFacetBuilder(facet_field).min_count(1))
    if op:
        builder.op(Operator(op.upper()))

    return builder.build()


def _print_docs(response: SolrSelectResponse[dict[str, Any]], fl: str | None) -> None:
    body = response.response
    if not body.docs:
        info("No documents found")
        return

    if fl:
        columns = [c.strip() for c in fl.split(",") if c.strip() and c.strip() != "*"]
    else:
        columns = []
    if not columns:
        for doc in body.docs:
            for key in doc:
                if key not in columns and not key.startswith("_"):
                    columns.append(key)
        columns = columns[:MAX_AUTO_COLUMNS]

    table = create_table(
        title=f"{body.num_found} found, showing {body.start + 1}-{body.start + len(body.docs)}"
    )
    for column in columns:
        table.add_column(column, style="field" if column == "id" else None)
    for doc in body.docs:
        table.add_row(*(_cell(doc.get(column)) for column in columns))

    console.print(table)


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def _print_facets(facets: SolrFacetBody) -> None:
    for name, counts in facets.facet_fields.items():
        table = create_table(title=f"Facet: {name}")
        table.add_column("Value")
        table.add_column("Count", justify="right")
        for label, count in counts:
            table.add_row(label, str(count))
        console.print(table)


@click.command("select")
@click.argument("query")
@click.argument("core", required=False)
@click.option(
    "--parser",
    type=click.Choice(PARSERS),
    default="standard",
    show_default=True,
    help="Query parser to use",
)
@click.option("--field", "-f", default=None, help="Search QUERY in this field (standard parser)")
@click.option("--qf", default=None, help="Query fields with optional boosts (dismax/edismax)")
@click.option("--fq", multiple=True, help="Filter query (repeatable)")
@click.option("--fl", default=None, help="Comma-separated fields to return")
@click.option(
    "--sort",
    "sort",
    multiple=True,
    callback=_parse_sort,
    help="Sort as FIELD:asc or FIELD:desc (repeatable)",
)
@click.option("--rows", "-n", type=int, default=None, help="Number of documents to return")
@click.option("--start", type=int, default=None, help="Offset of the first document")
@click.option("--facet-field", multiple=True, help="Field to facet on (repeatable)")
@click.option(
    "--op",
    type=click.Choice(["AND", "OR"], case_sensitive=False),
    default=None,
    help="Default operator between terms",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print documents as JSON")
@pass_context
def cli(
    ctx: Context,
    query: str,
    core: str | None,
    parser: str,
    field: str | None,
    qf: str | None,
    fq: tuple[str, ...],
    fl: str | None,
    sort: list[tuple[str, str]],
    rows: int | None,
    start: int | None,
    facet_field: tuple[str, ...],
    op: str | None,
    as_json: bool,
) -> None:
    """Search CORE (default: solr.default_core) for QUERY.

    Examples:

    \b
      # Lucene syntax with the standard parser
      solr-commander select 'title:rust AND year:[2020 TO *]' books

    \b
      # Escaped user input searched in one field
      solr-commander select 'C++ (2nd ed)' books --field title

    \b
      # eDisMax over boosted fields of the default core, with a facet
      solr-commander select rust --parser edismax --qf 'title^2 body' \\
          --facet-field category --sort year:desc
    """
    params = build_params(
        parser,
        query,
        field=field,
        qf=qf,
        fq=fq,
        fl=fl,
        sort=sort,
        rows=rows,
        start=start,
        facet_fields=facet_field,
        op=op,
    )
    debug(f"select params: {params}")

    name = ctx.core_name(core)
    with solr_errors(), ctx.make_client() as client:
        response = client.core(name).select(params)

    if as_json:
        print_json(response.response.docs)
        return

    _print_docs(response, fl)
    if response.facet_counts is not None:
        _print_facets(response.facet_counts)
