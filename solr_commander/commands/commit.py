"""Commit pending updates to a core."""

from __future__ import annotations

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import success


@click.command("commit")
@click.argument("core", required=False)
@click.option(
    "--optimize",
    is_flag=True,
    default=False,
    help="Optimize the index instead of a plain commit",
)
@pass_context
def cli(ctx: Context, core: str | None, optimize: bool) -> None:
    """Commit pending updates to CORE."""
    name = ctx.core_name(core)
    with solr_errors(), ctx.make_client() as client:
        client.core(name).commit(optimize=optimize)

    if not ctx.quiet:
        success(f"{'Optimized' if optimize else 'Committed'} core {name}")
