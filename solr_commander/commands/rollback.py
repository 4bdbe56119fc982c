"""Roll back uncommitted updates."""

from __future__ import annotations

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import success


@click.command("rollback")
@click.argument("core", required=False)
@pass_context
def cli(ctx: Context, core: str | None) -> None:
    """Discard updates to CORE made since the last commit."""
    name = ctx.core_name(core)
    with solr_errors(), ctx.make_client() as client:
        client.core(name).rollback()

    if not ctx.quiet:
        success(f"Rolled back core {name}")
