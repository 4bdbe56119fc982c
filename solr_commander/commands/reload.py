"""Reload a core."""

from __future__ import annotations

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import success


@click.command("reload")
@click.argument("core", required=False)
@pass_context
def cli(ctx: Context, core: str | None) -> None:
    """Reload CORE so it picks up config and schema changes."""
    name = ctx.core_name(core)
    with solr_errors(), ctx.make_client() as client:
        status = client.core(name).reload()

    if not ctx.quiet:
        success(f"Reloaded core {name} (status {status})")
