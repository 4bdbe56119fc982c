"""Show system information of a Solr instance."""

from __future__ import annotations

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import console, create_table


@click.command("info")
@pass_context
def cli(ctx: Context) -> None:
    """Show Solr mode, home directory and versions."""
    with solr_errors(), ctx.make_client() as client:
        system = client.status()

    table = create_table(title=client.url, show_header=False)
    table.add_column("Key", style="field")
    table.add_column("Value")
    table.add_row("Mode", system.mode)
    table.add_row("Solr home", system.solr_home)
    table.add_row("Core root", system.core_root)
    table.add_row("Solr version", system.lucene.solr_spec_version)
    table.add_row("Lucene version", system.lucene.lucene_spec_version)

    console.print(table)
