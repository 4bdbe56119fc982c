"""List the cores of a Solr instance."""

from __future__ import annotations

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import console, create_table, info, warning


@click.command("cores")
@pass_context
def cli(ctx: Context) -> None:
    """List cores with their document counts.

    Examples:

    \b
      solr-commander cores
      solr-commander --url http://solr.internal --port 8983 cores
    """
    with solr_errors(), ctx.make_client() as client:
        core_list = client.cores()

    if not core_list.status:
        info("No cores found")
        return

    table = create_table(title="Solr cores")
    table.add_column("Core", style="core")
    table.add_column("Docs", justify="right")
    table.add_column("Deleted", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Started")

    for name, core in core_list.status.items():
        table.add_row(
            name,
            str(core.index.num_docs),
            str(core.index.deleted_docs),
            core.index.size,
            core.start_time,
        )

    console.print(table)

    for name, failure in core_list.init_failures.items():
        warning(f"Core {name} failed to initialize: {failure}")
