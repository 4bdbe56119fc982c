"""Show the status of one core."""

from __future__ import annotations

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import console, create_table


@click.command("status")
@click.argument("core", required=False)
@pass_context
def cli(ctx: Context, core: str | None) -> None:
    """Show index statistics of CORE (default: solr.default_core)."""
    name = ctx.core_name(core)
    with solr_errors(), ctx.make_client() as client:
        status = client.core(name).status()

    index = status.index
    table = create_table(title=f"Core {status.name}", show_header=False)
    table.add_column("Key", style="field")
    table.add_column("Value")
    table.add_row("Instance dir", status.instance_dir)
    table.add_row("Data dir", status.data_dir)
    table.add_row("Config", status.config)
    table.add_row("Schema", status.schema)
    table.add_row("Started", status.start_time)
    table.add_row("Uptime (ms)", str(status.uptime))
    table.add_row("Docs", str(index.num_docs))
    table.add_row("Max doc", str(index.max_doc))
    table.add_row("Deleted", str(index.deleted_docs))
    table.add_row("Segments", str(index.segment_count))
    table.add_row("Current", "yes" if index.current else "no")
    table.add_row("Size", index.size)

    console.print(table)
