"""Post a JSON update file to a core."""

from __future__ import annotations

from pathlib import Path

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import success, verbose


@click.command("post")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("core", required=False)
@click.option("--commit", is_flag=True, default=False, help="Commit after posting")
@pass_context
def cli(ctx: Context, file: Path, core: str | None, commit: bool) -> None:
    """Post FILE (a JSON document array or update commands) to CORE.

    CORE defaults to solr.default_core.

    Examples:

    \b
      solr-commander post books.json books --commit
    """
    name = ctx.core_name(core)
    body = file.read_bytes()
    verbose(f"Posting {len(body)} bytes from {file}")

    with solr_errors(), ctx.make_client() as client:
        solr_core = client.core(name)
        response = solr_core.post(body)
        if commit:
            solr_core.commit()

    if not ctx.quiet:
        suffix = " and committed" if commit else ""
        success(f"Posted {file.name} to {name}{suffix} (QTime {response.header.qtime} ms)")
