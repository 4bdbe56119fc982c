"""Delete every document in a core."""

from __future__ import annotations

import click

from solr_commander.cli import Context, pass_context
from solr_commander.commands._common import solr_errors
from solr_commander.utils.output import success


@click.command("truncate")
@click.argument("core", required=False)
@click.option("--yes", "-y", is_flag=True, default=False, help="Do not ask for confirmation")
@click.option(
    "--no-commit",
    is_flag=True,
    default=False,
    help="Leave the deletion uncommitted",
)
@pass_context
def cli(ctx: Context, core: str | None, yes: bool, no_commit: bool) -> None:
    """Delete all documents from CORE and commit.

    \b
      solr-commander truncate books --yes
    """
    name = ctx.core_name(core)
    if not yes:
        click.confirm(f"Delete all documents in core {name}?", abort=True)

    with solr_errors(), ctx.make_client() as client:
        solr_core = client.core(name)
        solr_core.truncate()
        if not no_commit:
            solr_core.commit()

    if not ctx.quiet:
        success(f"Truncated core {name}")
