"""Command-line interface for solr-commander."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from solr_commander import __version__
from solr_commander.client import SolrClient
from solr_commander.config import Config, load_config
from solr_commander.utils.output import (
    error,
    set_color,
    set_verbosity,
    warning,
)


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False
        self.url: str | None = None
        self.port: int | None = None

    def make_client(self) -> SolrClient:
        """Create a client from the config and command-line overrides.

        Raises:
            SolrClientError: If the configured URL is invalid.
        """
        config = self.config or Config()
        return SolrClient(
            self.url or config.solr_url,
            self.port or config.solr_port,
            timeout=config.timeout,
        )

    def core_name(self, name: str | None) -> str:
        """Return ``name`` or the configured default core."""
        if name:
            return name
        if self.config is not None and self.config.default_core:
            return self.config.default_core
        error(
            "No core given",
            hint="Pass a core name or set solr.default_core in the config file",
        )
        raise SystemExit(1)


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/solr-commander/config.toml)",
)
@click.option(
    "--url",
    "-u",
    default=None,
    help="Solr URL, e.g. http://localhost (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Solr port (overrides config)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.version_option(version=__version__, prog_name="solr-commander")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    url: str | None,
    port: int | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """solr-commander: Inspect, search and update Solr cores.

    Configuration is loaded from ~/.config/solr-commander/config.toml by default.
    Use --config to specify an alternative configuration file.

    Examples:

        # List cores on a local instance
        solr-commander cores

        # Search a core with the eDisMax parser
        solr-commander select "rust programming" books --parser edismax --qf title
    """
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet
    app_ctx.url = url
    app_ctx.port = port

    set_verbosity(verbose=verbose, debug=debug)

    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    elif verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
        app_ctx.config = loaded_config

        if not disable_color and not loaded_config.colored_output:
            set_color(False)

        if not quiet:
            for warn in warnings:
                warning(warn)

    except Exception as e:
        error(str(e))
        ctx.exit(1)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    for name in command:
        cmd = group.get_command(ctx, name)
        if cmd is None:
            error(f"Unknown command: {name}")
            ctx.exit(1)
            return
        if isinstance(cmd, click.Group):
            group = cmd
        else:
            click.echo(cmd.get_help(ctx))
            return
    click.echo(group.get_help(ctx))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from solr_commander.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
