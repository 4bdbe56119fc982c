"""Write a config file pointing solr-commander at a Solr instance."""

from __future__ import annotations

from pathlib import Path

import click

from solr_commander.cli import Context, pass_context
from solr_commander.config import (
    DEFAULT_SOLR_PORT,
    DEFAULT_SOLR_URL,
    Config,
    get_default_config_path,
    save_config,
)
from solr_commander.utils.output import error, success, warning


@click.command("init-config")
@click.option("--url", default=DEFAULT_SOLR_URL, show_default=True, help="Solr scheme and host")
@click.option(
    "--port",
    type=click.IntRange(1, 65535),
    default=DEFAULT_SOLR_PORT,
    show_default=True,
    help="Solr port",
)
@click.option("--default-core", default=None, help="Core used when a command names none")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Request timeout in seconds",
)
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite an existing file")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write (default: ~/.config/solr-commander/config.toml)",
)
@pass_context
def cli(
    ctx: Context,
    url: str,
    port: int,
    default_core: str | None,
    timeout: float | None,
    force: bool,
    output: Path | None,
) -> None:
    """Create a configuration file for a Solr instance.

    The file is written readable by its owner only.

    Examples:

    \b
      # Local Solr with a default core
      solr-commander init-config --default-core books

    \b
      # Replace the config with a remote instance
      solr-commander init-config --url https://solr.internal --port 443 --force
    """
    target = (output or get_default_config_path()).expanduser()

    if target.exists() and not force:
        error(f"Config file already exists: {target}", hint="Use --force to overwrite")
        raise SystemExit(1)

    config = Config(solr_url=url, solr_port=port, default_core=default_core, timeout=timeout)
    for message in config.validate():
        warning(message)

    try:
        written = save_config(config, target)
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1) from e

    success(f"Created config file: {written}")
