"""Terminal output for solr-commander commands.

Results go to stdout through :data:`console`; diagnostics (warnings,
errors, debug traces) go to stderr so ``--json`` output stays parseable.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "core": "bold magenta",
        "field": "blue",
    }
)

console = Console(theme=THEME)
error_console = Console(theme=THEME, stderr=True)

# Set once by the command group from --verbose/--debug
_level = {"verbose": False, "debug": False}


def set_verbosity(*, verbose: bool = False, debug: bool = False) -> None:
    _level["verbose"] = verbose or debug
    _level["debug"] = debug


def set_color(enabled: bool) -> None:
    for target in (console, error_console):
        target.no_color = not enabled


def info(message: str) -> None:
    console.print(message, style="info")


def success(message: str) -> None:
    console.print(message, style="success")


def verbose(message: str) -> None:
    """Like :func:`info`, shown only with ``--verbose`` or ``--debug``."""
    if _level["verbose"]:
        info(message)


def warning(message: str) -> None:
    error_console.print("[warning]Warning:[/warning]", message, highlight=False)


def error(message: str, hint: str | None = None) -> None:
    """Report a failure on stderr, with an optional next step for the user."""
    error_console.print("[error]Error:[/error]", message, highlight=False)
    if hint:
        error_console.print("  [info]Hint:[/info]", hint, highlight=False)


def debug(message: str) -> None:
    if _level["debug"]:
        error_console.print("[warning]\\[debug][/warning]", message, highlight=False)


def print_json(data: Any) -> None:
    console.print_json(data=data)


def create_table(title: str | None = None, **kwargs: Any) -> Table:
    """Return a rich table for command results; ``kwargs`` go to :class:`Table`."""
    return Table(title=title, **kwargs)
