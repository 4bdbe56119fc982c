"""Configuration management for solr-commander."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import tomli_w

from solr_commander.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)

DEFAULT_SOLR_URL = "http://localhost"
DEFAULT_SOLR_PORT = 8983


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "solr-commander" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        solr_url: Scheme and host of the Solr instance.
        solr_port: Port of the Solr instance.
        default_core: Core used when a command is given none.
        timeout: Request timeout in seconds (None waits indefinitely).
        colored_output: Whether to use colored terminal output.
        config_path: Path where config was loaded from (None if defaults).
    """

    solr_url: str = DEFAULT_SOLR_URL
    solr_port: int = DEFAULT_SOLR_PORT
    default_core: str | None = None
    timeout: float | None = None
    colored_output: bool = True
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        if not 1 <= self.solr_port <= 65535:
            warnings.append(f"solr.port={self.solr_port} is outside valid range 1-65535")

        if not urlsplit(self.solr_url).scheme:
            warnings.append(
                f"solr.url={self.solr_url!r} has no scheme (expected e.g. http://localhost)"
            )

        if self.timeout is not None and self.timeout <= 0:
            warnings.append(f"solr.timeout={self.timeout} is not positive, ignoring it")
            self.timeout = None

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: solr-commander init-config"
        )
        return config, warnings + config.validate()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    return config, warnings + config.validate()


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [solr] section
    solr = data.get("solr", {})
    if "url" in solr:
        value = solr["url"]
        if not isinstance(value, str):
            raise ConfigValidationError("solr.url", value, "must be a string")
        config.solr_url = value

    if "port" in solr:
        value = solr["port"]
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError("solr.port", value, "must be an integer")
        config.solr_port = value

    if "default_core" in solr:
        value = solr["default_core"]
        if not isinstance(value, str):
            raise ConfigValidationError("solr.default_core", value, "must be a string")
        config.default_core = value

    if "timeout" in solr:
        value = solr["timeout"]
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ConfigValidationError("solr.timeout", value, "must be a number of seconds")
        config.timeout = float(value)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """Save configuration to file.

    The file is created readable by its owner only, since it names the
    Solr host the commands talk to.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.

    Returns:
        The resolved path that was written.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "solr": {
            "url": config.solr_url,
            "port": config.solr_port,
        },
        "display": {
            "colored_output": config.colored_output,
        },
    }

    # Optional values are only written when set
    if config.default_core is not None:
        data["solr"]["default_core"] = config.default_core
    if config.timeout is not None:
        data["solr"]["timeout"] = config.timeout

    fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    # O_CREAT mode only applies to new files
    os.fchmod(fd, 0o600)
    with open(fd, "wb") as f:
        tomli_w.dump(data, f)
    return config_path
