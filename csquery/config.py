"""Configuration management for csquery."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from csquery.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "csquery" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        colored_output: Whether to use colored terminal output.
        output_format: How rendered queries are printed ("text" or "json").
        indent: Indentation for JSON output.
        config_path: Path where config was loaded from (None if defaults).
    """

    colored_output: bool = True
    output_format: str = "text"
    indent: int = 2
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        if self.output_format not in OUTPUT_FORMATS:
            warnings.append(
                f"output.format={self.output_format!r} is not one of "
                f"{', '.join(OUTPUT_FORMATS)}; using text"
            )
            self.output_format = "text"

        if self.indent < 0:
            warnings.append(f"output.indent={self.indent} is negative; using 0")
            self.indent = 0

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
        # Use defaults
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: csquery init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    # Load from file
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    # Parse [output] section
    output = data.get("output", {})
    if "format" in output:
        value = output["format"]
        if not isinstance(value, str):
            raise ConfigValidationError("output.format", value, "must be a string")
        config.output_format = value

    if "indent" in output:
        value = output["indent"]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigValidationError("output.indent", value, "must be an integer")
        config.indent = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.

    Returns:
        The path written.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()

    # Ensure directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Build TOML structure
    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
        "output": {
            "format": config.output_format,
            "indent": config.indent,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)

    return config_path
