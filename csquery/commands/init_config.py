"""Initialize configuration file for csquery."""

from __future__ import annotations

from pathlib import Path

import click

from csquery.cli import Context, pass_context
from csquery.config import Config, get_default_config_path, save_config
from csquery.utils.output import error, info, success


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/csquery/config.toml)",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None) -> None:
    """Create a new configuration file with default settings.

    \b
    Examples:
      # Create config at default location
      csquery init-config

    \b
      # Create config at custom location
      csquery init-config --output ./my-config.toml
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    try:
        written = save_config(Config(), config_path)
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1)

    success(f"Created config file: {written}")
    info("Edit this file to customize your settings.")
