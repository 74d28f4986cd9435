"""Command-line interface for csquery."""

from __future__ import annotations

import os
from pathlib import Path

import click

from csquery import __version__
from csquery.config import Config, load_config
from csquery.exceptions import ConfigError
from csquery.utils.output import (
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


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/csquery/config.toml)",
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
@click.version_option(version=__version__, prog_name="csquery")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
) -> None:
    """csquery: Build AWS CloudSearch structured queries.

    Renders query documents (JSON or TOML) to the structured query syntax
    and checks hand-written structured queries.

    Configuration is loaded from ~/.config/csquery/config.toml by default.
    Use --config to specify an alternative configuration file.

    Examples:

        # Render the queries in a document
        csquery render queries.toml

        # Check and normalize a structured query
        csquery check "(and title:'star' (not 'wars'))"
    """
    # Initialize context
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet

    # Configure module-level verbosity for output helpers
    set_verbosity(verbose=verbose, debug=debug)

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    # Load configuration
    try:
        loaded_config, warnings = load_config(config)
        app_ctx.config = loaded_config

        # Apply config settings
        if not disable_color and not loaded_config.colored_output:
            set_color(False)

        # Show warnings only when asked for; a missing config is normal
        if verbose and not quiet:
            for warn in warnings:
                warning(warn)

    except ConfigError as e:
        error(str(e))
        ctx.exit(1)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    # Resolve subcommand chain
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
    # Print group help
    click.echo(group.get_help(ctx))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from csquery.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
