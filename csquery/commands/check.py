"""Check structured query strings."""

from __future__ import annotations

import json

import click

from csquery.cli import Context, pass_context
from csquery.exceptions import CSQueryError, QuerySyntaxError
from csquery.syntax import parse_query
from csquery.utils.output import error, print_query, success

EXIT_SUCCESS = 0
EXIT_PARSE_ERROR = 1
EXIT_INVALID_QUERY = 2


@click.command("check")
@click.argument("query", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: from config, else text)",
)
@pass_context
def cli(ctx: Context, query: tuple[str, ...], output_format: str | None) -> None:
    """Check a structured query and print its canonical form.

    QUERY is a structured query string. Multiple arguments are joined
    with spaces.

    \b
    Examples:
      csquery check "(and title:'star' (not 'wars'))"
      csquery check "(near distance=2 field=plot 'teenage vampire')"

    \b
    Exit codes:
      0  query is valid
      1  query could not be parsed
      2  query breaks an operator's rules
    """
    config = ctx.config
    if output_format is None:
        output_format = config.output_format if config is not None else "text"
    indent = config.indent if config is not None else 2

    query_string = " ".join(query)

    try:
        expr = parse_query(query_string)
    except QuerySyntaxError as e:
        error(str(e))
        raise SystemExit(EXIT_PARSE_ERROR)
    except CSQueryError as e:
        error(str(e))
        raise SystemExit(EXIT_INVALID_QUERY)

    canonical = expr.to_query()

    if output_format == "json":
        result = {"query": canonical, "operator": expr.operator.value}
        click.echo(json.dumps(result, indent=indent))
    else:
        print_query(canonical)
        if not ctx.quiet and canonical != query_string.strip():
            success("Query is valid (normalized)")

    raise SystemExit(EXIT_SUCCESS)
