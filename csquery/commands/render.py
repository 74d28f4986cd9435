"""Render query documents to structured query syntax."""

from __future__ import annotations

import json
from pathlib import Path

import click

from csquery.cli import Context, pass_context
from csquery.document import document_queries, load_document, loads_document
from csquery.exceptions import CSQueryError, DocumentError
from csquery.expression import build
from csquery.utils.output import debug, error, print_query, verbose

EXIT_SUCCESS = 0
EXIT_DOCUMENT_ERROR = 1
EXIT_INVALID_QUERY = 2


@click.command("render")
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (default: from config, else text)",
)
@click.option(
    "--input-format",
    "-i",
    type=click.Choice(["json", "toml"]),
    default=None,
    help="Document format (default: from the file suffix; json for stdin)",
)
@pass_context
def cli(
    ctx: Context,
    document: Path,
    output_format: str | None,
    input_format: str | None,
) -> None:
    """Render the queries in a JSON or TOML document.

    DOCUMENT maps operators to condition lists. Use - to read from stdin.

    \b
    Examples:
      csquery render queries.toml
      echo '{"and": ["star", {"title": "wars"}]}' | csquery render -

    \b
    Output formats:
      --format text   One query per line (default)
      --format json   JSON array of query strings
    """
    config = ctx.config
    if output_format is None:
        output_format = config.output_format if config is not None else "text"
    indent = config.indent if config is not None else 2

    try:
        if str(document) == "-":
            text = click.get_text_stream("stdin").read()
            data = loads_document(text, format=input_format or "json", source="<stdin>")
            queries = document_queries(data)
        elif input_format is not None:
            text = document.expanduser().read_text(encoding="utf-8")
            data = loads_document(text, format=input_format, source=str(document))
            queries = document_queries(data)
        else:
            queries = load_document(document)
    except (DocumentError, OSError) as e:
        error(str(e))
        raise SystemExit(EXIT_DOCUMENT_ERROR)
    except CSQueryError as e:
        # Range tables are checked while the document is read
        error(str(e))
        raise SystemExit(EXIT_INVALID_QUERY)

    debug(f"Loaded {len(queries)} query entries")

    try:
        expressions = build(queries)
    except CSQueryError as e:
        error(str(e), hint="Check the conditions given for the operator")
        raise SystemExit(EXIT_INVALID_QUERY)

    verbose(f"Rendered {len(expressions)} queries")

    if output_format == "json":
        click.echo(json.dumps([expr.to_query() for expr in expressions], indent=indent))
    else:
        for expr in expressions:
            print_query(expr.to_query())

    raise SystemExit(EXIT_SUCCESS)
