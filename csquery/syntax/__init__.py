"""Reader for the structured query syntax."""

from csquery.syntax.parser import parse_query

__all__ = [
    "parse_query",
]
