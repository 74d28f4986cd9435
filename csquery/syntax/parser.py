"""Parse structured query syntax strings back into expressions."""

from __future__ import annotations

import re
from importlib import resources
from typing import Any

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from csquery.exceptions import QuerySyntaxError
from csquery.expression import Expression
from csquery.field_value import FieldValue
from csquery.operator_option import OperatorOption
from csquery.range import Range
from csquery.utils.formatting import unescape

_INTEGER = re.compile(r"-?\d+")


def _load_grammar() -> str:
    """Load the Lark grammar from the package resources."""
    return resources.files("csquery.syntax").joinpath("grammar.lark").read_text()


_GRAMMAR_TEXT = _load_grammar()

_parser = Lark(
    _GRAMMAR_TEXT,
    parser="earley",
    ambiguity="resolve",
)


class _QueryTransformer(Transformer):
    """Transform the Lark parse tree into expressions.

    Every expression goes through :meth:`Expression.new`, so parsed text is
    held to the same rules as expressions built in code.
    """

    def expr(self, items: list[Any]) -> Expression:
        operator = str(items[0])
        return Expression.new(operator, list(items[1:]))

    def option(self, items: list[Any]) -> OperatorOption | None:
        return OperatorOption.new(str(items[0]), str(items[1]))

    def named_field(self, items: list[Any]) -> FieldValue:
        return FieldValue.new_named(str(items[0]), items[1])

    def bare_field(self, items: list[Any]) -> Any:
        return items[0]

    def range_value(self, items: list[Any]) -> Range:
        opening, *bounds, closing = items
        lower = upper = None
        for side, value in bounds:
            if side == "lower":
                lower = value
            else:
                upper = value

        lower_inclusive = str(opening) == "["
        upper_inclusive = str(closing) == "]"
        return Range.from_descriptor(
            lower=lower if lower_inclusive else None,
            lower_exclusive=None if lower_inclusive else lower,
            upper=upper if upper_inclusive else None,
            upper_exclusive=None if upper_inclusive else upper,
        )

    def lower(self, items: list[Any]) -> tuple[str, Any]:
        return ("lower", items[0])

    def upper(self, items: list[Any]) -> tuple[str, Any]:
        return ("upper", items[0])

    def number(self, items: list[Any]) -> int | float:
        text = str(items[0])
        if _INTEGER.fullmatch(text):
            return int(text)
        return float(text)

    def string(self, items: list[Any]) -> str:
        # Strip surrounding quotes
        return unescape(str(items[0])[1:-1])

    def OPERATOR(self, token: Token) -> str:
        return str(token)


_transformer = _QueryTransformer()


def parse_query(query_string: str) -> Expression:
    """Parse a structured query string into an Expression.

    Args:
        query_string: Query in structured query syntax, such as
            ``(and title:'star' (not 'wars'))``.

    Returns:
        The validated Expression.

    Raises:
        QuerySyntaxError: If the query cannot be parsed.
        ExpressionError: If the parsed expression breaks an operator's rules.
        RangeError: If a range in the query is invalid.
    """
    query_string = query_string.strip()
    if not query_string:
        raise QuerySyntaxError(query_string, "query is empty")

    try:
        tree = _parser.parse(query_string)
    except UnexpectedInput as e:
        raise QuerySyntaxError(query_string, str(e)) from e

    try:
        return _transformer.transform(tree)
    except VisitError as e:
        raise e.orig_exc from e
