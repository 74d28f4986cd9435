"""Expressions in the structured query syntax.

An expression is an operator, the options it accepts, and one or more field
values, rendered as::

    (operator option=value ... name:value ...)

Construction takes a heterogeneous condition list. ``None`` entries are
dropped; two-element tuples whose first item is a non-empty string are
*named* pairs; everything else is *positional*. Named pairs whose key is an
option the operator accepts become options, the rest become named field
values. Positional :class:`OperatorOption` instances become options if the
operator accepts them and are discarded otherwise; the remaining positional
entries become unnamed field values.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from csquery.exceptions import (
    MultipleWordsRequiredError,
    NoFieldValuesError,
    RangeRequiredError,
    StringRequiredError,
    TooManyFieldValuesError,
    UnknownOperatorError,
)
from csquery.field_value import FieldValue
from csquery.operator_option import OperatorOption, OptionName, option_name
from csquery.range import Range, is_range_string

logger = logging.getLogger(__name__)


class Operator(str, enum.Enum):
    """Valid operator names."""

    AND = "and"
    NEAR = "near"
    NOT = "not"
    OR = "or"
    PHRASE = "phrase"
    PREFIX = "prefix"
    RANGE = "range"
    TERM = "term"

    def __str__(self) -> str:
        return self.value


# Options accepted by each operator, in rendering order.
OPERATOR_OPTIONS: dict[Operator, tuple[OptionName, ...]] = {
    Operator.AND: (OptionName.BOOST,),
    Operator.OR: (OptionName.BOOST,),
    Operator.NOT: (OptionName.BOOST, OptionName.FIELD),
    Operator.TERM: (OptionName.BOOST, OptionName.FIELD),
    Operator.PHRASE: (OptionName.BOOST, OptionName.FIELD),
    Operator.PREFIX: (OptionName.BOOST, OptionName.FIELD),
    Operator.RANGE: (OptionName.BOOST, OptionName.FIELD),
    Operator.NEAR: (OptionName.BOOST, OptionName.DISTANCE, OptionName.FIELD),
}

# Operators that take exactly one field value.
SINGLE_FIELD_OPERATORS: frozenset[Operator] = frozenset(
    {
        Operator.NEAR,
        Operator.NOT,
        Operator.PHRASE,
        Operator.PREFIX,
        Operator.RANGE,
        Operator.TERM,
    }
)

# Operators whose field value must be a string.
STRING_OPERATORS: frozenset[Operator] = frozenset(
    {Operator.NEAR, Operator.PHRASE, Operator.PREFIX}
)


def operators() -> list[Operator]:
    """Return the list of supported expression operators."""
    return list(Operator)


def operator_for(name: object) -> Operator | None:
    """Return the Operator named by name, or None if it is not an operator."""
    if isinstance(name, Operator):
        return name
    if isinstance(name, str):
        try:
            return Operator(name)
        except ValueError:
            return None
    return None


def _is_named(entry: object) -> bool:
    return (
        isinstance(entry, tuple)
        and len(entry) == 2
        and isinstance(entry[0], str)
        and entry[0] != ""
    )


def _as_conditions(conditions: Any) -> list[Any]:
    """Return conditions as a list; mappings give their items as named pairs."""
    if conditions is None:
        return []
    if isinstance(conditions, list):
        return conditions
    if isinstance(conditions, Mapping):
        return list(conditions.items())
    return [conditions]


def _split_conditions(
    operator: Operator, conditions: list[Any]
) -> tuple[list[Any], list[Any], list[tuple[str, Any]]]:
    """Partition conditions into (options, positional values, named values)."""
    allowed = OPERATOR_OPTIONS[operator]
    entries = [entry for entry in conditions if entry is not None]

    named = [entry for entry in entries if _is_named(entry)]
    positional = [entry for entry in entries if not _is_named(entry)]

    options: list[Any] = []
    values: list[Any] = []
    for entry in positional:
        if isinstance(entry, OperatorOption):
            if entry.name in allowed:
                options.append(entry)
            else:
                logger.debug("Discarding option `%s` not accepted by `%s`", entry.name, operator)
        else:
            values.append(entry)

    for name in allowed:
        for key, value in named:
            if option_name(key) is name:
                if value is not None:
                    options.append((name, value))
                break

    named_values = [(key, value) for key, value in named if option_name(key) not in allowed]
    return options, values, named_values


def validate_fields(operator: Operator, fields: tuple[FieldValue, ...]) -> None:
    """Check the field values against the operator's arity and type rules.

    Raises:
        NoFieldValuesError: If there are no field values.
        TooManyFieldValuesError: If a single-field operator has several.
        MultipleWordsRequiredError: If a `near` string has only one word.
        StringRequiredError: If `near`, `phrase` or `prefix` has a non-string.
        RangeRequiredError: If `range` has neither a range nor range text.
    """
    if not fields:
        raise NoFieldValuesError(operator.value)

    if operator in SINGLE_FIELD_OPERATORS and len(fields) > 1:
        raise TooManyFieldValuesError(operator.value, len(fields))

    if operator in (Operator.AND, Operator.OR):
        return

    value = fields[0].value

    if operator is Operator.NEAR and isinstance(value, str):
        if " " not in value:
            raise MultipleWordsRequiredError()
        return

    if operator in STRING_OPERATORS and not isinstance(value, str):
        raise StringRequiredError(operator.value)

    if operator is Operator.RANGE:
        if isinstance(value, Range):
            return
        if isinstance(value, str) and is_range_string(value):
            return
        raise RangeRequiredError()


@dataclass(frozen=True)
class Expression:
    """An operator with its options and field values.

    Build expressions with :meth:`new` (or the DSL functions in
    :mod:`csquery.builders`) so the operator's rules are checked.
    """

    operator: Operator
    options: tuple[OperatorOption, ...] = ()
    fields: tuple[FieldValue, ...] = ()

    @classmethod
    def new(cls, operator: object, conditions: Any = None) -> Expression:
        """Build an expression for the operator and conditions.

            >>> Expression.new("and", [("title", "star"), ("boost", 2)]).to_query()
            "(and boost=2 title:'star')"

        Raises:
            UnknownOperatorError: If the operator is not supported.
            ExpressionError: If the conditions break the operator's rules.
        """
        op = operator_for(operator)
        if op is None:
            raise UnknownOperatorError(operator)

        conditions = _as_conditions(conditions)
        logger.debug("Building `%s` expression from %d conditions", op, len(conditions))

        raw_options, values, named = _split_conditions(op, conditions)

        options = tuple(
            option
            for option in (OperatorOption.from_pair(raw) for raw in raw_options)
            if option is not None
        )

        candidates = [FieldValue.new(value) for value in values]
        candidates.extend(FieldValue.new_named(key, value) for key, value in named)
        fields = tuple(field for field in candidates if field is not None)

        validate_fields(op, fields)
        return cls(operator=op, options=options, fields=fields)

    def to_query(self) -> str:
        """Convert the expression to structured query syntax."""
        parts = [self.operator.value]
        parts.extend(option.to_value() for option in self.options)
        parts.extend(field.to_value() for field in self.fields)
        return "(" + " ".join(part for part in parts if part) + ")"

    def __str__(self) -> str:
        return self.to_query()


def build(document: Any) -> list[Expression]:
    """Build one expression per ``(operator, conditions)`` pair in document.

    The document may be a mapping of operator to conditions or a sequence of
    pairs. Expressions found in the sequence are kept as they are.
    """
    if document is None:
        return []
    if isinstance(document, Expression):
        return [document]
    if isinstance(document, Mapping):
        document = list(document.items())

    expressions: list[Expression] = []
    for entry in document:
        if isinstance(entry, Expression):
            expressions.append(entry)
            continue
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            raise UnknownOperatorError(entry)
        operator, conditions = entry
        expressions.append(Expression.new(operator, conditions))
    return expressions


def parse(document: Any) -> Expression | list[Expression] | None:
    """Parse a structured description of a query.

    An empty document gives None, a single pair gives its expression, and
    several pairs give a list of expressions.

        >>> parse([]) is None
        True
        >>> parse({"and": ["star", "wars"]}).to_query()
        "(and 'star' 'wars')"
    """
    expressions = build(document)
    if not expressions:
        return None
    if len(expressions) == 1:
        return expressions[0]
    return expressions


def to_query(query: Expression | list[Expression] | None) -> str | list[str]:
    """Convert an expression, or a list of expressions, to query strings."""
    if query is None:
        return ""
    if isinstance(query, list):
        return [expression.to_query() for expression in query]
    return query.to_query()
