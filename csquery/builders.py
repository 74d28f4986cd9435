"""DSL-style constructors for structured query expressions.

Each operator has a function taking its conditions either as positional
arguments or as a single list, plus keyword arguments that are read as named
pairs (in order)::

    >>> and_(title="star", actor="Harrison Ford", boost=2).to_query()
    "(and boost=2 title:'star' actor:'Harrison Ford')"
    >>> and_([("title", "star"), ("title", "space")]).to_query()
    "(and title:'star' title:'space')"

Named pairs can repeat a key only in tuple form, as above.
"""

from __future__ import annotations

from typing import Any

from csquery.expression import Expression, Operator
from csquery.field_value import FieldValue
from csquery.operator_option import OperatorOption


def _gather(conditions: tuple[Any, ...], named: dict[str, Any]) -> list[Any]:
    if len(conditions) == 1 and isinstance(conditions[0], list):
        items = list(conditions[0])
    else:
        items = list(conditions)
    items.extend(named.items())
    return items


def field(name_or_value: Any, *value: Any) -> FieldValue | None:
    """Create a field value matcher.

    With one argument the matcher is unnamed; with two, the first names the
    field::

        >>> field(3).to_value()
        '3'
        >>> field("year", (1990, 2000)).to_value()
        'year:[1990,2000]'
    """
    if not value:
        return FieldValue.new(name_or_value)
    if len(value) > 1:
        raise TypeError(f"field() takes at most 2 arguments ({len(value) + 1} given)")
    return FieldValue.new_named(name_or_value, value[0])


def option(name: Any, value: Any) -> OperatorOption | None:
    """Create an operator option, or None if name or value is not usable."""
    return OperatorOption.new(name, value)


def and_(*conditions: Any, **named: Any) -> Expression:
    """Create an ``and`` expression.

        (and boost=N EXPRESSION1 EXPRESSION2 ... EXPRESSIONn)
    """
    return Expression.new(Operator.AND, _gather(conditions, named))


def or_(*conditions: Any, **named: Any) -> Expression:
    """Create an ``or`` expression.

        (or boost=N EXPRESSION1 EXPRESSION2 ... EXPRESSIONn)
    """
    return Expression.new(Operator.OR, _gather(conditions, named))


def not_(*conditions: Any, **named: Any) -> Expression:
    """Create a ``not`` expression.

        (not boost=N EXPRESSION)

    Raises:
        TooManyFieldValuesError: If more than one expression is given.
    """
    return Expression.new(Operator.NOT, _gather(conditions, named))


def near(*conditions: Any, **named: Any) -> Expression:
    """Create a ``near`` expression.

        (near boost=N distance=N field=FIELD 'STRING')

    Raises:
        MultipleWordsRequiredError: If the string has a single word.
        StringRequiredError: If the value is not a string.
    """
    return Expression.new(Operator.NEAR, _gather(conditions, named))


def phrase(*conditions: Any, **named: Any) -> Expression:
    """Create a ``phrase`` expression.

        (phrase boost=N field=FIELD 'STRING')
    """
    return Expression.new(Operator.PHRASE, _gather(conditions, named))


def prefix(*conditions: Any, **named: Any) -> Expression:
    """Create a ``prefix`` expression.

        (prefix boost=N field=FIELD 'STRING')
    """
    return Expression.new(Operator.PREFIX, _gather(conditions, named))


def range_(*conditions: Any, **named: Any) -> Expression:
    """Create a ``range`` expression.

        (range boost=N field=FIELD RANGE)

    The value may be a :class:`~csquery.range.Range`, a bound pair such as
    ``(None, 2000)``, a Python ``range`` or pre-rendered range text.

    Raises:
        RangeRequiredError: If the value is not a range.
    """
    return Expression.new(Operator.RANGE, _gather(conditions, named))


def term(*conditions: Any, **named: Any) -> Expression:
    """Create a ``term`` expression.

        (term boost=N field=FIELD 'STRING'|VALUE)
    """
    return Expression.new(Operator.TERM, _gather(conditions, named))
