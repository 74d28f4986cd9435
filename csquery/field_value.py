"""Field value pattern matchers for the structured query syntax.

If a :class:`FieldValue` does not have a ``name``, all text and text-array
fields are searched. If it does have a ``name``, only the named field is
searched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import TYPE_CHECKING, Any, Union

from csquery.exceptions import FieldValueTypeError
from csquery.operator_option import OperatorOption
from csquery.range import Range, is_range_string
from csquery.utils.formatting import escape, format_number, format_timestamp, is_number

if TYPE_CHECKING:
    from csquery.expression import Expression

logger = logging.getLogger(__name__)

Value = Union[str, int, float, datetime, Range, "Expression", OperatorOption]


def _is_parenthesized(value: str) -> bool:
    return value.startswith("(") and value.endswith(")")


def _convert(value: Any) -> Value:
    """Normalize a raw value into one of the field content types."""
    from csquery.expression import Expression

    if value is None:
        return ""
    if isinstance(value, (Range, range)) or (isinstance(value, tuple) and len(value) == 2):
        return Range.new(value)
    if isinstance(value, (str, datetime, Expression, OperatorOption)) or is_number(value):
        return value
    raise FieldValueTypeError(value)


@dataclass(frozen=True)
class FieldValue:
    """A single, optionally named, match target.

    Attributes:
        value: A string, number, timestamp, :class:`Range` or nested
            :class:`~csquery.expression.Expression`.
        name: Field name, or None to search all text fields.
    """

    value: Value
    name: str | None = None

    @classmethod
    def new(cls, value: Any) -> FieldValue | None:
        """Provide an unnamed FieldValue for the value.

        A FieldValue is returned unchanged. A single-entry mapping is read as
        ``{name: value}``; any other mapping is not a field and gives None.

            >>> FieldValue.new({"title": "Star Wars"})
            FieldValue(value='Star Wars', name='title')
        """
        if isinstance(value, FieldValue):
            return value
        if isinstance(value, Mapping):
            if len(value) != 1:
                logger.debug("Ignoring mapping with %d entries as a field value", len(value))
                return None
            ((name, item),) = value.items()
            return cls.new_named(name, item)
        return cls.new_named(None, value)

    @classmethod
    def new_named(cls, name: Any, value: Any) -> FieldValue:
        """Provide an optionally named FieldValue.

        If ``name`` is one of the operators, the value is read as the
        conditions of a nested expression instead:

            >>> FieldValue.new_named("not", ["star"]).to_value()
            "(not 'star')"

        A FieldValue given as ``value`` is renamed. Tuples and ``range``
        objects become a :class:`Range`, and None becomes ``""``.

        Raises:
            FieldValueTypeError: If the value cannot be rendered in a query.
        """
        from csquery.expression import Expression, operator_for

        operator = operator_for(name)
        if operator is not None:
            return cls(value=Expression.new(operator, value))

        if isinstance(name, str) and not name:
            name = None
        elif name is not None:
            name = str(name)

        if isinstance(value, FieldValue):
            return replace(value, name=name)
        return cls(value=_convert(value), name=name)

    def to_value(self) -> str:
        """Render the field value in structured query syntax."""
        text = _format(self.value)
        if self.name is None:
            return text
        if not text:
            return self.name
        return f"{self.name}:{text}"

    def __str__(self) -> str:
        return self.to_value()


def _format(value: Value) -> str:
    from csquery.expression import Expression

    if isinstance(value, Range):
        return value.to_value()
    if isinstance(value, Expression):
        return value.to_query()
    if isinstance(value, OperatorOption):
        return ""
    if isinstance(value, datetime):
        return format_timestamp(value)
    if is_number(value):
        return format_number(value)  # type: ignore[arg-type]
    if _is_parenthesized(value) or is_range_string(value):  # type: ignore[arg-type]
        return value  # type: ignore[return-value]
    return f"'{escape(value)}'"  # type: ignore[arg-type]
