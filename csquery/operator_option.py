"""Options for the structured query syntax operators.

During expression construction, options that are not recognized for a given
operator will either be discarded (if already an :class:`OperatorOption`) or
be treated as a named field (if given as a named pair). Options that do not
have a textual value are discarded.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from csquery.utils.formatting import is_number


class OptionName(str, enum.Enum):
    """Valid option names."""

    BOOST = "boost"
    DISTANCE = "distance"
    FIELD = "field"

    def __str__(self) -> str:
        return self.value


def option_name(name: object) -> OptionName | None:
    """Return the OptionName for name, or None if it is not an option."""
    if isinstance(name, OptionName):
        return name
    if isinstance(name, str):
        try:
            return OptionName(name)
        except ValueError:
            return None
    return None


def _text(value: Any) -> str | None:
    """Coerce an option value to text, or None if it has no textual form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return _text(value.value)
    if isinstance(value, str):
        # Option values are bare words in query text
        if not value or any(char.isspace() or char in "()" for char in value):
            return None
        return value
    if is_number(value):
        return str(value)
    return None


@dataclass(frozen=True)
class OperatorOption:
    """A named scalar option such as ``boost=2``."""

    name: OptionName
    value: str | None

    @classmethod
    def new(cls, name: object, value: Any = None) -> OperatorOption | None:
        """Return an OperatorOption, or None.

        None is returned if the name is not an option name, the value is None,
        or the value has no textual representation. This never raises.

            >>> OperatorOption.new("boost", 2)
            OperatorOption(name=<OptionName.BOOST: 'boost'>, value='2')
            >>> OperatorOption.new("color", "red") is None
            True
        """
        if isinstance(name, OperatorOption):
            return name
        if value is None:
            return None
        known = option_name(name)
        if known is None:
            return None
        text = _text(value)
        if text is None:
            return None
        return cls(name=known, value=text)

    @classmethod
    def from_pair(cls, pair: Any) -> OperatorOption | None:
        """Return an OperatorOption for a ``(name, value)`` pair."""
        if isinstance(pair, OperatorOption):
            return pair
        try:
            name, value = pair
        except (TypeError, ValueError):
            return None
        return cls.new(name, value)

    def to_value(self) -> str:
        """Render as ``name=value``, or an empty string if there is no value."""
        if self.value is None:
            return ""
        return f"{self.name.value}={self.value}"

    def __str__(self) -> str:
        return self.to_value()
