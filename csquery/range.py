"""Range values for the structured query syntax.

A brief note about notation: ``{`` and ``}`` denote *exclusive* range bounds;
``[`` and ``]`` denote *inclusive* range bounds.

*   ``[1,10]``: lower- and upper-bound inclusive.
*   ``{1,10}``: lower- and upper-bound exclusive.
*   ``{,10]``: open range for values up to 10.
*   ``[10,}``: open range for values 10 or larger.

An omitted bound is always rendered as exclusive. A fully open range (``{,}``)
is meaningless for a search, so it is rejected with :class:`OpenRangeError`.

Bounds may be numbers (integers and floats mix freely), timestamps, or
strings; the three families never mix.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

from csquery.exceptions import OpenRangeError, RangeTypeError
from csquery.utils.formatting import escape, format_number, format_timestamp, is_number

Bound = Union[int, float, str, datetime, None]

_DESCRIPTOR_KEYS: frozenset[str] = frozenset(
    {"lower", "lower_exclusive", "upper", "upper_exclusive"}
)


def _family(value: object) -> str | None:
    """Return the scalar family of a bound, or None if it has none."""
    if is_number(value):
        return "number"
    if isinstance(value, datetime):
        return "timestamp"
    if isinstance(value, str):
        return "string"
    return None


def _blank(value: object) -> bool:
    return value is None or value == ""


def _check(values: tuple[object, ...]) -> None:
    """Raise if no bound is present or the present bounds mix families."""
    present = tuple(value for value in values if not _blank(value))
    if not present:
        raise OpenRangeError()

    families = {_family(value) for value in present}
    if None in families or len(families) > 1:
        raise RangeTypeError(present)


def _format_bound(value: object) -> str:
    if is_number(value):
        return format_number(value)  # type: ignore[arg-type]
    if isinstance(value, datetime):
        return format_timestamp(value)
    return f"'{escape(str(value))}'"


def is_range_string(value: str) -> bool:
    """Return whether a string already looks like a rendered range.

    The text before the first comma must start with ``[`` or ``{`` and the
    text after it must end with ``]`` or ``}``.
    """
    low, comma, high = value.partition(",")
    if not comma:
        return False
    return low.startswith(("[", "{")) and high.endswith(("]", "}"))


@dataclass(frozen=True)
class Range:
    """An interval over numbers, timestamps or strings.

    Attributes:
        lower: Lower bound, or None when the range is open below.
        lower_inclusive: Whether the lower bound is part of the range.
        upper: Upper bound, or None when the range is open above.
        upper_inclusive: Whether the upper bound is part of the range.
    """

    lower: Bound = None
    lower_inclusive: bool = False
    upper: Bound = None
    upper_inclusive: bool = False

    @classmethod
    def from_bounds(cls, lower: Bound, upper: Bound) -> Range:
        """Build an inclusive range; a missing side becomes open.

            >>> Range.from_bounds(1990, 2000).to_value()
            '[1990,2000]'
            >>> Range.from_bounds(None, 2000).to_value()
            '{,2000]'

        Raises:
            OpenRangeError: If both bounds are missing.
            RangeTypeError: If the bounds are of incompatible types.
        """
        _check((lower, upper))
        lower = None if _blank(lower) else lower
        upper = None if _blank(upper) else upper
        return cls(
            lower=lower,
            lower_inclusive=lower is not None,
            upper=upper,
            upper_inclusive=upper is not None,
        )

    @classmethod
    def from_descriptor(
        cls,
        lower: Bound = None,
        lower_exclusive: Bound = None,
        upper: Bound = None,
        upper_exclusive: Bound = None,
    ) -> Range:
        """Build a range with explicit control over bound inclusivity.

        An inclusive bound wins over an exclusive one given for the same side.

            >>> Range.from_descriptor(lower_exclusive=0, upper_exclusive=101).to_value()
            '{0,101}'
            >>> Range.from_descriptor(lower=1, upper_exclusive=10).to_value()
            '[1,10}'

        Raises:
            OpenRangeError: If no bound is given at all.
            RangeTypeError: If the bounds are of incompatible types.
        """
        _check((lower, lower_exclusive, upper, upper_exclusive))

        if not _blank(lower):
            low, low_inclusive = lower, True
        elif not _blank(lower_exclusive):
            low, low_inclusive = lower_exclusive, False
        else:
            low, low_inclusive = None, False

        if not _blank(upper):
            high, high_inclusive = upper, True
        elif not _blank(upper_exclusive):
            high, high_inclusive = upper_exclusive, False
        else:
            high, high_inclusive = None, False

        return cls(
            lower=low,
            lower_inclusive=low_inclusive,
            upper=high,
            upper_inclusive=high_inclusive,
        )

    @classmethod
    def new(cls, value: Any) -> Range:
        """Build a range from a bound pair, a ``range`` object or a descriptor.

        A Python ``range`` is converted inclusive of its last element, so
        ``range(2004, 2007)`` becomes ``[2004,2006]``.
        """
        if isinstance(value, Range):
            return value
        if isinstance(value, range):
            if not value:
                raise OpenRangeError()
            return cls.from_bounds(value.start, value[-1])
        if isinstance(value, Mapping):
            unknown = set(value) - _DESCRIPTOR_KEYS
            if unknown:
                raise RangeTypeError(tuple(sorted(unknown)))
            return cls.from_descriptor(**value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls.from_bounds(value[0], value[1])
        raise RangeTypeError((value,))

    def to_value(self) -> str:
        """Render the range in structured query syntax."""
        if self.lower is None:
            low = "{"
        else:
            low = ("[" if self.lower_inclusive else "{") + _format_bound(self.lower)

        if self.upper is None:
            high = "}"
        else:
            high = _format_bound(self.upper) + ("]" if self.upper_inclusive else "}")

        return f"{low},{high}"

    def __str__(self) -> str:
        return self.to_value()
