"""Scalar rendering helpers shared by ranges and field values."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import Decimal

NUMBER_TYPES = (int, float, Decimal)


def is_number(value: object) -> bool:
    """Return whether value renders as a query number.

    Bools are not numbers, and neither are infinities or NaN.
    """
    if not isinstance(value, NUMBER_TYPES) or isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def format_number(value: int | float | Decimal) -> str:
    """Render a number using Python's shortest round-trip text."""
    return str(value)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as single-quoted ISO-8601 with a numeric offset.

    Naive timestamps are taken to be UTC. ``+00:00`` is used rather than ``Z``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return f"'{value.isoformat()}'"


def escape(value: str) -> str:
    """Escape backslashes, then single quotes."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def unescape(value: str) -> str:
    """Reverse :func:`escape` for a quoted string body."""
    chars: list[str] = []
    pending = False
    for char in value:
        if pending:
            chars.append(char)
            pending = False
        elif char == "\\":
            pending = True
        else:
            chars.append(char)
    if pending:
        chars.append("\\")
    return "".join(chars)
