"""Utility modules for csquery."""

from csquery.utils.formatting import (
    escape,
    format_number,
    format_timestamp,
    is_number,
    unescape,
)

__all__ = [
    "escape",
    "format_number",
    "format_timestamp",
    "is_number",
    "unescape",
]
