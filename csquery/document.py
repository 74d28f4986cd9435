"""Load query documents from JSON or TOML files.

A query document maps operators to condition lists::

    {"and": ["star", {"title": "wars", "boost": 2}, {"not": ["trek"]}]}

or, in TOML (which also gives native timestamps)::

    [[query]]
    and = ["star", { title = "wars", boost = 2 }, { not = ["trek"] }]

Inside a condition list, a table/object contributes its entries as named
pairs in order, a two-element array becomes a pair of range bounds, and a
table made only of ``lower``/``lower_exclusive``/``upper``/``upper_exclusive``
keys becomes a range.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from csquery.exceptions import DocumentNotFoundError, DocumentParseError
from csquery.expression import operator_for
from csquery.range import Range

logger = logging.getLogger(__name__)

_RANGE_KEYS: frozenset[str] = frozenset({"lower", "lower_exclusive", "upper", "upper_exclusive"})


def _is_scalar(value: object) -> bool:
    return value is None or not isinstance(value, (list, tuple, Mapping))


def _value(key: str, value: Any) -> Any:
    """Normalize the value of a named pair."""
    if operator_for(key) is not None:
        return document_conditions(value)
    if isinstance(value, list):
        if len(value) == 2 and all(_is_scalar(item) for item in value):
            return (value[0], value[1])
        return document_conditions(value)
    if isinstance(value, Mapping):
        if value and set(value) <= _RANGE_KEYS:
            return Range.new(dict(value))
        return document_conditions([value])
    return value


def document_conditions(conditions: Any) -> list[Any]:
    """Turn a loaded condition list into raw expression conditions."""
    if isinstance(conditions, Mapping):
        conditions = [conditions]
    elif not isinstance(conditions, list):
        conditions = [conditions]

    result: list[Any] = []
    for entry in conditions:
        if isinstance(entry, Mapping):
            if entry and set(entry) <= _RANGE_KEYS:
                result.append(Range.new(dict(entry)))
                continue
            result.extend((str(key), _value(str(key), value)) for key, value in entry.items())
        elif isinstance(entry, list):
            if len(entry) == 2 and all(_is_scalar(item) for item in entry):
                result.append((entry[0], entry[1]))
            else:
                logger.debug("Skipping nested list in condition list: %r", entry)
        else:
            result.append(entry)
    return result


def document_queries(data: Any) -> list[tuple[str, list[Any]]]:
    """Return the ``(operator, conditions)`` pairs described by loaded data.

    The data may be a mapping of operators to conditions, a list of such
    mappings, or a mapping with a ``query`` list (the TOML array-of-tables
    form).

    Raises:
        DocumentParseError: If the data has none of these shapes.
    """
    if isinstance(data, Mapping) and set(data) == {"query"} and isinstance(data["query"], list):
        data = data["query"]

    if isinstance(data, Mapping):
        data = [data]

    if not isinstance(data, list):
        raise DocumentParseError("<data>", f"expected a table or list, got {type(data).__name__}")

    queries: list[tuple[str, list[Any]]] = []
    for item in data:
        if not isinstance(item, Mapping):
            raise DocumentParseError("<data>", f"query entries must be tables, got {item!r}")
        for operator, conditions in item.items():
            queries.append((str(operator), document_conditions(conditions)))
    return queries


def loads_document(text: str, *, format: str = "json", source: str = "<string>") -> Any:
    """Decode document text as JSON or TOML.

    Raises:
        DocumentParseError: If the text cannot be decoded.
    """
    try:
        if format == "toml":
            return tomllib.loads(text)
        return json.loads(text)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise DocumentParseError(source, str(e)) from e


def load_document(path: Path) -> list[tuple[str, list[Any]]]:
    """Load the ``(operator, conditions)`` pairs from a JSON or TOML file.

    Files ending in ``.toml`` are read as TOML, anything else as JSON.

    Raises:
        DocumentNotFoundError: If the file does not exist.
        DocumentParseError: If the file cannot be decoded.
    """
    path = path.expanduser()
    if not path.exists():
        raise DocumentNotFoundError(path)

    format = "toml" if path.suffix.lower() == ".toml" else "json"
    logger.debug("Loading %s query document %s", format, path)
    data = loads_document(path.read_text(encoding="utf-8"), format=format, source=str(path))
    return document_queries(data)
