"""Exception hierarchy for csquery."""

from __future__ import annotations

from pathlib import Path


class CSQueryError(Exception):
    """Base exception for all csquery errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all csquery errors with
    a single except clause.
    """

    pass


# Expression Errors
class ExpressionError(CSQueryError):
    """An expression could not be built from the conditions given."""

    pass


class UnknownOperatorError(ExpressionError, ValueError):
    """Operator is not one of the structured query operators."""

    def __init__(self, operator: object) -> None:
        self.operator = operator
        super().__init__(f"Unknown operator `{operator}` provided.")


class NoFieldValuesError(ExpressionError, ValueError):
    """Expression has no field values after partitioning its conditions."""

    def __init__(self, operator: object) -> None:
        self.operator = operator
        super().__init__(f"Expression for operator `{operator}` has no field values.")


class TooManyFieldValuesError(ExpressionError, ValueError):
    """Single-field operator was given more than one field value."""

    def __init__(self, operator: object, size: int) -> None:
        self.operator = operator
        self.size = size
        super().__init__(
            f"Expression for operator `{operator}` has {size} fields, but should only have one."
        )


class MultipleWordsRequiredError(ExpressionError, ValueError):
    """The `near` operator needs a value with more than one word."""

    def __init__(self) -> None:
        self.operator = "near"
        super().__init__("Expression field value for operator `near` requires multiple words.")


class StringRequiredError(ExpressionError, TypeError):
    """Operator only accepts a string field value."""

    def __init__(self, operator: object) -> None:
        self.operator = operator
        super().__init__(f"Expression field value for operator `{operator}` must be a string value.")


class RangeRequiredError(ExpressionError, TypeError):
    """The `range` operator needs a range field value."""

    def __init__(self) -> None:
        self.operator = "range"
        super().__init__("Expression field value for operator `range` must be a range.")


class FieldValueTypeError(ExpressionError, TypeError):
    """Field value is not a string, number, timestamp, range or expression."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Field value {value!r} of type {type(value).__name__} cannot be used in a query."
        )


# Range Errors
class RangeError(CSQueryError):
    """Range bounds are invalid."""

    pass


class OpenRangeError(RangeError, ValueError):
    """Range has neither a lower nor an upper bound."""

    def __init__(self) -> None:
        super().__init__("Range types may not be open on both upper and lower bounds.")


class RangeTypeError(RangeError, TypeError):
    """Range bounds mix numbers, timestamps and strings."""

    def __init__(self, values: tuple[object, ...] = ()) -> None:
        self.values = values
        super().__init__(
            "Range types must be compatible (numbers, dates, and strings may not be mixed)."
        )


# Syntax Errors
class QuerySyntaxError(CSQueryError):
    """Raised when a structured query string cannot be parsed."""

    def __init__(self, query: str, message: str) -> None:
        self.query = query
        super().__init__(f"Failed to parse structured query '{query}': {message}")


# Configuration Errors
class ConfigError(CSQueryError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Document Errors
class DocumentError(CSQueryError):
    """Query document errors."""

    pass


class DocumentNotFoundError(DocumentError):
    """Query document doesn't exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Query document not found: {path}")


class DocumentParseError(DocumentError):
    """Query document could not be decoded."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid query document {source}: {detail}")
