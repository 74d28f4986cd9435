"""csquery: build AWS CloudSearch structured query syntax expressions.

The queries built with this library are raw input to the ``q`` parameter of
a CloudSearch request when ``q.parser=structured``.
"""

from csquery.builders import (
    and_,
    field,
    near,
    not_,
    option,
    or_,
    phrase,
    prefix,
    range_,
    term,
)
from csquery.exceptions import (
    CSQueryError,
    ExpressionError,
    FieldValueTypeError,
    MultipleWordsRequiredError,
    NoFieldValuesError,
    OpenRangeError,
    QuerySyntaxError,
    RangeError,
    RangeRequiredError,
    RangeTypeError,
    StringRequiredError,
    TooManyFieldValuesError,
    UnknownOperatorError,
)
from csquery.expression import Expression, Operator, operators, parse, to_query
from csquery.field_value import FieldValue
from csquery.operator_option import OperatorOption, OptionName
from csquery.range import Range, is_range_string

__version__ = "1.0.0"

__all__ = [
    "CSQueryError",
    "Expression",
    "ExpressionError",
    "FieldValue",
    "FieldValueTypeError",
    "MultipleWordsRequiredError",
    "NoFieldValuesError",
    "OpenRangeError",
    "Operator",
    "OperatorOption",
    "OptionName",
    "QuerySyntaxError",
    "Range",
    "RangeError",
    "RangeRequiredError",
    "RangeTypeError",
    "StringRequiredError",
    "TooManyFieldValuesError",
    "UnknownOperatorError",
    "and_",
    "field",
    "is_range_string",
    "near",
    "not_",
    "operators",
    "option",
    "or_",
    "parse",
    "phrase",
    "prefix",
    "range_",
    "term",
    "to_query",
]
