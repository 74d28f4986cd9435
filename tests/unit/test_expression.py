"""Unit tests for expression construction and rendering."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from csquery.exceptions import (
    ExpressionError,
    MultipleWordsRequiredError,
    NoFieldValuesError,
    RangeRequiredError,
    StringRequiredError,
    TooManyFieldValuesError,
    UnknownOperatorError,
)
from csquery.expression import Expression, Operator, build, operators, parse, to_query
from csquery.field_value import FieldValue
from csquery.operator_option import OperatorOption, OptionName
from csquery.range import Range


class TestNew:
    def test_and_with_named_fields(self) -> None:
        expr = Expression.new(
            "and", [("title", "star"), ("actor", "Harrison Ford"), ("boost", 2)]
        )
        assert expr.to_query() == "(and boost=2 title:'star' actor:'Harrison Ford')"

    def test_operator_enum(self) -> None:
        expr = Expression.new(Operator.OR, ["star", "trek"])
        assert expr.operator is Operator.OR
        assert expr.to_query() == "(or 'star' 'trek')"

    def test_term_with_field_option(self) -> None:
        expr = Expression.new("term", ["star", ("field", "title"), ("boost", 2)])
        assert expr.to_query() == "(term boost=2 field=title 'star')"

    def test_near_options_render_in_order(self) -> None:
        expr = Expression.new(
            "near", [("field", "plot"), ("distance", 2), ("boost", 2), "teenage vampire"]
        )
        assert expr.to_query() == "(near boost=2 distance=2 field=plot 'teenage vampire')"

    def test_positional_options(self) -> None:
        expr = Expression.new("term", [OperatorOption.new("field", "title"), "star"])
        assert expr.options == (OperatorOption(OptionName.FIELD, "title"),)
        assert expr.to_query() == "(term field=title 'star')"

    def test_unaccepted_positional_option_is_discarded(self) -> None:
        expr = Expression.new("and", [OperatorOption.new("distance", 2), "star"])
        assert expr.to_query() == "(and 'star')"

    def test_unaccepted_named_option_becomes_field(self) -> None:
        expr = Expression.new("and", ["star", ("distance", 2)])
        assert expr.to_query() == "(and 'star' distance:2)"

    def test_first_named_option_wins(self) -> None:
        expr = Expression.new("and", [("boost", 2), ("boost", 5), "star"])
        assert expr.to_query() == "(and boost=2 'star')"

    def test_none_option_value_is_dropped(self) -> None:
        expr = Expression.new("and", [("boost", None), "star"])
        assert expr.options == ()
        assert expr.to_query() == "(and 'star')"

    def test_none_conditions_are_dropped(self) -> None:
        expr = Expression.new("or", [None, "star", None, "trek"])
        assert expr.to_query() == "(or 'star' 'trek')"

    def test_positional_fields_come_before_named(self) -> None:
        expr = Expression.new("and", [("title", "wars"), "star"])
        assert expr.to_query() == "(and 'star' title:'wars')"

    def test_named_operator_is_nested(self) -> None:
        expr = Expression.new("and", ["star", ("not", ["trek"])])
        assert expr.to_query() == "(and 'star' (not 'trek'))"

    def test_nested_expressions(self) -> None:
        expr = Expression.new(
            "and",
            [
                Expression.new("not", ["test", ("field", "genres")]),
                Expression.new(
                    "or",
                    [
                        Expression.new("term", ["star", ("field", "title"), ("boost", 2)]),
                        Expression.new("term", ["star", ("field", "plot")]),
                    ],
                ),
            ],
        )
        assert expr.to_query() == (
            "(and (not field=genres 'test') "
            "(or (term boost=2 field=title 'star') (term field=plot 'star')))"
        )

    def test_query_strings_are_opaque(self) -> None:
        expr = Expression.new("or", ["(and 'star' 'wars')", "(and 'star' 'trek')"])
        assert expr.to_query() == "(or (and 'star' 'wars') (and 'star' 'trek'))"

    def test_mapping_conditions(self) -> None:
        expr = Expression.new("and", {"title": "star", "boost": 2})
        assert expr.to_query() == "(and boost=2 title:'star')"

    def test_scalar_condition(self) -> None:
        assert Expression.new("term", "star").to_query() == "(term 'star')"

    def test_multi_entry_mapping_is_dropped(self) -> None:
        expr = Expression.new("and", ["star", {"a": 1, "b": 2}])
        assert expr.fields == (FieldValue(value="star"),)

    def test_expression_is_immutable(self) -> None:
        expr = Expression.new("term", ["star"])
        with pytest.raises(FrozenInstanceError):
            expr.operator = Operator.OR  # type: ignore[misc]


class TestRange:
    def test_python_range(self) -> None:
        expr = Expression.new("range", [("field", "date"), range(2004, 2007)])
        assert expr.to_query() == "(range field=date [2004,2006])"

    def test_range_value(self) -> None:
        value = Range.from_descriptor(lower_exclusive=1990, upper_exclusive=2000)
        expr = Expression.new("range", [value, ("field", "date"), ("boost", 2)])
        assert expr.to_query() == "(range boost=2 field=date {1990,2000})"

    def test_range_text(self) -> None:
        assert Expression.new("range", ["[1990,}"]).to_query() == "(range [1990,})"

    def test_bound_pair(self) -> None:
        expr = Expression.new("range", [("field", "year"), Range.new((None, 2000))])
        assert expr.to_query() == "(range field=year {,2000])"

    def test_named_range_field(self) -> None:
        expr = Expression.new("range", [("year", (1990, 2000))])
        assert expr.to_query() == "(range year:[1990,2000])"


class TestErrors:
    def test_unknown_operator(self) -> None:
        with pytest.raises(UnknownOperatorError) as exc_info:
            Expression.new("xor", ["star"])
        assert str(exc_info.value) == "Unknown operator `xor` provided."

    def test_no_fields(self) -> None:
        with pytest.raises(NoFieldValuesError):
            Expression.new("and", [("boost", 2)])

    def test_no_conditions(self) -> None:
        with pytest.raises(NoFieldValuesError):
            Expression.new("or")

    @pytest.mark.parametrize("operator", ["not", "term", "phrase", "prefix", "near", "range"])
    def test_too_many_fields(self, operator: str) -> None:
        with pytest.raises(TooManyFieldValuesError) as exc_info:
            Expression.new(operator, ["star wars", "star trek"])
        assert exc_info.value.size == 2

    def test_too_many_fields_message(self) -> None:
        with pytest.raises(TooManyFieldValuesError) as exc_info:
            Expression.new("term", ["star", "wars"])
        assert str(exc_info.value) == (
            "Expression for operator `term` has 2 fields, but should only have one."
        )

    def test_near_needs_multiple_words(self) -> None:
        with pytest.raises(MultipleWordsRequiredError):
            Expression.new("near", ["vampire"])

    @pytest.mark.parametrize("operator", ["near", "phrase", "prefix"])
    def test_string_required(self, operator: str) -> None:
        with pytest.raises(StringRequiredError):
            Expression.new(operator, [3])

    def test_range_required(self) -> None:
        with pytest.raises(RangeRequiredError):
            Expression.new("range", ["star"])

    def test_errors_share_a_base(self) -> None:
        with pytest.raises(ExpressionError):
            Expression.new("range", [3])


class TestModuleFunctions:
    def test_operators(self) -> None:
        names = [op.value for op in operators()]
        assert names == ["and", "near", "not", "or", "phrase", "prefix", "range", "term"]

    def test_build_mapping(self) -> None:
        expressions = build({"and": ["star"], "or": ["trek"]})
        assert [e.to_query() for e in expressions] == ["(and 'star')", "(or 'trek')"]

    def test_build_none(self) -> None:
        assert build(None) == []

    def test_build_rejects_malformed_entries(self) -> None:
        with pytest.raises(UnknownOperatorError):
            build(["and"])

    def test_parse_empty(self) -> None:
        assert parse([]) is None
        assert parse(None) is None
        assert parse({}) is None

    def test_parse_single(self) -> None:
        result = parse([("and", ["star", "wars"])])
        assert isinstance(result, Expression)
        assert result.to_query() == "(and 'star' 'wars')"

    def test_parse_several(self) -> None:
        result = parse([("and", ["star", "wars"]), ("and", ["star", "trek"])])
        assert isinstance(result, list)
        assert to_query(result) == ["(and 'star' 'wars')", "(and 'star' 'trek')"]

    def test_parse_keeps_expressions(self) -> None:
        expr = Expression.new("term", ["star"])
        assert parse([expr]) is expr

    def test_to_query(self) -> None:
        assert to_query(None) == ""
        assert to_query(Expression.new("term", ["star"])) == "(term 'star')"
        assert str(Expression.new("term", ["star"])) == "(term 'star')"

    def test_parse_empty_operator(self) -> None:
        with pytest.raises(NoFieldValuesError):
            parse([("and", [])])

    def test_parse_unknown_operator(self) -> None:
        with pytest.raises(UnknownOperatorError):
            parse([("foo", [])])
