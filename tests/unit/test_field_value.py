"""Unit tests for field values."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from csquery.exceptions import FieldValueTypeError
from csquery.expression import Expression, Operator
from csquery.field_value import FieldValue
from csquery.operator_option import OperatorOption
from csquery.range import Range


class TestRendering:
    def test_unnamed_string(self) -> None:
        assert FieldValue.new("star").to_value() == "'star'"

    def test_named_string(self) -> None:
        assert FieldValue.new_named("title", "star").to_value() == "title:'star'"

    def test_integer(self) -> None:
        assert FieldValue.new(3).to_value() == "3"

    def test_float(self) -> None:
        assert FieldValue.new(3.14159).to_value() == "3.14159"

    def test_timestamp(self) -> None:
        value = datetime(2018, 7, 21, 17, 55, tzinfo=timezone(timedelta(hours=-4)))
        assert FieldValue.new(value).to_value() == "'2018-07-21T17:55:00-04:00'"

    def test_escapes_backslash_before_quote(self) -> None:
        assert FieldValue.new("O'Brien\\").to_value() == "'O\\'Brien\\\\'"

    def test_escapes_quote(self) -> None:
        assert FieldValue.new_named("actor", "Ford's").to_value() == "actor:'Ford\\'s'"

    def test_parenthesized_string_passes_through(self) -> None:
        assert FieldValue.new("(and 'star' 'wars')").to_value() == "(and 'star' 'wars')"

    def test_range_string_passes_through(self) -> None:
        assert FieldValue.new("[1990,2000]").to_value() == "[1990,2000]"
        assert FieldValue.new_named("year", "{,2000]").to_value() == "year:{,2000]"

    def test_none_becomes_empty_string(self) -> None:
        assert FieldValue.new_named("title", None).value == ""
        assert FieldValue.new_named("title", None).to_value() == "title:''"

    def test_option_value_renders_name_only(self) -> None:
        fv = FieldValue.new_named("title", OperatorOption.new("boost", 2))
        assert fv.to_value() == "title"


class TestNew:
    def test_field_value_is_returned(self) -> None:
        fv = FieldValue(value="x")
        assert FieldValue.new(fv) is fv

    def test_unnamed(self) -> None:
        assert FieldValue.new(3) == FieldValue(value=3)

    def test_tuple_becomes_range(self) -> None:
        fv = FieldValue.new((1990, 2000))
        assert fv == FieldValue(value=Range(1990, True, 2000, True))

    def test_python_range_becomes_range(self) -> None:
        assert FieldValue.new(range(1, 3)).to_value() == "[1,2]"

    def test_single_entry_mapping_is_named(self) -> None:
        assert FieldValue.new({"title": "Star Wars"}) == FieldValue(value="Star Wars", name="title")

    def test_multi_entry_mapping_is_not_a_field(self) -> None:
        assert FieldValue.new({"title": "Star Wars", "year": 1990}) is None

    def test_empty_mapping_is_not_a_field(self) -> None:
        assert FieldValue.new({}) is None

    def test_mapping_with_operator_key_is_nested(self) -> None:
        fv = FieldValue.new({"or": ["star", "trek"]})
        assert fv is not None
        assert fv.to_value() == "(or 'star' 'trek')"

    @pytest.mark.parametrize(
        "value",
        [[1, 2, 3], True, object(), {1, 2}, float("inf"), float("nan"), Decimal("-Infinity")],
    )
    def test_unsupported_values_fail(self, value: object) -> None:
        with pytest.raises(FieldValueTypeError):
            FieldValue.new(value)


class TestNewNamed:
    def test_range_tuple(self) -> None:
        assert FieldValue.new_named("year", (None, 2000)).to_value() == "year:{,2000]"

    def test_renames_field_value(self) -> None:
        fv = FieldValue.new_named("plot", FieldValue(value="war", name="title"))
        assert fv == FieldValue(value="war", name="plot")

    def test_names_unnamed_field_value(self) -> None:
        fv = FieldValue.new_named("plot", FieldValue(value="war"))
        assert fv == FieldValue(value="war", name="plot")

    def test_operator_name_builds_expression(self) -> None:
        fv = FieldValue.new_named("not", ["star"])
        assert fv.name is None
        assert isinstance(fv.value, Expression)
        assert fv.value.operator is Operator.NOT
        assert fv.to_value() == "(not 'star')"

    def test_operator_enum_name_builds_expression(self) -> None:
        fv = FieldValue.new_named(Operator.PHRASE, ["teenage vampire"])
        assert fv.to_value() == "(phrase 'teenage vampire')"

    def test_none_name_is_unnamed(self) -> None:
        assert FieldValue.new_named(None, 3) == FieldValue(value=3)

    def test_expression_value(self) -> None:
        expr = Expression.new("term", ["star"])
        assert FieldValue.new_named("title", expr).to_value() == "title:(term 'star')"
