"""Tests for sqlbuilder.expressions: base Expression, leaf nodes and lenient rendering."""

import pytest
from pydantic import ValidationError

from sqlbuilder.expressions import (
    PLACEHOLDER,
    AliasExpression,
    ConstantExpression,
    Expression,
    FunctionExpression,
    MultiExpression,
    PlaceholderExpression,
    PredicateExpression,
    ReferenceExpression,
    UnaryOperatorExpression,
    WrapExpression,
)


def test_expression_base_sql_raises():
    expr = Expression.model_construct()
    with pytest.raises(NotImplementedError, match="sql"):
        _ = expr.sql


def test_build_is_sql():
    expr = ReferenceExpression(name="items")
    assert expr.build() == expr.sql == "items"


def test_reference_is_verbatim():
    assert ReferenceExpression(name="*").sql == "*"
    assert ReferenceExpression(name="1 + 1").sql == "1 + 1"


def test_constant_is_quoted_without_escaping():
    assert ConstantExpression(value="earth").sql == "'earth'"
    assert ConstantExpression(value="it's").sql == "'it's'"


def test_placeholder():
    assert PLACEHOLDER == "?"
    assert PlaceholderExpression().sql == "?"


def test_alias_is_quoted():
    expr = AliasExpression(expression=ReferenceExpression(name="items"), alias="i")
    assert expr.sql == "items as 'i'"


def test_wrap():
    assert WrapExpression(expression=ReferenceExpression(name="a")).sql == "(a)"


def test_function_expression_sql():
    expr = FunctionExpression(symbol="coalesce", arguments=(ReferenceExpression(name="title"), ConstantExpression(value="none")))
    assert expr.sql == "coalesce(title, 'none')"


def test_function_expression_without_arguments():
    assert FunctionExpression(symbol="now").sql == "now()"


def test_multi_expression_default_delimiter():
    expr = MultiExpression(expressions=(ReferenceExpression(name="a"), ReferenceExpression(name="b")))
    assert expr.sql == "a, b"


def test_multi_expression_custom_delimiter():
    expr = MultiExpression(delimiter=" and ", expressions=(ReferenceExpression(name="a"), ReferenceExpression(name="b")))
    assert expr.sql == "a and b"


def test_predicate_with_none_right_is_unary():
    expr = PredicateExpression(symbol="is null", arguments=(ReferenceExpression(name="x"), None))
    assert expr.sql == "x is null"


def test_rendering_never_raises_on_missing_operands():
    assert PredicateExpression(symbol="=", arguments=(None, ReferenceExpression(name="x"))).sql == "= x"
    assert PredicateExpression(symbol="=").sql == "="
    assert UnaryOperatorExpression(symbol="not").sql == "not"
    assert FunctionExpression(symbol="", arguments=(ReferenceExpression(name="a"),)).sql == "(a)"
    assert MultiExpression().sql == ""
    assert WrapExpression(expression=None).sql == "()"


def test_non_expression_arguments_render_verbatim():
    expr = PredicateExpression(symbol=">", arguments=(ReferenceExpression(name="age"), 18))
    assert expr.sql == "age > 18"


def test_expressions_are_frozen():
    expr = ReferenceExpression(name="a")
    with pytest.raises(ValidationError):
        expr.name = "b"


def test_wrong_field_type_raises_validation_error():
    with pytest.raises(ValidationError):
        ReferenceExpression(name=1)
