"""Tests for sqlbuilder.builders functional constructors."""

import pytest

from sqlbuilder import (
    and_,
    as_,
    asc,
    between,
    columns,
    const,
    desc,
    equals,
    func,
    greater,
    greater_or_equal,
    in_,
    is_not_null,
    is_null,
    less,
    less_or_equal,
    like,
    not_,
    not_equals,
    not_like,
    or_,
    order_by_clause,
    placeholder,
    predicate,
    ref,
    ref_as,
    window,
    wrap,
)
from sqlbuilder.expressions import OrderExpression, PredicateExpression


def test_ref_and_const():
    assert ref("items.id").sql == "items.id"
    assert const("no title").sql == "'no title'"
    assert const(42).sql == "'42'"


def test_as_and_ref_as():
    assert as_(func("coalesce", ref("title"), const("no title")), "title").sql == "coalesce(title, 'no title') as 'title'"
    assert ref_as("items", "i").sql == "items as 'i'"


def test_wrap_and_columns():
    assert wrap(ref("a")).sql == "(a)"
    assert columns(ref("id"), ref_as("generated_name", "name")).sql == "id, generated_name as 'name'"


def test_window_with_order_by_clause():
    assert window("row_number()", order_by_clause("uu.id")).sql == "row_number() over (order by uu.id)"


def test_window_function_text_is_not_validated():
    assert window("rank", order_by_clause("id")).sql == "rank over (order by id)"


@pytest.mark.parametrize(
    "build, expected",
    [
        (equals, "a = ?"),
        (not_equals, "a != ?"),
        (greater, "a > ?"),
        (less, "a < ?"),
        (greater_or_equal, "a >= ?"),
        (less_or_equal, "a <= ?"),
        (like, "a like ?"),
        (not_like, "a not like ?"),
        (between, "a between ?"),
    ],
)
def test_binary_predicates(build, expected):
    expr = build(ref("a"), placeholder())
    assert isinstance(expr, PredicateExpression)
    assert expr.sql == expected


def test_between_with_both_bounds():
    assert between(ref("price"), ref("? and ?")).sql == "price between ? and ?"


def test_unary_predicates():
    assert is_null(ref("x")).sql == "x is null"
    assert is_not_null(ref("x")).sql == "x is not null"


def test_predicate_primitive():
    assert predicate("=", ref("a"), ref("b")).sql == "a = b"
    assert predicate("is null", ref("a")).sql == "a is null"


def test_in_always_wraps_right_operand():
    assert in_(ref("t.name"), placeholder()).sql == "t.name in (?)"
    assert in_(ref("id"), columns(const("a"), const("b"))).sql == "id in ('a', 'b')"


def test_boolean_combinators():
    a = equals(ref("a"), placeholder())
    b = is_null(ref("b"))
    assert and_(a, b).sql == "(a = ? and b is null)"
    assert or_(a, b).sql == "(a = ? or b is null)"
    assert not_(b).sql == "not b is null"


def test_asc_and_desc():
    assert isinstance(desc("created_at"), OrderExpression)
    assert desc("created_at").sql == "created_at desc"
    assert asc(ref("id")).sql == "id asc"


def test_expressions_are_reusable():
    condition = equals(ref("id"), placeholder())
    first = and_(condition, is_null(ref("deleted_at")))
    second = or_(condition, condition)
    assert first.sql == "(id = ? and deleted_at is null)"
    assert second.sql == "(id = ? or id = ?)"
    assert condition.sql == "id = ?"


def test_to_expression():
    from sqlbuilder.builders import to_expression

    assert to_expression("items").sql == "items"
    expr = ref("id")
    assert to_expression(expr) is expr
    assert to_expression(5) == 5
