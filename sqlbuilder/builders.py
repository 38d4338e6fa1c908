"""Functional constructors for expressions.

These are the building blocks passed to ``select`` and its options. Each returns an
expression node; nothing is rendered until the statement is.
"""

from typing import Any, Optional

from .expressions import (
    AliasExpression,
    ConstantExpression,
    Expression,
    FunctionExpression,
    MultiExpression,
    NaryOperatorExpression,
    OrderExpression,
    PlaceholderExpression,
    PredicateExpression,
    ReferenceExpression,
    UnaryOperatorExpression,
    WindowExpression,
    WrapExpression,
)


def to_expression(value: Any) -> Any:
    """Strings are references (table or column names); everything else is kept as is."""
    if isinstance(value, str):
        return ReferenceExpression(name=value)
    return value


def ref(name: str) -> ReferenceExpression:
    """A name rendered verbatim (``ref("i.id")`` renders ``i.id``)."""
    return ReferenceExpression(name=name)


def const(value: Any) -> ConstantExpression:
    """A literal wrapped in single quotes. Quotes inside ``value`` are not escaped."""
    return ConstantExpression(value=str(value))


def placeholder() -> PlaceholderExpression:
    return PlaceholderExpression()


def as_(expression: Expression, alias: str) -> AliasExpression:
    """``expr as 'alias'``."""
    return AliasExpression(expression=expression, alias=alias)


def ref_as(name: str, alias: str) -> AliasExpression:
    """Shorthand for ``as_(ref(name), alias)``."""
    return as_(ref(name), alias)


def wrap(expression: Any) -> WrapExpression:
    return WrapExpression(expression=expression)


def func(name: str, *arguments: Any) -> FunctionExpression:
    """Function call, e.g. ``func("coalesce", ref("title"), const("no title"))``."""
    return FunctionExpression(symbol=name, arguments=arguments)


def window(function: str, clause: Expression) -> WindowExpression:
    """Window function, e.g. ``window("row_number()", order_by_clause("id"))``."""
    return WindowExpression(function=function, clause=clause)


def columns(*expressions: Any) -> MultiExpression:
    """Projection list joined with ``", "``."""
    return MultiExpression(expressions=expressions)


def predicate(symbol: str, left: Any, right: Optional[Any] = None) -> PredicateExpression:
    """``left symbol right``, or ``left symbol`` when ``right`` is ``None``."""
    return PredicateExpression(symbol=symbol, arguments=(left, right))


def equals(left: Any, right: Any) -> PredicateExpression:
    return predicate("=", left, right)


def not_equals(left: Any, right: Any) -> PredicateExpression:
    return predicate("!=", left, right)


def greater(left: Any, right: Any) -> PredicateExpression:
    return predicate(">", left, right)


def less(left: Any, right: Any) -> PredicateExpression:
    return predicate("<", left, right)


def greater_or_equal(left: Any, right: Any) -> PredicateExpression:
    return predicate(">=", left, right)


def less_or_equal(left: Any, right: Any) -> PredicateExpression:
    return predicate("<=", left, right)


def in_(left: Any, right: Any) -> PredicateExpression:
    """``left in (right)``; ``right`` may be a list expression or a statement."""
    return predicate("in", left, wrap(right))


def like(left: Any, right: Any) -> PredicateExpression:
    return predicate("like", left, right)


def not_like(left: Any, right: Any) -> PredicateExpression:
    return predicate("not like", left, right)


def between(left: Any, right: Any) -> PredicateExpression:
    """``left between right``; ``right`` carries both bounds (e.g. ``ref("? and ?")``)."""
    return predicate("between", left, right)


def is_null(expression: Any) -> PredicateExpression:
    return predicate("is null", expression, None)


def is_not_null(expression: Any) -> PredicateExpression:
    return predicate("is not null", expression, None)


def and_(*predicates: Any) -> NaryOperatorExpression:
    """``(a and b ...)``."""
    return NaryOperatorExpression(symbol="and", arguments=predicates)


def or_(*predicates: Any) -> NaryOperatorExpression:
    """``(a or b ...)``; use inside ``where`` to express alternatives."""
    return NaryOperatorExpression(symbol="or", arguments=predicates)


def not_(expression: Any) -> UnaryOperatorExpression:
    return UnaryOperatorExpression(symbol="not", arguments=(expression,))


def asc(expression: Any) -> OrderExpression:
    return OrderExpression(expression=to_expression(expression), descending=False)


def desc(expression: Any) -> OrderExpression:
    return OrderExpression(expression=to_expression(expression), descending=True)