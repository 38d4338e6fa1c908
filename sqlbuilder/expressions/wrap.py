"""Parenthesized expression."""

from typing import Any

from ._bases import Expression


class WrapExpression(Expression):
    """Wraps any expression in parentheses (subselects, IN lists, where groups)."""

    expression: Any

    @property
    def sql(self) -> str:
        return "(" + self._argument_to_sql(self.expression) + ")"
