"""Aliased expression."""

from ._bases import Expression
from .reference import ConstantExpression


class AliasExpression(Expression):
    """``expr as 'alias'``: the alias is always rendered as a quoted constant."""

    expression: Expression
    alias: str

    @property
    def sql(self) -> str:
        return f"{self.expression.sql} as {ConstantExpression(value=self.alias).sql}"
