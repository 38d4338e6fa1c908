"""SQL function call and window function expressions."""

from ._bases import ArgumentedExpression, Expression


class FunctionExpression(ArgumentedExpression):
    """SQL function call: ``symbol(args...)`` (e.g. ``coalesce(title, 'no title')``)."""

    @property
    def sql(self) -> str:
        return self.symbol + "(" + ", ".join(map(self._argument_to_sql, self.arguments)) + ")"


class WindowExpression(Expression):
    """Window function: ``function over (clause)``.

    ``function`` is raw text (e.g. ``row_number()``) and is not checked to be a call.
    """

    function: str
    clause: Expression

    @property
    def sql(self) -> str:
        return f"{self.function} over ({self.clause.sql})"
