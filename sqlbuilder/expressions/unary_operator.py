"""Unary operator expression."""

from ._bases import ArgumentedExpression


class UnaryOperatorExpression(ArgumentedExpression):
    """Single-argument prefix operator (e.g. ``not x``)."""

    @property
    def sql(self) -> str:
        argument = self._argument_to_sql(self.arguments[0]) if self.arguments else ""
        return f"{self.symbol} {argument}".strip()
