"""N-ary operator expression."""

from ._bases import ArgumentedExpression


class NaryOperatorExpression(ArgumentedExpression):
    """N-argument boolean operator (``and``, ``or``), always parenthesized."""

    @property
    def sql(self) -> str:
        parts = tuple(map(self._argument_to_sql, self.arguments))
        return "(" + (" " + self.symbol + " ").join(parts) + ")"
