"""Binary and unary predicate expression."""

from ._bases import ArgumentedExpression


class PredicateExpression(ArgumentedExpression):
    """``left symbol right`` (e.g. ``id = ?``).

    When the right operand is ``None`` the predicate is unary and renders as
    ``left symbol`` (e.g. ``title is null``).
    """

    @property
    def sql(self) -> str:
        left, right = (tuple(self.arguments) + (None, None))[:2]
        parts = [self._argument_to_sql(left), self.symbol]
        if right is not None:
            parts.append(self._argument_to_sql(right))
        return " ".join(part for part in parts if part)
