"""ORDER BY expression."""

from typing import Any

from ._bases import Expression


class OrderExpression(Expression):
    """ORDER BY term: one expression and ascending or descending."""

    expression: Any
    descending: bool = False

    @property
    def sql(self) -> str:
        """Expression with ``desc`` or ``asc`` suffix."""
        return f"{self._argument_to_sql(self.expression)} {'desc' if self.descending else 'asc'}"
