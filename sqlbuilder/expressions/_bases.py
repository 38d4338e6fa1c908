"""Base expression types for SQL expression trees."""

from __future__ import annotations
from typing import Any, Tuple

from pydantic import BaseModel, Field as PydanticField


class Expression(BaseModel):
    """Base type for all SQL expression nodes.

    Subclasses must implement the ``sql`` property. Nothing is cached: ``sql`` is
    rendered on every access, so an expression wrapping a statement always reflects
    the clauses that statement holds at render time.
    """

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @property
    def sql(self) -> str:
        """SQL fragment for this expression."""
        raise NotImplementedError("Subclasses must implement `sql` property")

    def build(self) -> str:
        """Render this expression (same as ``sql``)."""
        return self.sql

    @staticmethod
    def _argument_to_sql(argument: Any) -> str:
        """Render one argument: expression's ``sql``, nothing for ``None``, else verbatim text."""
        if isinstance(argument, Expression):
            return argument.sql
        if argument is None:
            return ""
        return str(argument)

    def as_(self, alias: str):
        """Alias this expression (e.g. ``ref("title").as_("t")`` renders ``title as 't'``)."""
        from .alias import AliasExpression
        return AliasExpression(expression=self, alias=alias)

    def in_(self, other: Any):
        """Build an IN predicate; ``other`` is always parenthesized."""
        from .predicate import PredicateExpression
        from .wrap import WrapExpression
        return PredicateExpression(symbol="in", arguments=(self, WrapExpression(expression=other)))

    def is_null(self):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="is null", arguments=(self, None))

    def is_not_null(self):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="is not null", arguments=(self, None))

    def like(self, pattern: Any):
        """Build a LIKE predicate (pattern is rendered verbatim, e.g. a placeholder)."""
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="like", arguments=(self, pattern))

    def not_like(self, pattern: Any):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="not like", arguments=(self, pattern))

    def between(self, low: Any, high: Any):
        """Inclusive range: ``expr between low and high``."""
        from .multi import MultiExpression
        from .predicate import PredicateExpression
        bounds = MultiExpression(delimiter=" and ", expressions=(low, high))
        return PredicateExpression(symbol="between", arguments=(self, bounds))

    def asc(self):
        from .order import OrderExpression
        return OrderExpression(expression=self, descending=False)

    def desc(self):
        from .order import OrderExpression
        return OrderExpression(expression=self, descending=True)

    def __invert__(self):
        """Build a NOT expression."""
        from .unary_operator import UnaryOperatorExpression
        return UnaryOperatorExpression(symbol="not", arguments=(self,))

    def __and__(self, other: Any):
        from .nary_operator import NaryOperatorExpression
        return NaryOperatorExpression(symbol="and", arguments=(self, other))

    def __or__(self, other: Any):
        from .nary_operator import NaryOperatorExpression
        return NaryOperatorExpression(symbol="or", arguments=(self, other))

    def __eq__(self, other: Any):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="=", arguments=(self, other))

    def __ne__(self, other: Any):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="!=", arguments=(self, other))

    def __lt__(self, other: Any):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="<", arguments=(self, other))

    def __le__(self, other: Any):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol="<=", arguments=(self, other))

    def __gt__(self, other: Any):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol=">", arguments=(self, other))

    def __ge__(self, other: Any):
        from .predicate import PredicateExpression
        return PredicateExpression(symbol=">=", arguments=(self, other))


class ArgumentedExpression(Expression):
    """Base for expressions that have a symbol and a tuple of arguments.

    Used by function calls (e.g. ``coalesce(x, 'y')``) and operators (e.g. ``=``, ``and``).
    Arguments are usually expressions; anything else is rendered through ``_argument_to_sql``.
    """

    symbol: str
    arguments: Tuple[Any, ...] = PydanticField(default_factory=tuple)
