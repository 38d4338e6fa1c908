"""Leaf expressions: names, quoted constants and the bind placeholder."""

from ._bases import Expression

PLACEHOLDER = "?"
"""Positional bind-parameter marker; named parameters are not supported."""


class ReferenceExpression(Expression):
    """A name (column, table, ``*``, raw SQL) rendered verbatim, without escaping."""

    name: str

    @property
    def sql(self) -> str:
        return self.name


class ConstantExpression(Expression):
    """A literal wrapped in single quotes. Embedded quotes are not escaped."""

    value: str

    @property
    def sql(self) -> str:
        return "'" + self.value + "'"


class PlaceholderExpression(Expression):
    """The ``?`` bind-parameter marker."""

    @property
    def sql(self) -> str:
        return PLACEHOLDER
