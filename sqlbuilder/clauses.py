"""Statement clauses: the closed set of fragments a statement is assembled from.

Each clause is an expression (it renders on its own, e.g. inside ``window(...)``)
carrying two class-level attributes the statement assembler relies on:

- ``kind``: a ``ClauseKind``; its integer value is the clause's position in the
  rendered statement.
- ``delimiter``: the string used to join several clauses of the same kind.

``body`` is the clause content without its keyword, used when the keyword is
emitted once for a whole group of clauses.
"""

from enum import IntEnum
from typing import Any, ClassVar, Tuple

from pydantic import Field as PydanticField

from .expressions import DEFAULT_DELIMITER, Expression, MultiExpression, WrapExpression


class ClauseKind(IntEnum):
    """Clause kinds, valued in the order they must appear in a statement."""

    FROM = 1
    JOIN = 2
    LEFT_JOIN = 3
    WHERE = 4
    GROUP_BY = 5
    ORDER_BY = 6

    @property
    def keyword(self) -> str:
        """SQL keyword text (e.g. ``left join``, ``group by``)."""
        return self.name.lower().replace("_", " ")


class Clause(Expression):
    """Base for all clauses."""

    kind: ClassVar[ClauseKind]
    delimiter: ClassVar[str] = DEFAULT_DELIMITER

    @property
    def body(self) -> str:
        """Clause content without its keyword."""
        raise NotImplementedError("Subclasses must implement `body` property")

    @property
    def sql(self) -> str:
        return f"{self.kind.keyword} {self.body}"


class FromClause(Clause):
    """Table expressions joined by ``", "``; the ``from`` keyword belongs to the statement."""

    kind: ClassVar[ClauseKind] = ClauseKind.FROM

    tables: Tuple[Any, ...] = PydanticField(default_factory=tuple)

    @property
    def body(self) -> str:
        return MultiExpression(expressions=self.tables).sql

    @property
    def sql(self) -> str:
        return self.body


class JoinClause(Clause):
    """``join <table> on <predicates joined by ' and '>``."""

    kind: ClassVar[ClauseKind] = ClauseKind.JOIN
    delimiter: ClassVar[str] = " "

    table: Any
    predicates: Tuple[Any, ...] = PydanticField(default_factory=tuple)

    @property
    def body(self) -> str:
        table = self._argument_to_sql(self.table)
        if not self.predicates:
            return table
        return f"{table} on {MultiExpression(delimiter=' and ', expressions=self.predicates).sql}"


class LeftJoinClause(JoinClause):
    """``left join <table> on <predicates>``; grouped apart from plain joins."""

    kind: ClassVar[ClauseKind] = ClauseKind.LEFT_JOIN


class WhereClause(Clause):
    """One parenthesized predicate group; several groups are joined with ``" and "``."""

    kind: ClassVar[ClauseKind] = ClauseKind.WHERE
    delimiter: ClassVar[str] = " and "

    predicates: Tuple[Any, ...] = PydanticField(default_factory=tuple)

    @property
    def body(self) -> str:
        group = MultiExpression(delimiter=" and ", expressions=self.predicates)
        return WrapExpression(expression=group).sql

    @property
    def sql(self) -> str:
        return self.body


class GroupByClause(Clause):
    kind: ClassVar[ClauseKind] = ClauseKind.GROUP_BY

    columns: Tuple[Any, ...] = PydanticField(default_factory=tuple)

    @property
    def body(self) -> str:
        return MultiExpression(expressions=self.columns).sql


class OrderByClause(GroupByClause):
    kind: ClassVar[ClauseKind] = ClauseKind.ORDER_BY
