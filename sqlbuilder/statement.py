"""Select statements and the options that build them.

A statement is created by ``select(columns, *options)``. Each option appends one
clause, in call order; rendering does not depend on that order. ``Statement.sql``
groups clauses by kind, emits groups in ``ClauseKind`` order and, for the kinds
listed in ``MERGE_POLICIES`` as keyword-once, writes the keyword a single time in
front of the merged group::

    select(ref("*"), from_("t"), where(ref("a") == placeholder()), where(ref("b") == placeholder()))
    # select * from t where (a = ?) and (b = ?)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from pydantic import Field

from .builders import to_expression
from .clauses import (
    Clause,
    ClauseKind,
    FromClause,
    GroupByClause,
    JoinClause,
    LeftJoinClause,
    OrderByClause,
    WhereClause,
)
from .expressions import AliasExpression, Expression, WrapExpression

logger = logging.getLogger("sqlbuilder")


class StatementKind(str, Enum):
    SELECT = "select"


class MergePolicy(Enum):
    """How several clauses of one kind share the clause keyword."""

    KEYWORD_ONCE = "keyword-once"
    """Keyword written once, followed by the clause bodies joined by the kind's delimiter."""
    KEYWORD_PER_OCCURRENCE = "keyword-per-occurrence"
    """Each clause renders its own keyword."""


MERGE_POLICIES: dict[StatementKind, dict[ClauseKind, MergePolicy]] = {
    StatementKind.SELECT: {
        ClauseKind.FROM: MergePolicy.KEYWORD_ONCE,
        ClauseKind.JOIN: MergePolicy.KEYWORD_PER_OCCURRENCE,
        ClauseKind.LEFT_JOIN: MergePolicy.KEYWORD_PER_OCCURRENCE,
        ClauseKind.WHERE: MergePolicy.KEYWORD_ONCE,
        ClauseKind.GROUP_BY: MergePolicy.KEYWORD_ONCE,
        ClauseKind.ORDER_BY: MergePolicy.KEYWORD_ONCE,
    },
}
"""Merge policy per (statement kind, clause kind). Unlisted kinds repeat their keyword."""


StatementOption = Callable[["Statement"], None]


class Statement(Expression):
    """A SQL statement: keyword, projection expressions and clauses in append order.

    A statement is itself an expression, so it can be wrapped and used as a
    subselect table or as the right-hand side of ``in_``.
    """

    kind: StatementKind = StatementKind.SELECT
    expressions: list[Expression] = Field(default_factory=list)
    """Projection list, rendered space-joined after the keyword."""
    clauses: list[Clause] = Field(default_factory=list)
    """Clauses in the order options appended them."""

    def apply(self, *options: StatementOption) -> Statement:
        """Apply statement options in order (each appends one clause); return ``self``."""
        for option in options:
            option(self)
        return self

    @property
    def sql(self) -> str:
        """Render the statement.

        Clauses are grouped strictly by kind (a ``join`` and a ``left join`` never
        share a group), groups are emitted in ascending ``ClauseKind`` order, and
        empty kinds contribute nothing.
        """
        groups: dict[ClauseKind, list[Clause]] = {}
        for clause in self.clauses:
            groups.setdefault(clause.kind, []).append(clause)

        policies = MERGE_POLICIES.get(self.kind, {})
        parts = [self.kind.value]
        parts.extend(expression.sql for expression in self.expressions)
        for kind in ClauseKind:
            group = groups.get(kind)
            if not group:
                continue
            delimiter = group[0].delimiter
            if policies.get(kind, MergePolicy.KEYWORD_PER_OCCURRENCE) is MergePolicy.KEYWORD_ONCE:
                parts.append(kind.keyword)
                parts.append(delimiter.join(clause.body for clause in group))
            else:
                parts.append(delimiter.join(clause.sql for clause in group))

        sql = " ".join(part for part in parts if part).strip()
        logger.debug("Rendered %s statement with %d clause(s): %s", self.kind.value, len(self.clauses), sql)
        return sql


def select(columns: Any, *options: StatementOption) -> Statement:
    """Build a select statement from a projection expression and 0 or more options.

    Args:
        columns: Projection expression, usually ``columns(...)`` or ``ref("*")``.
            A string is taken as a reference.
        *options: Statement options (``from_``, ``where``, ...), applied in order.

    Returns:
        The statement; render it with ``.sql`` or ``.build()``.

    Raises:
        pydantic.ValidationError: If ``columns`` is neither a string nor an expression
            (e.g. ``None``). Inputs are validated when nodes are built; rendering never raises.
    """
    statement = Statement(kind=StatementKind.SELECT, expressions=[to_expression(columns)])
    return statement.apply(*options)


def from_(*tables: Any) -> StatementOption:
    """Add table expressions to the ``from`` clause, joined in argument order on ``", "``."""
    clause = FromClause(tables=tuple(map(to_expression, tables)))

    def option(statement: Statement) -> None:
        statement.clauses.append(clause)
    return option


def from_subselect(subselect: Statement, alias: str = "") -> StatementOption:
    """Use a statement, wrapped in ``()`` and aliased when ``alias`` is non-empty, as a from table."""
    table: Expression = WrapExpression(expression=subselect)
    if alias:
        table = AliasExpression(expression=table, alias=alias)
    return from_(table)


def join(table: Any, *predicates: Expression) -> StatementOption:
    """Add ``join <table> on <predicates>``; predicates are joined with ``" and "``."""
    clause = JoinClause(table=to_expression(table), predicates=predicates)

    def option(statement: Statement) -> None:
        statement.clauses.append(clause)
    return option


def left_join(table: Any, *predicates: Expression) -> StatementOption:
    """Add ``left join <table> on <predicates>``."""
    clause = LeftJoinClause(table=to_expression(table), predicates=predicates)

    def option(statement: Statement) -> None:
        statement.clauses.append(clause)
    return option


def where(*predicates: Expression) -> StatementOption:
    """Add one predicate group: predicates joined with ``" and "`` and wrapped in ``()``.

    Several ``where`` options do not overwrite each other: the statement renders a
    single ``where`` keyword followed by every group, joined with ``" and "``.
    """
    clause = WhereClause(predicates=predicates)

    def option(statement: Statement) -> None:
        statement.clauses.append(clause)
    return option


def group_by(*columns: Any) -> StatementOption:
    """Add a ``group by`` clause. Strings are column names; expressions are rendered as is."""
    clause = group_by_clause(*columns)

    def option(statement: Statement) -> None:
        statement.clauses.append(clause)
    return option


def order_by(*columns: Any) -> StatementOption:
    """Add an ``order by`` clause (e.g. ``order_by("created_at", desc(ref("id")))``)."""
    clause = order_by_clause(*columns)

    def option(statement: Statement) -> None:
        statement.clauses.append(clause)
    return option


def group_by_clause(*columns: Any) -> GroupByClause:
    """A bare ``group by`` clause, for use outside a statement (e.g. in ``window``)."""
    return GroupByClause(columns=tuple(map(to_expression, columns)))


def order_by_clause(*columns: Any) -> OrderByClause:
    """A bare ``order by`` clause, e.g. ``window("row_number()", order_by_clause("id"))``."""
    return OrderByClause(columns=tuple(map(to_expression, columns)))
