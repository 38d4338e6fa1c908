"""sqlbuilder: compose SQL select statements from small expression primitives.

Example::

    from sqlbuilder import select, columns, ref, from_, where, equals, placeholder, order_by

    select(
        columns(ref("*")),
        from_(ref("items")),
        where(equals(ref("id"), placeholder())),
        order_by("created_at"),
    ).build()
    # 'select * from items where (id = ?) order by created_at'

Text is emitted verbatim: quoting and bind values are the caller's responsibility.

Nodes are pydantic models, so inputs are validated when a node is built: passing
``None`` or another non-expression where an expression field is typed (``select(None)``,
``as_(None, "x")``, ``window("f", None)``) raises ``pydantic.ValidationError``.
Rendering a built node never raises.
"""

from .builders import (
    and_,
    as_,
    asc,
    between,
    columns,
    const,
    desc,
    equals,
    func,
    greater,
    greater_or_equal,
    in_,
    is_not_null,
    is_null,
    less,
    less_or_equal,
    like,
    not_,
    not_equals,
    not_like,
    or_,
    placeholder,
    predicate,
    ref,
    ref_as,
    window,
    wrap,
)
from .clauses import Clause, ClauseKind
from .expressions import PLACEHOLDER, Expression
from .statement import (
    MERGE_POLICIES,
    MergePolicy,
    Statement,
    StatementKind,
    StatementOption,
    from_,
    from_subselect,
    group_by,
    group_by_clause,
    join,
    left_join,
    order_by,
    order_by_clause,
    select,
    where,
)
