"""Delimited list of expressions."""

from typing import Any, Tuple

from pydantic import Field as PydanticField

from ._bases import Expression

DEFAULT_DELIMITER = ", "
"""Delimiter for projection lists, function arguments and table lists."""


class MultiExpression(Expression):
    """Sub-expressions rendered in order and joined with ``delimiter``.

    Used for projection lists (``id, title``), predicate groups (``a = ? and b = ?``)
    and by the statement assembler to merge clauses of one kind.
    """

    delimiter: str = DEFAULT_DELIMITER
    expressions: Tuple[Any, ...] = PydanticField(default_factory=tuple)

    @property
    def sql(self) -> str:
        return self.delimiter.join(map(self._argument_to_sql, self.expressions))
