"""SQL expression types for statement building.

Every node is an immutable pydantic model exposing a ``sql`` property that renders
a text fragment. Rendering never depends on where the expression is placed and never
fails; ill-formed input yields ill-formed SQL text. Combine nodes with the functional
constructors in ``sqlbuilder.builders`` or with operators (``==``, ``<``, ``&``, ``|``,
``~``) and methods (``.in_(...)``, ``.is_null()``, ``.as_(...)``).
"""

from ._bases import ArgumentedExpression, Expression
from .alias import AliasExpression
from .function import FunctionExpression, WindowExpression
from .multi import DEFAULT_DELIMITER, MultiExpression
from .nary_operator import NaryOperatorExpression
from .order import OrderExpression
from .predicate import PredicateExpression
from .reference import (
    PLACEHOLDER,
    ConstantExpression,
    PlaceholderExpression,
    ReferenceExpression,
)
from .unary_operator import UnaryOperatorExpression
from .wrap import WrapExpression

__all__ = [
    "DEFAULT_DELIMITER",
    "PLACEHOLDER",
    "AliasExpression",
    "ArgumentedExpression",
    "ConstantExpression",
    "Expression",
    "FunctionExpression",
    "MultiExpression",
    "NaryOperatorExpression",
    "OrderExpression",
    "PlaceholderExpression",
    "PredicateExpression",
    "ReferenceExpression",
    "UnaryOperatorExpression",
    "WindowExpression",
    "WrapExpression",
]
