"""Expression nodes: nodes that evaluate to a value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from flowtree._operators import BinaryOperator
from flowtree._values import Value, validate_value

from ._body import Body, as_body
from ._kinds import ExpressionBase, ExpressionKind, require_expression, require_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from . import Node


@dataclass(frozen=True, slots=True)
class Literal(ExpressionBase):
    """Evaluates to a constant value.

    ``Literal()`` without a value is a valid node that fails when evaluated.
    Falsy values such as ``False``, ``0`` and ``""`` are ordinary values.
    """

    value: Value | None = None

    kind = ExpressionKind.LITERAL

    def __post_init__(self) -> None:
        if self.value is not None:
            object.__setattr__(self, "value", validate_value(self.value))


@dataclass(frozen=True, slots=True)
class Identifier(ExpressionBase):
    """Looks up ``name`` in the innermost frame that binds it."""

    name: str

    kind = ExpressionKind.IDENTIFIER

    def __post_init__(self) -> None:
        require_name("Identifier", self.name)


@dataclass(frozen=True, slots=True)
class BinaryOperation(ExpressionBase):
    """Evaluates ``left`` then ``right`` and applies ``operator`` to both."""

    operator: BinaryOperator
    left: Expression
    right: Expression

    kind = ExpressionKind.BINARY_OPERATION

    def __post_init__(self) -> None:
        object.__setattr__(self, "operator", BinaryOperator(self.operator))
        require_expression("BinaryOperation", "left", self.left)
        require_expression("BinaryOperation", "right", self.right)


@dataclass(frozen=True, slots=True)
class IfExpression(ExpressionBase):
    """Evaluates one of two bodies depending on the truthiness of ``condition``.

    A missing ``else_body`` is an empty body, which evaluates to the
    interpreter's empty-block value.
    """

    condition: Expression
    then_body: Body | Iterable[Node]
    else_body: Body | Iterable[Node] = field(default_factory=Body)

    kind = ExpressionKind.IF_EXPRESSION

    def __post_init__(self) -> None:
        require_expression("IfExpression", "condition", self.condition)
        object.__setattr__(self, "then_body", as_body(self.then_body))
        object.__setattr__(self, "else_body", as_body(self.else_body))


@dataclass(frozen=True, slots=True)
class APICall(ExpressionBase):
    """Performs an external call and evaluates to its raw response.

    The shape of ``config`` is owned by the call collaborator, not by the
    interpreter.
    """

    config: Any

    kind = ExpressionKind.API_CALL


Expression = Literal | Identifier | BinaryOperation | IfExpression | APICall
