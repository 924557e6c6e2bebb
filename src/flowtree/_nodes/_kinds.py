"""Tags and base classes shared by every node."""

from __future__ import annotations

from enum import StrEnum, auto
from typing import ClassVar


class NodeKind(StrEnum):
    """Whether a node produces a value or an effect."""

    EXPRESSION = auto()
    STATEMENT = auto()


class ExpressionKind(StrEnum):
    LITERAL = auto()
    IDENTIFIER = auto()
    BINARY_OPERATION = auto()
    IF_EXPRESSION = auto()
    API_CALL = auto()


class StatementKind(StrEnum):
    DECLARE_VAR = auto()
    RETURN = auto()
    PRINT = auto()


class NodeBase:
    """Common base of every workflow node."""

    __slots__ = ()

    node_kind: ClassVar[NodeKind]


class ExpressionBase(NodeBase):
    """Base of nodes that evaluate to a value."""

    __slots__ = ()

    node_kind: ClassVar[NodeKind] = NodeKind.EXPRESSION
    kind: ClassVar[ExpressionKind]


class StatementBase(NodeBase):
    """Base of nodes that are executed for their effect."""

    __slots__ = ()

    node_kind: ClassVar[NodeKind] = NodeKind.STATEMENT
    kind: ClassVar[StatementKind]


def require_expression(owner: str, slot: str, obj: object) -> None:
    if not isinstance(obj, ExpressionBase):
        msg = f"{owner}.{slot} must be an expression node. Got: {obj!r}"
        raise TypeError(msg)


def require_name(owner: str, name: object) -> None:
    if not isinstance(name, str):
        msg = f"{owner} name must be a string. Got: {name!r}"
        raise TypeError(msg)
    if not name:
        msg = f"{owner} name must not be empty"
        raise ValueError(msg)
