"""Bodies: ordered sequences of nodes forming one lexical block."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ._kinds import NodeBase

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from . import Node


@dataclass(frozen=True, slots=True)
class Body:
    """A lexical block: a program, or one branch of a conditional.

    Evaluating a body opens a new scope for the duration of the block.
    A list of nodes is accepted and stored as a tuple.
    """

    nodes: tuple[Node, ...] = field(default=())

    def __post_init__(self) -> None:
        nodes = tuple(self.nodes)
        for index, node in enumerate(nodes):
            if not isinstance(node, NodeBase):
                msg = f"Body node {index} must be an expression or statement node. Got: {node!r}"
                raise TypeError(msg)
        object.__setattr__(self, "nodes", nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


def NodeBody(nodes: Iterable[Node] = ()) -> Body:  # noqa: N802
    """Build a body from a sequence of nodes executed in order."""
    return Body(tuple(nodes))


def as_body(obj: Body | Iterable[Node]) -> Body:
    """Return ``obj`` as a Body, wrapping a plain sequence of nodes."""
    if isinstance(obj, Body):
        return obj
    if isinstance(obj, NodeBase | str | bytes):
        msg = f"Expected a Body or a sequence of nodes. Got: {obj!r}"
        raise TypeError(msg)
    return Body(tuple(obj))
