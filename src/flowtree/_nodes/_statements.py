"""Statement nodes: nodes executed for their effect."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._kinds import StatementBase, StatementKind, require_expression, require_name

if TYPE_CHECKING:
    from ._expressions import Expression


@dataclass(frozen=True, slots=True)
class DeclareVar(StatementBase):
    """Binds ``name`` to the value of ``value`` in the current scope."""

    name: str
    value: Expression

    kind = StatementKind.DECLARE_VAR

    def __post_init__(self) -> None:
        require_name("DeclareVar", self.name)
        require_expression("DeclareVar", "value", self.value)


@dataclass(frozen=True, slots=True)
class Return(StatementBase):
    """Stops the workflow, optionally producing ``value`` as its output."""

    value: Expression | None = None

    kind = StatementKind.RETURN

    def __post_init__(self) -> None:
        if self.value is not None:
            require_expression("Return", "value", self.value)


@dataclass(frozen=True, slots=True)
class Print(StatementBase):
    """Evaluates ``value`` and hands it to the interpreter's output sink."""

    value: Expression

    kind = StatementKind.PRINT

    def __post_init__(self) -> None:
        require_expression("Print", "value", self.value)


Statement = DeclareVar | Return | Print
