"""Default collaborators for the effects a workflow can have.

The interpreter never talks to a transport or a console directly. It calls
two injected functions:

- ``perform_call(config)``: awaited for every APICall expression; its return
  value is the expression's value.
- ``emit(value)``: called for every Print statement.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from rich.console import Console

from ._values import is_value, render_value

PerformCall = Callable[[Any], Awaitable[Any]]
Emit = Callable[[Any], None]

# Console for stdout (printed workflow values)
_out_console = Console(highlight=False)


async def unconfigured_call(config: Any) -> Any:
    """Call collaborator used when no transport was injected; always fails."""
    msg = f"No API call handler is configured (config: {config!r})"
    raise RuntimeError(msg)


def console_emit(value: Any) -> None:
    """Print a value to stdout, rendering workflow values like concatenation does."""
    text = render_value(value) if is_value(value) else str(value)
    _out_console.print(text, markup=False, emoji=False, soft_wrap=True)
