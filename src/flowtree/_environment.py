"""Lexically scoped environment: a stack of name-to-value frames."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from ._errors import ErrorKind, WorkflowError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

logger = logging.getLogger(__name__)

Frame = dict[str, Any]


class CallStack:
    """Ordered frames of the scopes open during one workflow run, innermost last.

    Lookups search from the innermost frame outwards, so an inner scope may
    shadow a name bound by an enclosing one. Declarations only check the
    innermost frame for collisions.

    A call stack belongs to a single run. It holds no locks and must not be
    shared between concurrent runs.
    """

    def __init__(self) -> None:
        self._frames: list[Frame] = []

    @property
    def depth(self) -> int:
        """Number of frames currently on the stack."""
        return len(self._frames)

    def push_frame(self, initial_bindings: Mapping[str, Any] | None = None) -> None:
        """Open a new innermost frame seeded with ``initial_bindings``."""
        self._frames.append(dict(initial_bindings or {}))
        logger.debug(f"Pushed frame (depth {len(self._frames)})")

    def pop_frame(self) -> Frame:
        """Remove and return the innermost frame.

        Raises:
            RuntimeError: If the stack is empty.

        """
        if not self._frames:
            msg = "Cannot pop a frame from an empty call stack"
            raise RuntimeError(msg)
        frame = self._frames.pop()
        logger.debug(f"Popped frame (depth {len(self._frames)})")
        return frame

    @contextmanager
    def frame(self, initial_bindings: Mapping[str, Any] | None = None) -> Iterator[Frame]:
        """Context manager holding a frame open for the duration of a block.

        The frame is popped however the block exits, including on errors.

        Example:
            with stack.frame({"arg": 1}):
                stack.declare("x", 2)

        """
        self.push_frame(initial_bindings)
        try:
            yield self._frames[-1]
        finally:
            self.pop_frame()

    def declare(self, name: str, value: Any) -> None:
        """Bind ``name`` in the innermost frame.

        Raises:
            WorkflowError: ``NAME_ALREADY_BOUND`` if the innermost frame already binds ``name``.
            RuntimeError: If no frame is open.

        """
        if not self._frames:
            msg = f"Cannot declare '{name}' without an open frame"
            raise RuntimeError(msg)
        current = self._frames[-1]
        if name in current:
            msg = f"{name} is already bound in environment!"
            raise WorkflowError(ErrorKind.NAME_ALREADY_BOUND, msg)
        current[name] = value

    def lookup(self, name: str) -> Any:
        """Return the value bound to ``name`` in the innermost frame that binds it.

        Raises:
            WorkflowError: ``UNBOUND_IDENTIFIER`` if no frame binds ``name``.

        """
        for frame in reversed(self._frames):
            if name in frame:
                return frame[name]
        msg = f"Attempted to evaluate unbound identifier: {name}!"
        raise WorkflowError(ErrorKind.UNBOUND_IDENTIFIER, msg)
