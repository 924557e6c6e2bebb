"""Errors raised while evaluating a workflow."""

from __future__ import annotations

from enum import StrEnum
from typing import Self


class ErrorKind(StrEnum):
    """Kinds of failure that abort a workflow run.

    Each member carries a docstring describing when it is raised.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a new member with a docstring."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    API_CALL_FAILED = (
        "api_call_failed",
        "The API call collaborator raised while evaluating an APICall expression.",
    )
    UNBOUND_IDENTIFIER = (
        "unbound_identifier",
        "An identifier was looked up but no active frame binds it.",
    )
    UNDEFINED_LITERAL = (
        "undefined_literal",
        "A literal without a configured value was evaluated.",
    )
    NAME_ALREADY_BOUND = (
        "name_already_bound",
        "A declaration collided with a binding in the innermost frame.",
    )
    INVALID_OPERANDS = (
        "invalid_operands",
        "A binary operator was applied to operands it does not support.",
    )


class WorkflowError(Exception):
    """Raised when a workflow fails during evaluation.

    Attributes:
        kind: The failure category.
        msg: A human-readable description of the failure.
        raw_error: The underlying exception, if any.

    Two errors compare equal when their kind and message match; the raw
    error is not part of the comparison.

    """

    def __init__(self, kind: ErrorKind, msg: str, raw_error: BaseException | None = None) -> None:
        super().__init__(msg)
        self.kind = kind
        self.msg = msg
        self.raw_error = raw_error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorkflowError):
            return NotImplemented
        return (self.kind, self.msg) == (other.kind, other.msg)

    def __hash__(self) -> int:
        return hash((self.kind, self.msg))

    def __repr__(self) -> str:
        return f"WorkflowError(kind={self.kind.name}, msg={self.msg!r}, raw_error={self.raw_error!r})"
