"""Binary operators and their semantics over workflow values."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, assert_never

from ._errors import ErrorKind, WorkflowError
from ._values import compare_values, is_number, is_value, render_value, values_equal


class BinaryOperator(StrEnum):
    """Operators accepted by a BinaryOperation node."""

    ADD = "+"
    MULTIPLY = "*"
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    EQUAL = "=="
    NOT_EQUAL = "!="


def _invalid_operands(operator: BinaryOperator, left: Any, right: Any) -> WorkflowError:
    msg = (
        f"Unsupported operands for '{operator}': "
        f"{type(left).__name__} {left!r} and {type(right).__name__} {right!r}!"
    )
    return WorkflowError(ErrorKind.INVALID_OPERANDS, msg)


def _finite_numbers(left: Any, right: Any) -> bool:
    return is_number(left) and is_number(right) and is_value(left) and is_value(right)


def _add(left: Any, right: Any) -> Any:
    if _finite_numbers(left, right):
        try:
            total = left + right
        except OverflowError:
            raise _invalid_operands(BinaryOperator.ADD, left, right) from None
        if is_value(total):
            return total
    if (isinstance(left, str) or isinstance(right, str)) and is_value(left) and is_value(right):
        return render_value(left) + render_value(right)
    raise _invalid_operands(BinaryOperator.ADD, left, right)


def _multiply(left: Any, right: Any) -> Any:
    if _finite_numbers(left, right):
        try:
            product = left * right
        except OverflowError:
            raise _invalid_operands(BinaryOperator.MULTIPLY, left, right) from None
        if is_value(product):
            return product
    raise _invalid_operands(BinaryOperator.MULTIPLY, left, right)


def _compare(operator: BinaryOperator, left: Any, right: Any) -> int:
    if not (is_value(left) and is_value(right)):
        raise _invalid_operands(operator, left, right)
    return compare_values(left, right)


def apply_operator(operator: BinaryOperator, left: Any, right: Any) -> Any:  # noqa: PLR0911
    """Apply ``operator`` to two already evaluated operands.

    ``+`` adds two numbers, or concatenates when either side is a string
    (the other side is rendered first). ``*`` multiplies numbers only.
    Arithmetic that overflows to a non-finite number is rejected.
    Ordering operators use the cross-kind total order and ``==``/``!=`` use
    loose value equality.

    Raises:
        WorkflowError: ``INVALID_OPERANDS`` if the operator does not support the operands.

    """
    match operator:
        case BinaryOperator.ADD:
            return _add(left, right)
        case BinaryOperator.MULTIPLY:
            return _multiply(left, right)
        case BinaryOperator.LESS:
            return _compare(operator, left, right) < 0
        case BinaryOperator.LESS_EQUAL:
            return _compare(operator, left, right) <= 0
        case BinaryOperator.GREATER:
            return _compare(operator, left, right) > 0
        case BinaryOperator.GREATER_EQUAL:
            return _compare(operator, left, right) >= 0
        case BinaryOperator.EQUAL:
            return values_equal(left, right)
        case BinaryOperator.NOT_EQUAL:
            return not values_equal(left, right)
        case _:
            assert_never(operator)
