"""Dynamic values produced by workflow expressions.

A workflow value is a small closed union of primitives: strings, booleans
and numbers. Booleans are a kind of their own and never count as numbers,
even though Python's ``bool`` subclasses ``int``.

The helpers here pin down how values behave under truthiness, ordering and
equality so the evaluator never relies on implicit Python coercions:

- Numbers are finite: NaN and infinities are not workflow values.
- Truthiness: booleans as-is, numbers when non-zero, strings when non-empty.
- Ordering: a total order ``bool < number < string``; within a kind the
  natural order applies.
- Equality: two values are equal only if they have the same kind and the
  same value (``1 == 1.0`` holds, ``1 == True`` does not).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from pydantic import ConfigDict, TypeAdapter

if TYPE_CHECKING:
    from collections.abc import Mapping

Value = str | bool | int | float

_STRICT = ConfigDict(strict=True, allow_inf_nan=False)
_VALUE_ADAPTER: TypeAdapter[Value] = TypeAdapter(Value, config=_STRICT)
_ARGUMENTS_ADAPTER: TypeAdapter[dict[str, Value]] = TypeAdapter(dict[str, Value], config=_STRICT)

# Integral floats below this magnitude render without a fractional part.
_INTEGRAL_RENDER_LIMIT = 1e16

# Kind ranks for the cross-kind total order.
_BOOL_RANK = 0
_NUMBER_RANK = 1
_STRING_RANK = 2


def is_value(obj: object) -> bool:
    """Check whether ``obj`` is a workflow value (non-finite floats are not)."""
    if isinstance(obj, float):
        return math.isfinite(obj)
    return isinstance(obj, Value)


def validate_value(obj: object) -> Value:
    """Validate that ``obj`` is a workflow value without coercing it.

    Raises:
        pydantic.ValidationError: If ``obj`` is not a string, boolean or number.

    """
    return _VALUE_ADAPTER.validate_python(obj)


def validate_arguments(arguments: Mapping[str, Any]) -> dict[str, Value]:
    """Validate run arguments and return them as a fresh dict.

    Raises:
        pydantic.ValidationError: If a key is not a string or a value is not a workflow value.

    """
    return _ARGUMENTS_ADAPTER.validate_python(dict(arguments))


def is_number(obj: object) -> bool:
    return isinstance(obj, int | float) and not isinstance(obj, bool)


def _kind_rank(value: Value) -> int:
    match value:
        case bool():
            return _BOOL_RANK
        case float() if not math.isfinite(value):
            msg = f"Not a workflow value: {value!r}"
            raise TypeError(msg)
        case int() | float():
            return _NUMBER_RANK
        case str():
            return _STRING_RANK
        case _:
            msg = f"Not a workflow value: {value!r}"
            raise TypeError(msg)


def is_truthy(value: Any) -> bool:
    """Return the truthiness of a value as seen by conditionals.

    NaN is falsy. Values that are not primitives (raw API responses) use
    Python truthiness.
    """
    match value:
        case bool():
            return value
        case float() if math.isnan(value):
            return False
        case int() | float():
            return value != 0
        case str():
            return value != ""
        case _:
            return bool(value)


def compare_values(left: Value, right: Value) -> int:
    """Compare two values under the total order.

    Returns:
        A negative number if ``left`` sorts first, zero if they are equal,
        a positive number otherwise.

    Raises:
        TypeError: If either operand is not a workflow value.

    """
    left_rank = _kind_rank(left)
    right_rank = _kind_rank(right)
    if left_rank != right_rank:
        return left_rank - right_rank
    return (left > right) - (left < right)  # type: ignore[operator]


def values_equal(left: Any, right: Any) -> bool:
    """Loose value equality used by ``==`` and ``!=``.

    Values of different kinds are never equal. Objects that are not workflow
    values fall back to Python equality.
    """
    if is_value(left) and is_value(right):
        return _kind_rank(left) == _kind_rank(right) and left == right
    return left == right


def render_value(value: Value) -> str:
    """Render a value as text, e.g. for string concatenation or printing.

    Booleans render as ``true``/``false``. Integral floats of moderate
    magnitude drop their fractional part; other floats use ``repr``.
    """
    match value:
        case bool():
            return "true" if value else "false"
        case float() if value.is_integer() and abs(value) < _INTEGRAL_RENDER_LIMIT:
            return str(int(value))
        case float():
            return repr(value)
        case _:
            return str(value)
