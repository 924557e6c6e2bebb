"""Tree-walking evaluator for programmatically built workflows."""

__all__ = [
    "APICall",
    "BinaryOperation",
    "BinaryOperator",
    "Body",
    "CallStack",
    "ConfigError",
    "DeclareVar",
    "EarlyReturn",
    "Emit",
    "ErrorKind",
    "Expression",
    "ExpressionKind",
    "Frame",
    "Identifier",
    "IfExpression",
    "Interpreter",
    "InterpreterSettings",
    "Literal",
    "Node",
    "NodeBody",
    "NodeKind",
    "PerformCall",
    "Print",
    "Return",
    "RunResult",
    "Statement",
    "StatementKind",
    "Value",
    "WorkflowError",
    "apply_operator",
    "compare_values",
    "configure_logging",
    "console_emit",
    "find_pyproject_toml",
    "get_settings",
    "is_truthy",
    "is_value",
    "load_settings",
    "render_value",
    "run",
    "unconfigured_call",
    "validate_arguments",
    "validate_value",
    "values_equal",
]

from ._config import ConfigError, InterpreterSettings, find_pyproject_toml, get_settings, load_settings
from ._effects import Emit, PerformCall, console_emit, unconfigured_call
from ._environment import CallStack, Frame
from ._errors import ErrorKind, WorkflowError
from ._interpreter import EarlyReturn, Interpreter, RunResult, run
from ._logging import configure_logging
from ._nodes import (
    APICall,
    BinaryOperation,
    Body,
    DeclareVar,
    Expression,
    ExpressionKind,
    Identifier,
    IfExpression,
    Literal,
    Node,
    NodeBody,
    NodeKind,
    Print,
    Return,
    Statement,
    StatementKind,
)
from ._operators import BinaryOperator, apply_operator
from ._values import (
    Value,
    compare_values,
    is_truthy,
    is_value,
    render_value,
    validate_arguments,
    validate_value,
    values_equal,
)
