"""Tree-walking evaluator for workflow bodies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, assert_never

from ._config import InterpreterSettings
from ._effects import console_emit, unconfigured_call
from ._environment import CallStack
from ._errors import ErrorKind, WorkflowError
from ._nodes import (
    APICall,
    BinaryOperation,
    DeclareVar,
    Identifier,
    IfExpression,
    Literal,
    NodeKind,
    Print,
    Return,
    as_body,
)
from ._operators import apply_operator
from ._values import is_truthy, validate_arguments

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from ._effects import Emit, PerformCall
    from ._nodes import Body, Expression, Node, Statement

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EarlyReturn:
    """Outcome of a Return statement, carried up to the top of the run.

    Every evaluation step that can contain a Return passes this through
    unchanged instead of continuing with its siblings.
    """

    value: Any = None


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of a run that reports failures as data instead of raising.

    Attributes:
        value: The workflow output. None if the run failed or returned no value.
        error: The error that aborted the run, if any.

    """

    value: Any = None
    error: WorkflowError | None = None

    @property
    def success(self) -> bool:
        """Check if the run completed without errors."""
        return self.error is None


class _Evaluation:
    """State of one run: its own call stack and the collaborators it uses."""

    __slots__ = ("_emit", "_perform_call", "_settings", "_stack")

    def __init__(
        self,
        stack: CallStack,
        perform_call: PerformCall,
        emit: Emit,
        settings: InterpreterSettings,
    ) -> None:
        self._stack = stack
        self._perform_call = perform_call
        self._emit = emit
        self._settings = settings

    async def eval_body(self, body: Body, bindings: Mapping[str, Any] | None = None) -> Any:
        """Evaluate a block in a fresh frame.

        Returns:
            The value of the last expression in the block, the empty-block value
            if it has none, or an EarlyReturn raised by a nested Return.

        """
        result: Any = self._settings.empty_block_value
        with self._stack.frame(bindings):
            for node in body:
                outcome = await self._eval_node(node)
                if isinstance(outcome, EarlyReturn):
                    return outcome
                if node.node_kind is NodeKind.EXPRESSION:
                    result = outcome
        return result

    async def _eval_node(self, node: Node) -> Any:
        match node:
            case DeclareVar() | Return() | Print():
                return await self._exec_statement(node)
            case _:
                return await self._eval_expression(node)

    async def _eval_expression(self, node: Expression) -> Any:
        match node:
            case Literal(value=None):
                msg = "Attempted to evaluate undefined literal!"
                raise WorkflowError(ErrorKind.UNDEFINED_LITERAL, msg)
            case Literal(value=value):
                return value
            case Identifier(name=name):
                return self._stack.lookup(name)
            case BinaryOperation():
                return await self._eval_binary_operation(node)
            case IfExpression():
                return await self._eval_if(node)
            case APICall(config=config):
                return await self._eval_api_call(config)
            case _:
                assert_never(node)

    async def _eval_binary_operation(self, node: BinaryOperation) -> Any:
        # The left operand completes before the right one starts.
        left = await self._eval_expression(node.left)
        if isinstance(left, EarlyReturn):
            return left
        right = await self._eval_expression(node.right)
        if isinstance(right, EarlyReturn):
            return right
        return apply_operator(node.operator, left, right)

    async def _eval_if(self, node: IfExpression) -> Any:
        condition = await self._eval_expression(node.condition)
        if isinstance(condition, EarlyReturn):
            return condition
        branch = node.then_body if is_truthy(condition) else node.else_body
        return await self.eval_body(as_body(branch))

    async def _eval_api_call(self, config: Any) -> Any:
        logger.debug(f"Performing API call with config {config!r}")
        try:
            response = await self._perform_call(config)
        except Exception as e:
            msg = "Error while executing API call."
            raise WorkflowError(ErrorKind.API_CALL_FAILED, msg, raw_error=e) from e
        if self._settings.log_api_responses:
            logger.debug(f"API call response: {response!r}")
        return response

    async def _exec_statement(self, node: Statement) -> EarlyReturn | None:
        match node:
            case DeclareVar(name=name, value=value_expr):
                value = await self._eval_expression(value_expr)
                if isinstance(value, EarlyReturn):
                    return value
                self._stack.declare(name, value)
                return None
            case Return(value=None):
                logger.debug("Returning without a value")
                return EarlyReturn()
            case Return(value=value_expr):
                value = await self._eval_expression(value_expr)
                if isinstance(value, EarlyReturn):
                    return value
                logger.debug(f"Returning {value!r}")
                return EarlyReturn(value)
            case Print(value=value_expr):
                value = await self._eval_expression(value_expr)
                if isinstance(value, EarlyReturn):
                    return value
                self._emit(value)
                return None
            case _:
                assert_never(node)


class Interpreter:
    """Evaluates workflow bodies against input arguments.

    The interpreter holds only its collaborators and settings. Every call to
    ``run`` gets its own call stack, so one interpreter can serve concurrent
    runs.

    Args:
        perform_call: Awaited with the config of every APICall expression.
        emit: Called with the value of every Print statement.
        settings: Interpreter settings. Defaults to ``InterpreterSettings()``.
        stack_factory: Builds the call stack of each run.

    Example:
        interpreter = Interpreter(perform_call=fetch_json)
        body = NodeBody([BinaryOperation("+", Literal("Hello, "), Identifier("name"))])
        greeting = await interpreter.run(body, {"name": "world"})

    """

    def __init__(
        self,
        *,
        perform_call: PerformCall = unconfigured_call,
        emit: Emit = console_emit,
        settings: InterpreterSettings | None = None,
        stack_factory: Callable[[], CallStack] = CallStack,
    ) -> None:
        self.perform_call = perform_call
        self.emit = emit
        self.settings = settings if settings is not None else InterpreterSettings()
        self.stack_factory = stack_factory

    async def run(self, body: Body | Iterable[Node], arguments: Mapping[str, Any] | None = None) -> Any:
        """Evaluate ``body`` with ``arguments`` bound in its root frame.

        Args:
            body: The workflow to evaluate.
            arguments: Input values, visible to the workflow as identifiers.

        Returns:
            The value given to the first Return reached (None for a bare Return),
            otherwise the value of the last expression in ``body``.

        Raises:
            WorkflowError: If evaluation fails.
            pydantic.ValidationError: If an argument is not a workflow value.

        """
        bindings = validate_arguments(arguments or {})
        evaluation = _Evaluation(
            stack=self.stack_factory(),
            perform_call=self.perform_call,
            emit=self.emit,
            settings=self.settings,
        )
        logger.debug(f"Running workflow with arguments {sorted(bindings)}")
        try:
            outcome = await evaluation.eval_body(as_body(body), bindings)
        except WorkflowError as e:
            logger.debug(f"Workflow failed: {e.kind}: {e.msg}")
            raise
        if isinstance(outcome, EarlyReturn):
            logger.debug("Workflow returned early")
            return outcome.value
        logger.debug("Workflow reached the end of its body")
        return outcome

    async def try_run(self, body: Body | Iterable[Node], arguments: Mapping[str, Any] | None = None) -> RunResult:
        """Like ``run``, but report a WorkflowError in the result instead of raising it."""
        try:
            value = await self.run(body, arguments)
        except WorkflowError as e:
            return RunResult(error=e)
        return RunResult(value=value)


async def run(
    body: Body | Iterable[Node],
    arguments: Mapping[str, Any] | None = None,
    **interpreter_options: Any,
) -> Any:
    """Evaluate ``body`` with a one-off Interpreter built from ``interpreter_options``."""
    return await Interpreter(**interpreter_options).run(body, arguments)
