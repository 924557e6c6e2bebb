"""Example workflow: look up an order and describe its status.

Run with ``python examples/order_status.py``. The API call collaborator is a
stand-in for a real HTTP client.
"""

import asyncio
from typing import Any

from flowtree import (
    APICall,
    BinaryOperation,
    DeclareVar,
    Identifier,
    IfExpression,
    Interpreter,
    Literal,
    NodeBody,
    Print,
    Return,
    configure_logging,
)

ORDERS = {"https://shop.example.com/orders/42/status": "shipped"}


async def perform_call(config: Any) -> Any:
    await asyncio.sleep(0.01)
    return ORDERS[config]


workflow = NodeBody(
    [
        DeclareVar("status", APICall("https://shop.example.com/orders/42/status")),
        Print(BinaryOperation("+", Literal("order status: "), Identifier("status"))),
        IfExpression(
            BinaryOperation("==", Identifier("status"), Literal("shipped")),
            NodeBody([Return(BinaryOperation("+", Identifier("customer"), Literal(", your order is on its way")))]),
        ),
        BinaryOperation("+", Identifier("customer"), Literal(", your order is being prepared")),
    ],
)


if __name__ == "__main__":
    configure_logging(verbose=True)
    interpreter = Interpreter(perform_call=perform_call)
    print(asyncio.run(interpreter.run(workflow, {"customer": "Ada"})))  # noqa: T201
