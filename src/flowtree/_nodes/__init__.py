"""Node model for workflow trees.

Workflows are built programmatically as trees of immutable nodes. Every
node is either an expression, which evaluates to a value, or a statement,
which is executed for its effect.

Key types:
- Expression nodes: Literal, Identifier, BinaryOperation, IfExpression, APICall
- Statement nodes: DeclareVar, Return, Print
- Body: an ordered sequence of nodes forming one lexical block
- NodeKind / ExpressionKind / StatementKind: tags carried by every node class
"""

from flowtree._operators import BinaryOperator

from ._body import Body, NodeBody, as_body
from ._expressions import APICall, BinaryOperation, Expression, Identifier, IfExpression, Literal
from ._kinds import ExpressionBase, ExpressionKind, NodeBase, NodeKind, StatementBase, StatementKind
from ._statements import DeclareVar, Print, Return, Statement

Node = Expression | Statement

__all__ = [
    "APICall",
    "BinaryOperation",
    "BinaryOperator",
    "Body",
    "DeclareVar",
    "Expression",
    "ExpressionBase",
    "ExpressionKind",
    "Identifier",
    "IfExpression",
    "Literal",
    "Node",
    "NodeBase",
    "NodeBody",
    "NodeKind",
    "Print",
    "Return",
    "Statement",
    "StatementBase",
    "StatementKind",
    "as_body",
]
