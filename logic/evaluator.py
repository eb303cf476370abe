# logic/evaluator.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Recursive truth-value evaluation of expression trees

"""Evaluates expression trees under a variable interpretation.

Evaluation is a structural recursion over the tree. Leaves yield their
constant value or their bound truth value; operator nodes evaluate every
operand they own and then combine the results:

    AND                   l & r
    OR                    l | r
    NOT                   !l
    IMPLICATION           !l | r
    MATERIAL_IMPLICATION  l == r

Both operands of a binary operator are always evaluated, left first, so a
malformed or unbound right subtree fails even when the left operand alone
would decide the result.

The evaluator never writes to the tree or the interpretation, and holds no
state beyond a single call, so concurrent calls on a shared tree are safe.
Recursion depth equals tree height and is bounded by the interpreter's
recursion limit.
"""

from __future__ import annotations
from typing import Callable, Dict, Mapping

from expression import ast_nodes as ast
from expression.exceptions import UnboundVariable
from utils.logger import get_logger

Interpretation = Mapping[ast.Variable, bool]

_BINARY_COMBINERS: Dict[ast.OperatorKind, Callable[[bool, bool], bool]] = {
    ast.OperatorKind.AND: lambda l, r: l and r,
    ast.OperatorKind.OR: lambda l, r: l or r,
    ast.OperatorKind.IMPLICATION: lambda l, r: (not l) or r,
    ast.OperatorKind.MATERIAL_IMPLICATION: lambda l, r: l == r,
}


class Evaluator(ast.Visitor):
    """Computes the truth value of a tree under one interpretation.

    Attributes:
        interpretation: Read-only mapping from variables to truth values
    """

    def __init__(self, interpretation: Interpretation):
        self.interpretation = interpretation

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value

    def visit_variable(self, n: ast.VariableRef) -> bool:
        try:
            return self.interpretation[n.variable]
        except KeyError:
            raise UnboundVariable(n.variable) from None

    def visit_operator(self, n: ast.Operator) -> bool:
        n.check_arity()

        left = n.left.accept(self)
        if n.op is ast.OperatorKind.NOT:
            return not left

        right = n.right.accept(self)
        return _BINARY_COMBINERS[n.op](left, right)


def evaluate(node: ast.Expr, interpretation: Interpretation) -> bool:
    """Evaluate an expression tree under a variable interpretation.

    Args:
        node: Root of the expression tree
        interpretation: Truth value for every variable reachable from node

    Returns:
        The truth value of the expression

    Raises:
        UnboundVariable: A referenced variable has no entry in interpretation
        MalformedTree: An operator's children do not match its arity

    Example:
        >>> from expression import Variable, implies, var
        >>> evaluate(implies(var(1), var(2)), {Variable(1): True, Variable(2): False})
        False
    """
    logger = get_logger()
    debug = logger.is_debug_enabled()
    if debug:
        logger.debug(f"Evaluating {node} under {_format_interpretation(interpretation)}")

    result = node.accept(Evaluator(interpretation))

    if debug:
        logger.debug(f"Evaluation result: {result}")
    return result


def _format_interpretation(interpretation: Interpretation) -> str:
    return "{" + ", ".join(
        f"{variable}={'T' if value else 'F'}"
        for variable, value in interpretation.items()
    ) + "}"
