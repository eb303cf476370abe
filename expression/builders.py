# expression/builders.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Factory functions for well-formed expression trees

"""Factories that only build well-formed expression nodes.

Each operator has a dedicated factory whose signature fixes its arity, so
trees built through this module cannot carry a missing or extraneous
operand. ``operator`` is the generic form for callers that pick the kind at
runtime; it checks the shape before returning.

Example:
    >>> tree = or_(and_(var(1), not_(var(2))), const(False))
    >>> str(tree)
    '((x1 & !x2) | false)'
"""

from __future__ import annotations
from typing import Optional, Union

from .ast_nodes import Constant, Expr, Operator, OperatorKind, Variable, VariableRef


def const(value: bool) -> Constant:
    """Build a boolean constant leaf."""
    return Constant(bool(value))


def var(variable: Union[int, Variable]) -> VariableRef:
    """Build a variable reference leaf from a Variable or a bare integer id."""
    if not isinstance(variable, Variable):
        variable = Variable(variable)
    return VariableRef(variable)


def not_(operand: Expr) -> Operator:
    return operator(OperatorKind.NOT, operand)


def and_(left: Expr, right: Expr) -> Operator:
    return operator(OperatorKind.AND, left, right)


def or_(left: Expr, right: Expr) -> Operator:
    return operator(OperatorKind.OR, left, right)


def implication(left: Expr, right: Expr) -> Operator:
    """Build ``left -> right``, true unless left holds and right does not."""
    return operator(OperatorKind.IMPLICATION, left, right)


def material_implication(left: Expr, right: Expr) -> Operator:
    """Build ``left <-> right``, true when both sides agree."""
    return operator(OperatorKind.MATERIAL_IMPLICATION, left, right)


# Conventional names for the two operators above
implies = implication
iff = material_implication


def operator(op: OperatorKind, left: Expr, right: Optional[Expr] = None) -> Operator:
    """Build an operator node after checking its shape against ``op``.

    Args:
        op: Operator kind
        left: First operand
        right: Second operand, omitted for NOT

    Returns:
        The well-formed operator node

    Raises:
        MalformedTree: If the operands do not match the arity of ``op``
    """
    node = Operator(op, left, right)
    node.check_arity()
    return node
