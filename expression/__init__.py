# expression/__init__.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Expression tree model for propositional formulas

"""Propositional expression trees.

This package provides the immutable tree model evaluated by ``logic``:
node classes, the operator set, factories for well-formed trees, and
structural queries.

Core Names:
    Constant, VariableRef, Operator: The three node variants
    Variable: Integer-identified propositional variable
    OperatorKind: AND, OR, NOT, IMPLICATION, MATERIAL_IMPLICATION
    const, var, not_, and_, or_, implication, material_implication:
        Factories for well-formed nodes (``implies`` and ``iff`` are aliases)
    validate, variables, depth: Structural queries

Example:
    >>> from expression import var, not_, iff
    >>> str(iff(var(1), not_(var(2))))
    '(x1 <-> !x2)'
"""

from .ast_nodes import (
    Constant,
    Expr,
    NodeType,
    Operator,
    OperatorKind,
    Variable,
    VariableRef,
    Visitor,
)
from .builders import (
    and_,
    const,
    iff,
    implication,
    implies,
    material_implication,
    not_,
    operator,
    or_,
    var,
)
from .analysis import depth, validate, variables
from .exceptions import EvaluationError, MalformedTree, UnboundVariable

__all__ = [
    "Constant",
    "Expr",
    "NodeType",
    "Operator",
    "OperatorKind",
    "Variable",
    "VariableRef",
    "Visitor",
    "and_",
    "const",
    "iff",
    "implication",
    "implies",
    "material_implication",
    "not_",
    "operator",
    "or_",
    "var",
    "depth",
    "validate",
    "variables",
    "EvaluationError",
    "MalformedTree",
    "UnboundVariable",
]
