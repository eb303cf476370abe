# expression/analysis.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Structural queries over expression trees

"""Read-only structural queries over expression trees.

Each query is a small visitor walking the tree once. None of them look at
truth values; see ``logic.evaluator`` for evaluation.
"""

from __future__ import annotations
from typing import Set, Tuple

from . import ast_nodes as ast


class _ShapeValidator(ast.Visitor):
    """Checks every operator node in a tree against its arity."""

    def visit_constant(self, n: ast.Constant) -> None:
        return None

    def visit_variable(self, n: ast.VariableRef) -> None:
        return None

    def visit_operator(self, n: ast.Operator) -> None:
        n.check_arity()
        n.left.accept(self)
        if n.right is not None:
            n.right.accept(self)


class _VariableCollector(ast.Visitor):
    """Gathers the distinct variables referenced in a tree."""

    def __init__(self):
        self.found: Set[ast.Variable] = set()

    def visit_constant(self, n: ast.Constant) -> None:
        return None

    def visit_variable(self, n: ast.VariableRef) -> None:
        self.found.add(n.variable)

    def visit_operator(self, n: ast.Operator) -> None:
        n.check_arity()
        n.left.accept(self)
        if n.right is not None:
            n.right.accept(self)


class _DepthCalculator(ast.Visitor):
    def visit_constant(self, n: ast.Constant) -> int:
        return 1

    def visit_variable(self, n: ast.VariableRef) -> int:
        return 1

    def visit_operator(self, n: ast.Operator) -> int:
        n.check_arity()
        right = n.right.accept(self) if n.right is not None else 0
        return 1 + max(n.left.accept(self), right)


def validate(node: ast.Expr) -> None:
    """Verify that every operator in the tree matches its arity.

    Args:
        node: Root of the tree to check

    Raises:
        MalformedTree: On the first offending operator, in pre-order
    """
    node.accept(_ShapeValidator())


def variables(node: ast.Expr) -> Tuple[ast.Variable, ...]:
    """Return the distinct variables referenced in the tree, sorted by id.

    Raises:
        MalformedTree: If an operator in the tree does not match its arity
    """
    collector = _VariableCollector()
    node.accept(collector)
    return tuple(sorted(collector.found))


def depth(node: ast.Expr) -> int:
    """Return the height of the tree, counting a lone leaf as 1."""
    return node.accept(_DepthCalculator())
