# logic/examples.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Reference formula and its full truth table

"""Reference formula with a known truth table.

    (((x1 <-> !x2) -> x3) & x4) | false

Its 16 expected results, in ``interpretations`` order over x1..x4, serve as
the regression table run by ``run_checks.py``.
"""

from __future__ import annotations
from typing import List, Tuple

from expression import ast_nodes as ast
from expression.builders import and_, const, implication, material_implication, not_, or_, var

from .checks import CheckCase
from .truth_table import format_assignment, interpretations

EXAMPLE_VARIABLES: Tuple[ast.Variable, ...] = tuple(ast.Variable(i) for i in range(1, 5))

# x1 x2 x3 x4, counting from FFFF to TTTT
EXAMPLE_EXPECTATIONS: Tuple[bool, ...] = (
    False, True, False, True,   # x1=F x2=F
    False, False, False, True,  # x1=F x2=T
    False, False, False, True,  # x1=T x2=F
    False, True, False, True,   # x1=T x2=T
)


def example_formula() -> ast.Expr:
    """Build ``(((x1 <-> !x2) -> x3) & x4) | false``."""
    return or_(
        and_(
            implication(
                material_implication(var(1), not_(var(2))),
                var(3),
            ),
            var(4),
        ),
        const(False),
    )


def example_cases() -> List[CheckCase]:
    """Pair every assignment of x1..x4 with its expected result."""
    tree = example_formula()
    return [
        CheckCase(format_assignment(interpretation), tree, interpretation, expected)
        for interpretation, expected in zip(
            interpretations(EXAMPLE_VARIABLES), EXAMPLE_EXPECTATIONS
        )
    ]
