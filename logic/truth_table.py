# logic/truth_table.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Enumeration of interpretations and truth tables for expression trees

"""Enumerates interpretations and tabulates expression results.

The evaluator handles one interpretation per call; this module is the
caller-side loop that walks the whole assignment space of a small set of
variables, e.g. to print or check a full truth table.

Assignments are produced in binary counting order: the first variable is
the most significant bit and False precedes True, so for (x1, x2) the order
is FF, FT, TF, TT.
"""

from __future__ import annotations
from itertools import product
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from expression import ast_nodes as ast
from expression.analysis import variables as referenced_variables
from utils.logger import get_logger

from .evaluator import evaluate

TruthTableRow = Tuple[Dict[ast.Variable, bool], bool]


def interpretations(
    variables: Iterable[ast.Variable],
) -> Iterator[Dict[ast.Variable, bool]]:
    """Yield every assignment of truth values to the given variables.

    Each yielded dict is a fresh object. With no variables, a single empty
    interpretation is yielded.

    Args:
        variables: Variables to assign, in significance order

    Yields:
        One interpretation per assignment, 2**len(variables) in total
    """
    ordered = list(variables)
    for values in product((False, True), repeat=len(ordered)):
        yield dict(zip(ordered, values))


def truth_table(
    node: ast.Expr, variables: Optional[Sequence[ast.Variable]] = None
) -> List[TruthTableRow]:
    """Evaluate a tree under every assignment of its variables.

    Args:
        node: Root of the expression tree
        variables: Variables to enumerate; defaults to those referenced in
            the tree, sorted by id. Must cover every referenced variable.

    Returns:
        List of (interpretation, result) rows in enumeration order

    Raises:
        UnboundVariable: If ``variables`` omits a referenced variable
        MalformedTree: If an operator does not match its arity
    """
    if variables is None:
        variables = referenced_variables(node)

    logger = get_logger()
    if logger.is_debug_enabled():
        logger.debug(f"Tabulating {node} over {len(variables)} variable(s)")

    return [
        (interpretation, evaluate(node, interpretation))
        for interpretation in interpretations(variables)
    ]


def format_assignment(interpretation: Dict[ast.Variable, bool]) -> str:
    """Render an interpretation as ``x1=F x2=T ...`` in variable order."""
    return " ".join(
        f"{variable}={'T' if value else 'F'}"
        for variable, value in sorted(interpretation.items())
    )
