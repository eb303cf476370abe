# tests/logic_tests/test_compositionality.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Randomized comparison of the evaluator against an independent oracle

"""Randomized agreement tests between ``evaluate`` and a grammar-driven oracle.

Random trees are rendered to text and re-evaluated by ``FormulaOracle``,
which computes truth values during parsing and shares no code with the
evaluator. Agreement on many random (tree, interpretation) pairs checks
that evaluation composes subtree results per the operator table.
"""

import random

import pytest

from expression import Constant, Operator, OperatorKind, Variable, VariableRef
from logic.evaluator import evaluate
from logic.truth_table import interpretations
from utils.logger import get_logger

from formula_oracle import oracle_evaluate

VARIABLE_IDS = (1, 2, 3, 4, 5)


def _random_tree(rng: random.Random, max_depth: int):
    """Build a random well-formed tree of at most ``max_depth`` levels."""
    if max_depth <= 1 or rng.random() < 0.25:
        if rng.random() < 0.2:
            return Constant(rng.random() < 0.5)
        return VariableRef(Variable(rng.choice(VARIABLE_IDS)))

    op = rng.choice(list(OperatorKind))
    left = _random_tree(rng, max_depth - 1)
    if op.arity == 1:
        return Operator(op, left)
    return Operator(op, left, _random_tree(rng, max_depth - 1))


def _random_interpretation(rng: random.Random):
    return {Variable(i): rng.random() < 0.5 for i in VARIABLE_IDS}


class TestOracleAgreement:
    """Test cases comparing the evaluator with the oracle."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    @pytest.mark.parametrize("seed", range(40))
    def test_random_trees(self, seed):
        rng = random.Random(seed)

        for _ in range(10):
            tree = _random_tree(rng, max_depth=6)
            interpretation = _random_interpretation(rng)
            values = {v.id: b for v, b in interpretation.items()}

            self.logger.debug(f"Comparing {tree}")

            assert evaluate(tree, interpretation) == oracle_evaluate(str(tree), values), (
                f"Disagreement on {tree} under {values}"
            )

    @pytest.mark.parametrize(
        "tree",
        [
            Operator(OperatorKind.IMPLICATION, VariableRef(Variable(1)), VariableRef(Variable(2))),
            Operator(
                OperatorKind.MATERIAL_IMPLICATION,
                VariableRef(Variable(1)),
                Operator(OperatorKind.NOT, VariableRef(Variable(2))),
            ),
        ],
    )
    def test_exhaustive_small_trees(self, tree):
        variables = (Variable(1), Variable(2))
        for interpretation in interpretations(variables):
            values = {v.id: b for v, b in interpretation.items()}
            assert evaluate(tree, interpretation) == oracle_evaluate(
                str(tree), values
            )


class TestSubtreeComposition:
    """Test cases checking operator nodes against their evaluated subtrees."""

    COMBINE = {
        OperatorKind.AND: lambda l, r: l and r,
        OperatorKind.OR: lambda l, r: l or r,
        OperatorKind.IMPLICATION: lambda l, r: (not l) or r,
        OperatorKind.MATERIAL_IMPLICATION: lambda l, r: l == r,
    }

    @pytest.mark.parametrize("seed", range(20))
    def test_root_equals_combined_children(self, seed):
        rng = random.Random(1000 + seed)
        tree = _random_tree(rng, max_depth=5)
        while not isinstance(tree, Operator):
            tree = _random_tree(rng, max_depth=5)
        interpretation = _random_interpretation(rng)

        left = evaluate(tree.left, interpretation)
        if tree.op is OperatorKind.NOT:
            expected = not left
        else:
            expected = self.COMBINE[tree.op](left, evaluate(tree.right, interpretation))

        assert evaluate(tree, interpretation) == expected
