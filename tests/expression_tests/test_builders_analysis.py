# tests/expression_tests/test_builders_analysis.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Test suite for node factories and structural tree queries

"""Test suite for well-formed tree construction and structural queries."""

import pytest

from expression import (
    MalformedTree,
    Operator,
    OperatorKind,
    Variable,
    VariableRef,
    and_,
    const,
    depth,
    iff,
    implication,
    implies,
    material_implication,
    not_,
    operator,
    or_,
    validate,
    var,
    variables,
)


class TestFactories:
    """Test cases for the arity-checked factories."""

    def test_var_accepts_int_or_variable(self):
        assert var(3) == VariableRef(Variable(3))
        assert var(Variable(3)) == var(3)

    def test_const_normalizes_to_bool(self):
        assert const(1).value is True
        assert const(0).value is False

    @pytest.mark.parametrize(
        "factory, kind",
        [
            (and_, OperatorKind.AND),
            (or_, OperatorKind.OR),
            (implication, OperatorKind.IMPLICATION),
            (material_implication, OperatorKind.MATERIAL_IMPLICATION),
        ],
    )
    def test_binary_factories(self, factory, kind):
        node = factory(var(1), var(2))
        assert node == Operator(kind, var(1), var(2))

    def test_aliases(self):
        assert implies is implication
        assert iff is material_implication

    def test_not_factory(self):
        assert not_(var(1)) == Operator(OperatorKind.NOT, var(1), None)

    @pytest.mark.parametrize(
        "op, left, right",
        [
            (OperatorKind.AND, var(1), None),
            (OperatorKind.OR, None, var(1)),
            (OperatorKind.NOT, var(1), var(2)),
            (OperatorKind.IMPLICATION, var(1), "x2"),
            ("AND", var(1), var(2)),
        ],
    )
    def test_generic_operator_rejects_bad_shape(self, op, left, right):
        with pytest.raises(MalformedTree) as exc_info:
            operator(op, left, right)
        assert isinstance(exc_info.value.node, Operator)

    def test_raw_constructor_does_not_validate(self):
        node = Operator(OperatorKind.AND, var(1))
        assert node.right is None


class TestValidate:
    """Test cases for whole-tree shape validation."""

    def test_well_formed_tree_passes(self, example_tree):
        assert validate(example_tree) is None

    def test_nested_defect_is_found(self):
        broken = Operator(OperatorKind.NOT, var(2), var(3))
        tree = and_(var(1), or_(const(True), broken))

        with pytest.raises(MalformedTree) as exc_info:
            validate(tree)

        assert exc_info.value.node is broken


class TestVariables:
    """Test cases for variable collection."""

    def test_sorted_and_distinct(self):
        tree = and_(var(3), or_(var(1), and_(var(3), not_(var(2)))))
        assert variables(tree) == (Variable(1), Variable(2), Variable(3))

    def test_constant_only_tree(self):
        assert variables(or_(const(True), const(False))) == ()

    def test_reference_formula(self, example_tree, x):
        assert variables(example_tree) == (x[1], x[2], x[3], x[4])


class TestDepth:
    """Test cases for tree height."""

    @pytest.mark.parametrize(
        "tree, expected",
        [
            (const(True), 1),
            (var(1), 1),
            (not_(var(1)), 2),
            (and_(var(1), not_(not_(var(2)))), 4),
        ],
    )
    def test_depth(self, tree, expected):
        assert depth(tree) == expected

    def test_reference_formula(self, example_tree):
        assert depth(example_tree) == 6
