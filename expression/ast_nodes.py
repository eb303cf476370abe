# expression/ast_nodes.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Expression tree node classes for propositional formula representation

"""Expression tree node classes for propositional formulas.

This module defines immutable and hashable node classes used to represent
boolean expressions as binary trees. A tree is a composition of three node
variants:

Node Types:
    Constant: A fixed truth value
    VariableRef: A reference to a propositional variable, resolved at
        evaluation time through an interpretation
    Operator: An operator applied to one (NOT) or two operand subtrees

Every node exposes the same read-only capability set: its variant tag
(``node_type``), its payload (``payload``) and its children (``left`` and
``right``, ``None`` where absent). All nodes support the visitor design
pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol, Union

from .exceptions import MalformedTree


class NodeType(Enum):
    """Variant tag of an expression node."""

    CONSTANT = auto()
    VARIABLE = auto()
    OPERATOR = auto()


class OperatorKind(Enum):
    """Propositional operators, valued by their infix symbol.

    IMPLICATION combines as ``!left | right``. MATERIAL_IMPLICATION combines
    as ``left == right``, i.e. logical equivalence.
    """

    AND = "&"
    OR = "|"
    NOT = "!"
    IMPLICATION = "->"
    MATERIAL_IMPLICATION = "<->"

    @property
    def arity(self) -> int:
        """Number of operands: 1 for NOT, 2 for every other operator."""
        return 1 if self is OperatorKind.NOT else 2

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class Variable:
    """Opaque propositional variable identified by an integer id.

    Two variables are equal iff their ids are equal, and they hash and
    order by id, so variables can key an interpretation mapping.

    Attributes:
        id: Integer identifier of the variable
    """

    id: int

    def __str__(self) -> str:
        return f"x{self.id}"


class Visitor(Protocol):
    """Interface for expression visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for each node variant.
    """

    def visit_constant(self, n: Constant): ...

    def visit_variable(self, n: VariableRef): ...

    def visit_operator(self, n: Operator): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all expression tree nodes.

    Provides the foundation for immutable expression trees with visitor
    pattern support and the uniform per-node accessors.
    """

    @property
    def node_type(self) -> NodeType:
        """Variant tag of this node."""
        raise NotImplementedError

    @property
    def payload(self) -> Union[bool, Variable, OperatorKind]:
        """Constant value, referenced variable, or operator kind."""
        raise NotImplementedError

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return f"<{type(self).__name__}>"


@dataclass(frozen=True, slots=True)
class Leaf(Expr):
    """Common base of the childless variants."""

    @property
    def left(self) -> None:
        return None

    @property
    def right(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class Constant(Leaf):
    """Boolean constant in an expression.

    Attributes:
        value: The fixed truth value of this leaf
    """

    value: bool

    @property
    def node_type(self) -> NodeType:
        return NodeType.CONSTANT

    @property
    def payload(self) -> bool:
        return self.value

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_constant method."""
        return v.visit_constant(self)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class VariableRef(Leaf):
    """Reference to a propositional variable.

    The truth value is not stored in the tree; it is looked up in the
    interpretation supplied to each evaluation.

    Attributes:
        variable: The referenced variable
    """

    variable: Variable

    @property
    def node_type(self) -> NodeType:
        return NodeType.VARIABLE

    @property
    def payload(self) -> Variable:
        return self.variable

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_variable method."""
        return v.visit_variable(self)

    def __str__(self) -> str:
        return str(self.variable)


@dataclass(frozen=True, slots=True)
class Operator(Expr):
    """Operator applied to one or two operand subtrees.

    The constructor does not check the children against the operator's
    arity. Use the factories in ``expression.builders`` to build well-formed
    nodes, or ``check_arity`` to verify a node built directly.

    Attributes:
        op: The operator kind
        left: First operand (the only operand of NOT)
        right: Second operand, None for NOT
    """

    op: OperatorKind
    left: Expr
    right: Optional[Expr] = None

    @property
    def node_type(self) -> NodeType:
        return NodeType.OPERATOR

    @property
    def payload(self) -> OperatorKind:
        return self.op

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_operator method."""
        return v.visit_operator(self)

    def check_arity(self) -> None:
        """Verify that the children match the operator's arity.

        Only this node's own slots are checked, not its subtrees.

        Raises:
            MalformedTree: If the operator kind is unknown, a required
                operand is absent or not a node, or NOT has a right operand
        """
        if not isinstance(self.op, OperatorKind):
            raise MalformedTree(self, f"unknown operator {self.op!r}")

        if not isinstance(self.left, _NODE_VARIANTS):
            raise MalformedTree(
                self, f"{self.op.name} requires a left operand, got {self.left!r}"
            )

        if self.op.arity == 1:
            if self.right is not None:
                raise MalformedTree(
                    self, f"{self.op.name} is unary but has a right operand"
                )
        elif not isinstance(self.right, _NODE_VARIANTS):
            raise MalformedTree(
                self, f"{self.op.name} requires a right operand, got {self.right!r}"
            )

    def __str__(self) -> str:
        if self.op is OperatorKind.NOT:
            return f"!{self.left}"
        symbol = getattr(self.op, "symbol", self.op)
        return f"({self.left} {symbol} {self.right})"


# Concrete variants accepted as operands
_NODE_VARIANTS = (Constant, VariableRef, Operator)
