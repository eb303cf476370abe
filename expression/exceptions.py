# expression/exceptions.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Custom exceptions for expression construction and evaluation

"""Domain-specific exceptions for propositional expression evaluation.

Evaluation is all-or-nothing: any of these errors aborts the call that
raised it and reaches the caller unchanged. None of them is ever replaced
by a default truth value.
"""


class EvaluationError(RuntimeError):
    """Base class for failures while evaluating an expression tree."""

    pass


class UnboundVariable(EvaluationError):
    """Exception raised when a variable has no entry in the interpretation.

    Recoverable by the caller: supply an interpretation that binds every
    variable reachable from the evaluated root.

    Attributes:
        variable: The variable that could not be resolved
    """

    def __init__(self, variable):
        self.variable = variable
        super().__init__(f"No truth value bound for variable {variable}")


class MalformedTree(EvaluationError):
    """Exception raised when an operator node's children do not match its arity.

    Indicates a construction bug upstream: a binary operator missing a child,
    a unary operator carrying a right child, or a child slot holding
    something that is not an expression node.

    Attributes:
        node: The offending operator node
    """

    def __init__(self, node, reason: str):
        self.node = node
        self.reason = reason
        super().__init__(f"Malformed expression tree: {reason}")
