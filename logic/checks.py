# logic/checks.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Table-driven checks of expression trees against expected results

"""Runs (tree, interpretation, expected) rows and reports pass/fail per row.

A check run never stops early: every row is evaluated, and an evaluation
error is recorded against its row as a failure instead of aborting the run.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

from expression import ast_nodes as ast
from expression.exceptions import EvaluationError
from utils.logger import get_logger

from .evaluator import evaluate


@dataclass(frozen=True)
class CheckCase:
    """One row of a check table.

    Attributes:
        name: Label used when reporting the row
        tree: Expression to evaluate
        interpretation: Truth values for the tree's variables
        expected: Truth value the evaluation must produce
    """

    name: str
    tree: ast.Expr
    interpretation: Mapping[ast.Variable, bool]
    expected: bool


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check row.

    Attributes:
        case: The row that was run
        actual: Evaluation result, None if evaluation failed
        error: Evaluation error raised for this row, if any
    """

    case: CheckCase
    actual: Optional[bool] = None
    error: Optional[EvaluationError] = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.actual == self.case.expected


@dataclass
class CheckReport:
    """Aggregated outcome of a check run."""

    results: List[CheckResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def failures(self) -> List[CheckResult]:
        return [r for r in self.results if not r.passed]


def run_check(case: CheckCase) -> CheckResult:
    """Evaluate one row, capturing an evaluation error as its outcome."""
    try:
        actual = evaluate(case.tree, case.interpretation)
    except EvaluationError as exc:
        return CheckResult(case, error=exc)
    return CheckResult(case, actual=actual)


def run_checks(cases: Iterable[CheckCase], verbose: bool = False) -> CheckReport:
    """Run every row and log its outcome.

    Failing rows are always logged; passing rows only when verbose.

    Args:
        cases: Rows to run, in reporting order
        verbose: Also log a line for every passing row

    Returns:
        CheckReport holding one result per row
    """
    logger = get_logger()
    report = CheckReport()

    for case in cases:
        result = run_check(case)
        report.results.append(result)

        if result.passed:
            if verbose:
                logger.check_passed(case.name, result.actual)
        else:
            logger.check_failed(
                case.name,
                case.expected,
                result.actual,
                str(result.error) if result.error else "",
            )

    logger.check_summary(report.passed, report.total)
    return report
