# logic/__init__.py

"""Evaluation interface.

This package provides:
  • evaluate: truth value of an expression tree under an interpretation
  • interpretations / truth_table: caller-side enumeration of assignments
  • run_checks: table-driven pass/fail runner over CheckCase rows
"""

from .evaluator import Evaluator, Interpretation, evaluate
from .truth_table import interpretations, truth_table
from .checks import CheckCase, CheckReport, CheckResult, run_checks

__all__ = [
    "Evaluator",
    "Interpretation",
    "evaluate",
    "interpretations",
    "truth_table",
    "CheckCase",
    "CheckReport",
    "CheckResult",
    "run_checks",
]
