#!/usr/bin/env python3
# run_checks.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Command-line interface for running the reference truth-table checks

import sys
import argparse

from expression.exceptions import EvaluationError
from logic.checks import run_checks
from logic.examples import example_cases, example_formula
from logic.truth_table import format_assignment, truth_table
from utils.logger import LogLevel, get_logger


def configure_logging_for_checks(debug: bool = False) -> None:
    """Configure logging levels for a check run.

    Args:
        debug: Enable DEBUG level logging
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        logger.set_level(LogLevel.INFO)


def print_truth_table() -> None:
    """Log every row of the reference formula's truth table."""
    logger = get_logger()
    tree = example_formula()

    logger.info(f"\n📋 Truth table of {tree}:")
    for interpretation, result in truth_table(tree):
        logger.truth_table_row(format_assignment(interpretation), result)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Propel propositional expression checks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_checks.py
  python run_checks.py --table
  python run_checks.py --debug

Exit status:
  0 every check passed, 1 a check failed, 2 evaluation error,
  4 interrupted
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also report every passing check"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    parser.add_argument(
        "--table",
        action="store_true",
        help="Also print the full truth table of the reference formula",
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the check runner.

    Returns:
        Exit code (0 when every check passed, non-zero otherwise)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_checks(debug=args.debug)
    logger = get_logger()

    try:
        cases = example_cases()
        logger.run_start(str(example_formula()), len(cases))

        report = run_checks(cases, verbose=args.verbose)

        if args.table:
            print_truth_table()

        return 0 if report.ok else 1

    except EvaluationError as e:
        logger.error(f"Evaluation error: {e}")
        return 2

    except KeyboardInterrupt:
        logger.error("Check run interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
