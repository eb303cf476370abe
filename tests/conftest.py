# tests/conftest.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Propel tests.

This module puts the project root on the import path and provides the
common trees and interpretations used across test modules.
"""

import logging
import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import expression
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def x():
    """Provide variables x1..x4 indexed by id.

    Returns:
        Dict[int, Variable]: Variables keyed by their integer id
    """
    from expression import Variable

    return {i: Variable(i) for i in range(1, 5)}


@pytest.fixture
def example_tree():
    """Provide the reference formula (((x1 <-> !x2) -> x3) & x4) | false."""
    from logic.examples import example_formula

    return example_formula()


class _ListHandler(logging.Handler):
    """Collects log messages in memory."""

    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def log_messages():
    """Capture the Propel logger's INFO output for one test.

    The logger writes to the stdout captured when it was first created, so
    tests inspect its records through this handler instead of capsys.

    Yields:
        List[str]: Messages logged while the test runs
    """
    from utils.logger import LogLevel, get_logger

    logger = get_logger()
    logger.set_level(LogLevel.INFO)
    handler = _ListHandler()
    logger.logger.addHandler(handler)
    yield handler.messages
    logger.logger.removeHandler(handler)
