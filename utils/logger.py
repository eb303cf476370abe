# utils/logger.py
# This file is part of Propel - A Propositional Expression Evaluator
#
# Logging utility for expression evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for expression evaluation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PropelLogger:
    """Centralized logger for evaluation runs with structured check output."""

    def __init__(self, name: str = "propel", level: LogLevel = LogLevel.INFO):
        """Initialize the Propel logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PropelFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def is_debug_enabled(self) -> bool:
        """Whether DEBUG records would be emitted, to skip costly messages."""
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for check runs
    def run_start(self, formula: str, case_count: int):
        """Log the start of a check run."""
        self.info("=== Running Checks ===")
        self.info(f"Formula: {formula}")
        self.info(f"Cases: {case_count}")

    def check_passed(self, name: str, actual: bool):
        """Log a passing check row."""
        self.info(f"  ✅ {name} → {actual}")

    def check_failed(self, name: str, expected: bool, actual: Optional[bool], error: str = ""):
        """Log a failing check row."""
        if error:
            self.info(f"  ❌ {name} → error: {error}")
        else:
            self.info(f"  ❌ {name} → {actual} (expected {expected})")

    def truth_table_row(self, assignment: str, result: bool):
        """Log one row of a truth table."""
        self.info(f"  {assignment} | {'T' if result else 'F'}")

    def check_summary(self, passed: int, total: int):
        """Log the outcome of a check run."""
        self.info(f"\n>>> {passed}/{total} checks passed <<<")


class PropelFormatter(logging.Formatter):
    """Custom formatter for Propel logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PropelLogger] = None


def get_logger(name: str = "propel") -> PropelLogger:
    """Get or create the global Propel logger instance.

    Args:
        name: Logger name (default: "propel")

    Returns:
        PropelLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PropelLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
