"""
Exception taxonomy and error handling.

This module defines the errors raised by the orchestration components and a
small set of helpers that log an error consistently and optionally re-raise it.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AutobuilderError(Exception):
    """Base class for all errors raised by autobuilder."""


class ValidationError(AutobuilderError):
    """
    Exception raised when configuration validation fails.

    Validation errors are fatal: the CLI reports them once and exits non-zero.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class CustomCommandError(AutobuilderError):
    """Raised when the pre-build custom command fails or cannot be spawned."""

    def __init__(self, message: str, return_code: int = -1, output: str = ""):
        super().__init__(message)
        self.return_code = return_code
        self.output = output


class LaunchError(AutobuilderError):
    """Raised when the application process cannot be started."""


class TerminationError(LaunchError):
    """Raised when waiting on the previous application process fails."""


class WatchError(AutobuilderError):
    """Raised when walking the watched directory tree fails."""


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    command: Any = None,
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
        command: Optional command context attached to the log record
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    kwargs = {}
    if command is not None:
        kwargs["extra"] = {"command": command}

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True, **kwargs)
    elif severity_str == "info":
        effective_logger.info(error_msg, **kwargs)
    elif severity_str == "warning":
        effective_logger.warning(error_msg, **kwargs)
    elif severity_str == "error":
        effective_logger.error(error_msg, **kwargs)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True, **kwargs)

    if reraise:
        raise error


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a fatal CLI error and exit the process."""
    exit_code = kwargs.pop('exit_code', 1)
    include_traceback = kwargs.pop('include_traceback', False)

    severity = kwargs.pop('severity', ErrorSeverity.CRITICAL if include_traceback else ErrorSeverity.ERROR)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    sys.exit(exit_code)
