"""
Validation and error handling for the autobuilder package.

This module provides the exception taxonomy, consistent error reporting and
the input validators used while resolving configuration.
"""

from .exceptions import (
    AutobuilderError,
    CustomCommandError,
    ErrorSeverity,
    LaunchError,
    TerminationError,
    ValidationError,
    WatchError,
    handle_cli_error,
    handle_error,
)
from .validators import (
    validate_app_name,
    validate_bool,
    validate_command_list,
    validate_directory,
    validate_positive_float,
)

__all__ = [
    "AutobuilderError",
    "CustomCommandError",
    "ErrorSeverity",
    "LaunchError",
    "TerminationError",
    "ValidationError",
    "WatchError",
    "handle_cli_error",
    "handle_error",
    "validate_app_name",
    "validate_bool",
    "validate_command_list",
    "validate_directory",
    "validate_positive_float",
]
