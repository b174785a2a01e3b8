"""
Validation functions for configuration values.
"""

import re
from pathlib import Path
from typing import Any, List, Optional, Union

from .exceptions import ValidationError


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate that a value is a float within the given bounds.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated float value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    try:
        float_value = float(value)
    except (ValueError, TypeError):
        raise ValidationError(
            f"{field_name} must be a valid number, got {value}",
            field_name=field_name,
            value=value
        )
    if float_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and float_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    return float_value


def validate_directory(path: Union[str, Path], field_name: str = "path") -> Path:
    """
    Validate that a path exists and is a directory.

    Args:
        path: Path to validate
        field_name: Name of the field being validated

    Returns:
        The absolute, validated path

    Raises:
        ValidationError: If the path is missing or not a directory
    """
    candidate = Path(path)
    if not candidate.exists():
        raise ValidationError(
            f"Given path is not valid one: {candidate}",
            field_name=field_name,
            value=str(path)
        )
    if not candidate.is_dir():
        raise ValidationError(
            f"Given path is not valid: {candidate}: The path must be a directory",
            field_name=field_name,
            value=str(path)
        )
    return candidate.resolve()


def validate_app_name(name: Any, field_name: str = "name") -> str:
    """
    Validate the project (binary) name.

    The name becomes the build output file inside the watched directory,
    so it must be a single path component.
    """
    if not name or not isinstance(name, str):
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            field_name=field_name,
            value=name
        )

    if name in (".", "..") or re.search(r'[\\/\x00]', name):
        raise ValidationError(
            f"{field_name} must be a plain file name, got {name!r}",
            field_name=field_name,
            value=name
        )

    return name


def validate_command_list(value: Any, field_name: str = "command") -> List[str]:
    """
    Validate a command given as a list of strings.

    Raises:
        ValidationError: If the value is not a list of strings
    """
    if not isinstance(value, list) or not all(isinstance(part, str) for part in value):
        raise ValidationError(
            f"{field_name} must be a string or a list of strings, got {value!r}",
            field_name=field_name,
            value=value
        )
    return list(value)


def validate_bool(value: Any, field_name: str = "value") -> bool:
    """Validate that a value is a real boolean."""
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be true or false, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value
