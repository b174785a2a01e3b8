"""
Configuration file loading utilities.

This module handles the low-level loading and parsing of the optional TOML
settings file and of KEY=VALUE environment files.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional

from ..logs import CommandLogAdapter, LogCommand
from ..validation import ErrorSeverity, ValidationError, handle_error

logger = logging.getLogger(__name__)

SETTINGS_TABLE = "autobuilder"


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise


def load_settings_file(file_path: Path) -> Dict[str, Any]:
    """
    Load the ``[autobuilder]`` table of a settings file.

    Returns:
        The table contents; an empty dict when the file has no such table

    Raises:
        ValidationError: If ``autobuilder`` is present but not a table
    """
    data = load_toml_file(file_path, "settings file")
    settings = data.get(SETTINGS_TABLE, {})
    if not isinstance(settings, dict):
        raise ValidationError(
            f"[{SETTINGS_TABLE}] in {file_path} must be a table",
            field_name=SETTINGS_TABLE,
            value=settings,
        )
    return settings


def parse_env_file(text: str) -> Dict[str, str]:
    """
    Parse newline-separated ``KEY=VALUE`` pairs.

    Lines without ``=`` and blank lines are ignored. Only the first ``=`` is
    significant, so values may themselves contain ``=``.

    Examples:
        >>> parse_env_file("FOO=bar=baz\\nnot a pair\\n\\nX = 1")
        {'FOO': 'bar=baz', 'X': '1'}
    """
    pairs: Dict[str, str] = {}
    for line in text.splitlines():
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue
        pairs[key] = value.strip()
    return pairs


def load_env_file(
    file_path: Path,
    environ: Optional[MutableMapping[str, str]] = None,
    log: Optional[logging.Logger] = None,
) -> Dict[str, str]:
    """
    Read an environment file and export its pairs.

    Args:
        file_path: Path to the environment file
        environ: Mapping to update, ``os.environ`` by default
        log: Logger to report through

    Returns:
        The pairs that were exported

    Raises:
        OSError: If the file cannot be read
    """
    target = os.environ if environ is None else environ
    with open(file_path, "r", encoding="utf-8") as f:
        pairs = parse_env_file(f.read())

    target.update(pairs)
    CommandLogAdapter(log or logger).info(
        f"Exported {len(pairs)} variables from {file_path}", command=LogCommand.EXPORT
    )
    return pairs
