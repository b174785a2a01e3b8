"""
Configuration resolution.

Values are layered from built-in defaults, the optional TOML settings file
and command-line flags (highest precedence), then validated into a single
``AutobuilderConfig``.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.config import AutobuilderConfig
from ..models.defaults import TimeoutConstants
from ..system.commands import prepare_commands
from ..validation import (
    ValidationError,
    validate_app_name,
    validate_bool,
    validate_command_list,
    validate_directory,
    validate_positive_float,
)
from .loader import load_settings_file

logger = logging.getLogger(__name__)

KNOWN_SETTINGS = {
    "path",
    "name",
    "build_only",
    "env_file",
    "custom_command",
    "build_command",
    "run_command",
    "poll_interval",
    "grace_period",
}


def _commands(value: Any, field_name: str) -> List[str]:
    """Turn a command setting into an argument list."""
    if value is None:
        return []
    if isinstance(value, str):
        return prepare_commands(value)
    return validate_command_list(value, field_name=field_name)


def _resolve_relative(value: Any, base_dir: Path, field_name: str) -> Path:
    if not isinstance(value, (str, os.PathLike)):
        raise ValidationError(
            f"{field_name} must be a path string, got {value!r}",
            field_name=field_name,
            value=value,
        )
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def _resolve_app_path(path: Optional[Any]) -> Path:
    """Return the absolute directory to watch, defaulting to the working directory."""
    if path is None or path == "":
        try:
            return Path(os.getcwd()).resolve()
        except OSError as e:
            raise ValidationError(
                f"An error occurred while getting the current working directory: {e}",
                field_name="path",
            ) from e
    return validate_directory(path, field_name="path")


def resolve_config(
    overrides: Optional[Dict[str, Any]] = None,
    config_file: Optional[Path] = None,
) -> AutobuilderConfig:
    """
    Build the validated configuration.

    Args:
        overrides: Values from the command line; keys follow the settings file
            names and ``None`` means "not given"
        config_file: Optional TOML settings file

    Returns:
        Validated AutobuilderConfig

    Raises:
        ValidationError: If any value is invalid
        FileNotFoundError: If config_file does not exist
    """
    settings: Dict[str, Any] = {}
    base_dir = Path.cwd()

    if config_file is not None:
        settings = dict(load_settings_file(config_file))
        base_dir = config_file.resolve().parent
        for key in sorted(set(settings) - KNOWN_SETTINGS):
            logger.warning(f"Ignoring unknown setting '{key}' in {config_file}")
        for key in ("path", "env_file"):
            if settings.get(key):
                settings[key] = _resolve_relative(settings[key], base_dir, key)

    for key, value in (overrides or {}).items():
        if value is not None:
            settings[key] = value

    app_path = _resolve_app_path(settings.get("path"))
    app_name = validate_app_name(settings.get("name") or app_path.name)

    env_file = settings.get("env_file")
    config = AutobuilderConfig(
        app_path=app_path,
        app_name=app_name,
        build_only=validate_bool(settings.get("build_only", False), field_name="build_only"),
        custom_commands=_commands(settings.get("custom_command"), "custom_command"),
        build_commands=_commands(settings.get("build_command"), "build_command"),
        run_commands=_commands(settings.get("run_command"), "run_command"),
        env_file=Path(env_file) if env_file else None,
        poll_interval=validate_positive_float(
            settings.get("poll_interval", TimeoutConstants.POLL_INTERVAL),
            min_value=0.05,
            max_value=60.0,
            field_name="poll_interval",
        ),
        grace_period=validate_positive_float(
            settings.get("grace_period", TimeoutConstants.TERMINATION_GRACE_PERIOD),
            min_value=0.0,
            max_value=60.0,
            field_name="grace_period",
        ),
    )

    logger.debug(f"Resolved configuration: {config}")
    return config
