"""
Configuration management for the autobuilder package.

This module provides loading of the optional TOML settings file and of
environment files, and resolution of the final configuration.
"""

from .loader import (
    load_env_file,
    load_settings_file,
    load_toml_file,
    parse_env_file,
)
from .manager import resolve_config

__all__ = [
    "load_env_file",
    "load_settings_file",
    "load_toml_file",
    "parse_env_file",
    "resolve_config",
]
