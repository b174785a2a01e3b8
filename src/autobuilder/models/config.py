"""
Configuration data models.

This module contains the resolved application configuration and the
immutable description of what the watcher observes.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .defaults import BuildDefaults, TimeoutConstants


@dataclass
class AutobuilderConfig:
    """
    Fully resolved configuration, produced from defaults, the optional TOML
    settings file and command-line flags.
    """

    # Absolute path of the project directory to watch, build and run in.
    app_path: Path
    # Project name; also the name of the built binary inside app_path.
    app_name: str
    # Build but never launch the binary.
    build_only: bool = False
    # Command run before every build (formatting, linting, code generation).
    custom_commands: List[str] = field(default_factory=list)
    # Extra arguments appended to the build invocation.
    build_commands: List[str] = field(default_factory=list)
    # Arguments passed to the launched binary.
    run_commands: List[str] = field(default_factory=list)
    # Optional KEY=VALUE file exported before watching starts.
    env_file: Optional[Path] = None

    # Seconds between two directory scans.
    poll_interval: float = TimeoutConstants.POLL_INTERVAL
    # Seconds a previous process may take to exit before it is killed.
    grace_period: float = TimeoutConstants.TERMINATION_GRACE_PERIOD
    # Source-file suffix whose changes trigger a rebuild.
    tracked_extension: str = BuildDefaults.TRACKED_EXTENSION
    # Build program; "-o <app_name>" and build_commands are appended.
    build_program: List[str] = field(default_factory=lambda: list(BuildDefaults.BUILD_PROGRAM))


@dataclass(frozen=True)
class WatchTarget:
    """What the watcher observes. Immutable once constructed."""

    directory: Path
    tracked_extension: str = BuildDefaults.TRACKED_EXTENSION
    build_only: bool = False
