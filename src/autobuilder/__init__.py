"""
autobuilder: rebuild and restart a project whenever its sources change.

The package watches a project directory by polling, rebuilds when a tracked
source file is newer than the last build, and replaces the running binary
with a fresh instance.

The package is organized into specialized modules:
- config: settings file, environment file and configuration resolution
- models: data structures, type definitions and shared defaults
- validation: exceptions, error handling and input validation
- system: command execution and process tree handling
- orchestration: builder, runner, watcher and signal handling
- cli: command-line interface

Usage:
    From command line:
        autobuilder -p ./myproject -rc "-port 8080"

    Programmatically:
        from autobuilder import Watcher, resolve_config
        config = resolve_config({"path": "./myproject"})
        Watcher(config).watch()
"""

__version__ = "1.0.0"

from .config import load_env_file, parse_env_file, resolve_config
from .models import AutobuilderConfig, BuildState, ProcessStatus, RunState, WatchTarget
from .orchestration import Builder, Runner, SignalHandler, Watcher
from .validation import (
    AutobuilderError,
    CustomCommandError,
    LaunchError,
    TerminationError,
    ValidationError,
    WatchError,
)
from .cli import main_cli

__all__ = [
    "__version__",
    "resolve_config",
    "load_env_file",
    "parse_env_file",
    "AutobuilderConfig",
    "BuildState",
    "ProcessStatus",
    "RunState",
    "WatchTarget",
    "Builder",
    "Runner",
    "SignalHandler",
    "Watcher",
    "AutobuilderError",
    "CustomCommandError",
    "LaunchError",
    "TerminationError",
    "ValidationError",
    "WatchError",
    "main_cli",
]
