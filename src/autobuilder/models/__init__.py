"""
Data models for the autobuilder package.
"""

from .config import AutobuilderConfig, WatchTarget
from .defaults import BuildDefaults, TimeoutConstants
from .runtime import BuildState, ProcessStatus, RunState

__all__ = [
    "AutobuilderConfig",
    "WatchTarget",
    "BuildState",
    "ProcessStatus",
    "RunState",
    "BuildDefaults",
    "TimeoutConstants",
]
