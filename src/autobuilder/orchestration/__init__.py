"""
Orchestration module: the watch/build/run pipeline.

Components:
- Builder: builds the project and records the last-build time
- Runner: launches the application and runs the pre-build custom command
- Watcher: polls the project tree and drives build/run cycles
- SignalHandler: interrupt handling
"""

from .builder import Builder
from .runner import Runner
from .signal_handler import SignalHandler
from .watcher import WalkDecision, Watcher

__all__ = [
    "Builder",
    "Runner",
    "Watcher",
    "WalkDecision",
    "SignalHandler",
]
