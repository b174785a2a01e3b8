"""
Runtime data models.

This module contains the mutable state owned by the builder and the runner.
"""

import subprocess
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass
class BuildState:
    """
    Build bookkeeping, mutated only by ``Builder.build``.
    """

    # Full build command line: program, output flag and extra arguments.
    build_command: List[str]
    # Epoch seconds at which the most recent build attempt finished; 0.0 means never.
    last_build_time: float = 0.0


class ProcessStatus(Enum):
    """Lifecycle of the process tracked by a runner."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    TERMINATING = "terminating"


@dataclass
class RunState:
    """
    State of the launched application, mutated only by the runner.

    ``process`` is set exactly when ``status`` is RUNNING or TERMINATING.
    """

    run_args: List[str] = field(default_factory=list)
    custom_command: List[str] = field(default_factory=list)
    status: ProcessStatus = ProcessStatus.NOT_STARTED
    process: Optional[subprocess.Popen] = None
