"""
Build step of the watch/build/run pipeline.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence

from ..logs import CommandLogAdapter, LogCommand
from ..models.runtime import BuildState
from ..system.commands import format_command, run_command
from ..models.defaults import BuildDefaults

logger = logging.getLogger(__name__)


class Builder:
    """
    Builds the project and records when the last build attempt finished.

    The recorded time is the staleness threshold used by the watcher: any
    tracked file modified after it needs a new build.
    """

    def __init__(
        self,
        app_name: str,
        app_path: Path,
        build_args: Sequence[str] = (),
        build_program: Sequence[str] = BuildDefaults.BUILD_PROGRAM,
        logger: Optional[logging.Logger] = None,
    ):
        self.app_name = app_name
        self.directory = Path(app_path)
        self.log = CommandLogAdapter(logger or globals()["logger"])
        self.state = BuildState(
            build_command=[*build_program, BuildDefaults.OUTPUT_FLAG, app_name, *build_args]
        )

    @property
    def build_command(self) -> List[str]:
        return list(self.state.build_command)

    @property
    def last_build_time(self) -> float:
        """Epoch seconds at which the last build attempt finished (0.0 if never)."""
        return self.state.last_build_time

    def build(self) -> bool:
        """
        Run the build once, synchronously.

        The last-build time advances whether or not the build succeeds, so a
        broken file does not re-trigger a build on every scan until it is
        edited again. On failure the captured output is logged.

        Returns:
            True if the build command exited with status 0
        """
        self.log.info(f"Building {self.app_name}", command=LogCommand.BUILD)
        self.log.debug(f"Build command: {format_command(self.state.build_command)}",
                       command=LogCommand.BUILD)

        started = time.monotonic()
        return_code, output = run_command(self.state.build_command, cwd=self.directory)
        self._mark_built()

        if return_code != 0:
            self.log.error(
                f"Build failed with exit code {return_code}:\n{output.rstrip()}",
                command=LogCommand.BUILD,
            )
            return False

        self.log.info(f"Build finished in {time.monotonic() - started:.2f}s",
                      command=LogCommand.BUILD)
        return True

    def _mark_built(self) -> None:
        # Never move backwards, even if the wall clock does.
        self.state.last_build_time = max(self.state.last_build_time, time.time())
