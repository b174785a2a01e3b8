"""
Polling watcher driving the build/run cycle.

The watcher builds and runs once at start-up, then scans the project tree at
a fixed interval. Every tracked source file newer than the builder's
last-build time triggers a full cycle. Scans and cycles run sequentially on
a single background thread, so the builder and runner are never used
concurrently.
"""

import logging
import os
import threading
from concurrent.futures import Future
from enum import Enum
from pathlib import Path
from typing import Optional

from ..logs import CommandLogAdapter, LogCommand
from ..models.config import AutobuilderConfig, WatchTarget
from ..validation import (
    CustomCommandError,
    ErrorSeverity,
    LaunchError,
    WatchError,
    handle_error,
)
from .builder import Builder
from .runner import Runner
from ..models.defaults import BuildDefaults

logger = logging.getLogger(__name__)


class WalkDecision(Enum):
    """Result of visiting one entry during a scan."""
    CONTINUE = "continue"
    SKIP = "skip"
    REBUILD = "rebuild"


class Watcher:
    """
    Watch a project directory and rebuild/relaunch on changes.

    Args:
        config: Resolved configuration
        logger: Logger shared with the builder and runner
        builder: Builder to use instead of one created from config
        runner: Runner to use instead of one created from config
    """

    def __init__(
        self,
        config: AutobuilderConfig,
        logger: Optional[logging.Logger] = None,
        builder: Optional[Builder] = None,
        runner: Optional[Runner] = None,
    ):
        base_logger = logger or globals()["logger"]
        self.log = CommandLogAdapter(base_logger)
        self.target = WatchTarget(
            directory=Path(config.app_path),
            tracked_extension=config.tracked_extension,
            build_only=config.build_only,
        )
        self.poll_interval = config.poll_interval
        self.builder = builder or Builder(
            config.app_name,
            config.app_path,
            build_args=config.build_commands,
            build_program=config.build_program,
            logger=base_logger,
        )
        self.runner = runner or Runner(
            config.app_name,
            config.app_path,
            run_args=config.run_commands,
            custom_command=config.custom_commands,
            grace_period=config.grace_period,
            logger=base_logger,
        )

        self._stop_requested = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._result: Optional[Future] = None

    def watch(self) -> None:
        """
        Run the initial cycle and watch until stopped.

        Raises:
            WatchError: If scanning the directory tree fails
        """
        self.start()
        self.join()

    def start(self) -> Future:
        """
        Run the initial cycle, then start scanning on a background thread.

        Returns:
            Future resolved with None once the loop stops, or with the
            WatchError that ended it
        """
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("Watcher is already running")

        self.log.info(f"Watching {self.target.directory}", command=LogCommand.WATCH)
        self.run_cycle()

        self._stop_requested.clear()
        self._result = Future()
        self._thread = threading.Thread(target=self._scan_loop, name="autobuilder-watch", daemon=True)
        self._thread.start()
        return self._result

    def stop(self) -> None:
        """Ask the scan loop to exit once the current pass is done."""
        self._stop_requested.set()

    def join(self, timeout: Optional[float] = None) -> None:
        """
        Wait for the scan loop to finish.

        Raises:
            WatchError: If the loop ended because scanning failed
            concurrent.futures.TimeoutError: If timeout elapsed first
        """
        if self._result is None:
            raise RuntimeError("Watcher has not been started")
        self._result.result(timeout=timeout)

    def _scan_loop(self) -> None:
        try:
            while not self._stop_requested.is_set():
                self.scan_once()
                if self._stop_requested.wait(self.poll_interval):
                    break
        except Exception as e:
            self._result.set_exception(e)
        else:
            self._result.set_result(None)

    def scan_once(self) -> int:
        """
        Walk the watched tree once, running a cycle for every stale file.

        Each file is compared against the builder's current last-build time,
        so a cycle triggered early in the walk raises the threshold for the
        entries visited after it.

        Returns:
            Number of cycles triggered during this pass

        Raises:
            WatchError: If a directory cannot be read
        """
        return self._walk(self.target.directory)

    def _walk(self, directory: Path) -> int:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except FileNotFoundError as e:
            if directory == self.target.directory:
                raise WatchError(f"failed to scan {directory}: {e}") from e
            self.log.debug(f"{directory} vanished during scan", command=LogCommand.WATCH)
            return 0
        except OSError as e:
            raise WatchError(f"failed to scan {directory}: {e}") from e

        cycles = 0
        for entry in entries:
            try:
                decision = self._visit(entry)
            except FileNotFoundError:
                self.log.debug(f"{entry.path} vanished during scan", command=LogCommand.WATCH)
                continue
            except OSError as e:
                raise WatchError(f"failed to inspect {entry.path}: {e}") from e

            if decision is WalkDecision.SKIP:
                continue
            if decision is WalkDecision.REBUILD:
                relative = os.path.relpath(entry.path, self.target.directory)
                self.log.info(f"Modified {relative}", command=LogCommand.MODIFY)
                self.run_cycle()
                cycles += 1
            elif entry.is_dir(follow_symlinks=False):
                cycles += self._walk(Path(entry.path))
        return cycles

    def _visit(self, entry: os.DirEntry) -> WalkDecision:
        """Decide what to do with one directory entry."""
        if entry.name.startswith(BuildDefaults.HIDDEN_PREFIX):
            return WalkDecision.SKIP

        if not entry.is_file(follow_symlinks=False):
            return WalkDecision.CONTINUE
        if not entry.name.endswith(self.target.tracked_extension):
            return WalkDecision.CONTINUE

        # Compared against the current threshold, not one captured before the walk.
        modified = entry.stat(follow_symlinks=False).st_mtime
        if modified > self.builder.last_build_time:
            return WalkDecision.REBUILD
        return WalkDecision.CONTINUE

    def run_cycle(self) -> bool:
        """
        Run custom commands, build, and relaunch unless in build-only mode.

        Custom command and launch failures are logged and do not propagate.

        Returns:
            True if the build succeeded
        """
        try:
            self.runner.run_custom_commands()
        except CustomCommandError as e:
            handle_error(e, "custom command", severity=ErrorSeverity.WARNING,
                         reraise=False, logger=self.log, command=LogCommand.RUN)

        if not self.builder.build():
            return False

        if self.target.build_only:
            return True

        try:
            self.runner.launch()
        except LaunchError as e:
            handle_error(e, "launch", severity=ErrorSeverity.ERROR,
                         reraise=False, logger=self.log, command=LogCommand.RUN)
        return True
