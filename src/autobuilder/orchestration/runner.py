"""
Run step of the watch/build/run pipeline.

The runner owns the single application process launched from the latest
successful build. Relaunching always terminates the previous process first:
it is given a short grace period to exit on its own, then killed.
"""

import logging
import subprocess
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path
from typing import Optional, Sequence

from ..logs import CommandLogAdapter, LogCommand
from ..models.runtime import ProcessStatus, RunState
from ..system.commands import format_command, run_command
from ..system.processes import kill_process_tree
from ..validation import CustomCommandError, LaunchError, TerminationError
from ..models.defaults import TimeoutConstants

logger = logging.getLogger(__name__)


class Runner:
    """
    Launches the built application and runs the pre-build custom command.

    Args:
        app_name: Name of the binary inside app_path
        app_path: Project directory; the binary is launched from here
        run_args: Arguments passed to the binary
        custom_command: Command run before every build, may be empty
        grace_period: Seconds a previous process may take to exit
        logger: Logger to report through
    """

    def __init__(
        self,
        app_name: str,
        app_path: Path,
        run_args: Sequence[str] = (),
        custom_command: Sequence[str] = (),
        grace_period: float = TimeoutConstants.TERMINATION_GRACE_PERIOD,
        logger: Optional[logging.Logger] = None,
    ):
        self.directory = Path(app_path)
        self.process_path = self.directory / app_name
        self.grace_period = grace_period
        self.log = CommandLogAdapter(logger or globals()["logger"])
        self.state = RunState(run_args=list(run_args), custom_command=list(custom_command))

    @property
    def status(self) -> ProcessStatus:
        return self.state.status

    @property
    def process(self) -> Optional[subprocess.Popen]:
        return self.state.process

    def run_custom_commands(self) -> None:
        """
        Run the configured custom command, if any, capturing its output.

        Raises:
            CustomCommandError: If the command fails or cannot be started
        """
        command = self.state.custom_command
        if not command:
            return

        self.log.info(f"Running {format_command(command)}", command=LogCommand.RUN)
        return_code, output = run_command(command, cwd=self.directory)
        if return_code != 0:
            self.log.error(f"{command[0]} exited with code {return_code}: {output.rstrip()}",
                           command=LogCommand.RUN)
            raise CustomCommandError(
                f"custom command '{format_command(command)}' failed with exit code {return_code}",
                return_code=return_code,
                output=output,
            )

    def launch(self) -> subprocess.Popen:
        """
        Terminate the tracked process, then start a new one.

        The new process inherits this process's standard output and error.
        The call returns as soon as the process has started.

        Returns:
            The new process handle

        Raises:
            TerminationError: If waiting on the previous process failed
            LaunchError: If the new process could not be started
        """
        self.terminate()

        args = [str(self.process_path), *self.state.run_args]
        self.log.info(f"Running {format_command([self.process_path.name, *self.state.run_args])}",
                      command=LogCommand.RUN)
        try:
            process = subprocess.Popen(args, cwd=self.directory)
        except OSError as e:
            raise LaunchError(f"failed to start {self.process_path}: {e}") from e

        self.state.process = process
        self.state.status = ProcessStatus.RUNNING
        self.log.debug(f"Started PID {process.pid}", command=LogCommand.RUN)
        return process

    def terminate(self) -> None:
        """
        Stop the tracked process, if any.

        A background thread waits for the process to exit and completes a
        one-shot future. If the future is not done within the grace period,
        the process tree is killed and the future is awaited again, so the
        process is guaranteed gone when this returns.

        Raises:
            TerminationError: If waiting on the process raised
        """
        if self.state.status is ProcessStatus.NOT_STARTED:
            return

        process = self.state.process
        self.state.status = ProcessStatus.TERMINATING
        try:
            exited = self._watch_exit(process)
            try:
                try:
                    return_code = exited.result(timeout=self.grace_period)
                except FutureTimeoutError:
                    self.log.debug(
                        f"PID {process.pid} still running after {self.grace_period}s, killing it",
                        command=LogCommand.RUN,
                    )
                    kill_process_tree(process.pid)
                    return_code = exited.result()
            except OSError as e:
                raise TerminationError(f"failed to wait for PID {process.pid}: {e}") from e

            if return_code != 0:
                self.log.debug(f"PID {process.pid} exited with code {return_code}",
                               command=LogCommand.RUN)
        finally:
            self.state.process = None
            self.state.status = ProcessStatus.NOT_STARTED

    def _watch_exit(self, process: subprocess.Popen) -> "Future[int]":
        """Start a thread that completes the returned future when process exits."""
        exited: "Future[int]" = Future()

        def wait() -> None:
            try:
                exited.set_result(process.wait())
            except Exception as e:
                exited.set_exception(e)

        threading.Thread(target=wait, name=f"wait-{process.pid}", daemon=True).start()
        return exited
