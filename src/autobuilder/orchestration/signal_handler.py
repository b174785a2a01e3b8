"""
Signal handling for the orchestration module.

An interrupt ends autobuilder immediately with status 0. The application
process and any build in flight are not stopped gracefully; they receive the
same terminal interrupt as part of the foreground process group.
"""

import logging
import signal
import sys
from typing import Any, Optional

from ..logs import CommandLogAdapter, LogCommand

logger = logging.getLogger(__name__)


class SignalHandler:
    """
    Installs and restores the SIGINT handler.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.log = CommandLogAdapter(logger or globals()["logger"])
        self._original_sigint_handler: Any = None
        self._installed = False

    def install(self) -> None:
        """Register the interrupt handler, remembering the previous one."""
        self._original_sigint_handler = signal.signal(signal.SIGINT, self._handle_interrupt)
        self._installed = True
        self.log.debug("SIGINT handler installed")

    def restore(self) -> None:
        """Restore the original SIGINT handler."""
        if not self._installed:
            return
        signal.signal(signal.SIGINT, self._original_sigint_handler)
        self._installed = False
        self.log.debug("SIGINT handler restored")

    def _handle_interrupt(self, signum: int, frame: Any) -> None:
        self.log.info(f"Signal {signal.strsignal(signum)} received, exiting",
                      command=LogCommand.INTERRUPT)
        sys.exit(0)
