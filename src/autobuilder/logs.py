"""
Log formatting for autobuilder.

Every line carries a one-letter command context (modified, build, run, watch,
interrupt, env export) so that a stream of rebuilds and restarts stays easy
to scan. Components receive a logger at construction time and wrap it in a
``CommandLogAdapter``; nothing here touches global state except
``configure_logging``, which only the CLI calls.
"""

import logging
import os
import sys
from enum import Enum
from typing import IO, Any, MutableMapping, Optional, Tuple, Union


class LogCommand(Enum):
    """Command context attached to a log record."""
    MODIFY = "M"
    BUILD = "B"
    RUN = "R"
    WATCH = "W"
    INTERRUPT = "I"
    EXPORT = "E"


_RESET = "\033[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[38;5;8m",
    logging.INFO: "\033[38;5;250m",
    logging.WARNING: "\033[38;5;214m",
    logging.ERROR: "\033[38;5;196m",
    logging.CRITICAL: "\033[38;5;196m",
}
_COMMAND_COLORS = {
    LogCommand.MODIFY: "\033[38;5;10m",
}
_DEFAULT_COMMAND_COLOR = "\033[38;5;7m"


class CommandFormatter(logging.Formatter):
    """
    Render records as ``[HH:MM:SS] <code> <LEVEL> message``.

    Records without a command context get a blank code column.
    """

    def __init__(self, use_color: bool = False):
        super().__init__(
            fmt="[%(asctime)s] %(command_code)s %(level_display)s %(message)s",
            datefmt="%H:%M:%S",
        )
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        command = getattr(record, "command", None)
        code = command.value if isinstance(command, LogCommand) else (command or " ")
        level = f"{record.levelname:<8}"
        if self.use_color:
            code_color = _COMMAND_COLORS.get(command, _DEFAULT_COMMAND_COLOR)
            code = f"{code_color}{code}{_RESET}"
            level = f"{_LEVEL_COLORS.get(record.levelno, '')}{level}{_RESET}"
        record.command_code = code
        record.level_display = level
        return super().format(record)


class CommandLogAdapter(logging.LoggerAdapter):
    """
    Logger adapter that accepts a ``command=`` keyword on every call.

    Example:
        log = CommandLogAdapter(logging.getLogger(__name__))
        log.info("Building app", command=LogCommand.BUILD)
    """

    def __init__(self, logger: Union[logging.Logger, logging.LoggerAdapter],
                 extra: Optional[MutableMapping[str, Any]] = None):
        super().__init__(logger, extra or {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra)
        extra.update(kwargs.pop("extra", None) or {})
        command = kwargs.pop("command", None)
        if command is not None:
            extra["command"] = command
        kwargs["extra"] = extra
        return msg, kwargs


def _stream_supports_color(stream: IO[str]) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def configure_logging(level: Union[int, str] = logging.INFO,
                      stream: Optional[IO[str]] = None) -> logging.Handler:
    """
    Install a ``CommandFormatter`` handler on the root logger.

    Any handler previously installed by this function is replaced, so the
    call is safe to repeat.

    Returns:
        The installed handler
    """
    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setFormatter(CommandFormatter(use_color=_stream_supports_color(stream)))
    handler.set_name("autobuilder")

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "autobuilder":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler
