"""
Command-line interface for autobuilder.

This module parses command-line flags, resolves the configuration, exports
the optional environment file and runs the watcher until interrupted.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .. import __version__
from ..config import load_env_file, resolve_config
from ..logs import configure_logging
from ..orchestration import SignalHandler, Watcher
from ..validation import ValidationError, WatchError, handle_cli_error

logger = logging.getLogger(__name__)

# Flags whose value is usually a dash-prefixed argument list, e.g. -rc "-port 8080".
COMMAND_FLAGS = (
    "-cc", "--custom-command",
    "-bc", "--build-command",
    "-rc", "--run-command",
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser; flag names follow the original go tool."""
    parser = argparse.ArgumentParser(
        prog="autobuilder",
        description="Rebuild and restart a project whenever its source files change.",
    )
    parser.add_argument("-p", "--path", type=str, default=None,
                        help="The directory to be watched. Defaults to the working directory.")
    parser.add_argument("-n", "--name", type=str, default=None,
                        help="Project name. Defaults to the directory name.")
    parser.add_argument("-e", "--env-file", type=str, default=None,
                        help="Environment file with KEY=VALUE lines.")
    parser.add_argument("-v", "--version", action="store_true",
                        help="Print the version and exit.")
    parser.add_argument("-b", "--build-only", action="store_true", default=None,
                        help="Build only mode: never run the binary.")
    parser.add_argument("-cc", "--custom-command", type=str, default=None,
                        help="Custom command to run before the build.")
    parser.add_argument("-bc", "--build-command", type=str, default=None,
                        help="Extra arguments for the build.")
    parser.add_argument("-rc", "--run-command", type=str, default=None,
                        help="Arguments for the binary when running.")
    parser.add_argument("-c", "--config", type=str, default=None,
                        help="TOML settings file with an [autobuilder] table.")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level.")
    return parser


def join_command_values(argv: List[str]) -> List[str]:
    """
    Attach the value following a command flag to the flag itself.

    argparse treats a separate value such as ``-race`` as another option,
    so ``-bc -race`` is rewritten to ``-bc=-race`` before parsing.
    """
    joined: List[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            joined.extend(argv[i:])
            break
        if arg in COMMAND_FLAGS and i + 1 < len(argv):
            joined.append(f"{arg}={argv[i + 1]}")
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments, accepting dash-prefixed command values."""
    if argv is None:
        argv = sys.argv[1:]
    return build_parser().parse_args(join_command_values(list(argv)))


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "path": args.path,
        "name": args.name,
        "env_file": args.env_file,
        "build_only": args.build_only,
        "custom_command": args.custom_command,
        "build_command": args.build_command,
        "run_command": args.run_command,
    }


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line entry point.

    Raises:
        SystemExit: 0 on interrupt or --version, 1 on configuration or scan errors
    """
    args = parse_arguments(argv)

    if args.version:
        print(f"autobuilder v{__version__}")
        sys.exit(0)

    configure_logging(args.log_level)

    signal_handler = SignalHandler()
    signal_handler.install()

    try:
        config = resolve_config(
            overrides=_overrides(args),
            config_file=Path(args.config) if args.config else None,
        )
    except (ValidationError, OSError, ValueError) as e:
        handle_cli_error(error=e, context="configuration", exit_code=1, logger=logger)

    if config.env_file is not None:
        try:
            load_env_file(config.env_file)
        except OSError as e:
            handle_cli_error(error=e, context="reading env file", exit_code=1, logger=logger)

    watcher = Watcher(config, logger=logging.getLogger("autobuilder"))
    try:
        watcher.watch()
    except WatchError as e:
        handle_cli_error(error=e, context="watching", exit_code=1, logger=logger)
    finally:
        signal_handler.restore()


if __name__ == "__main__":
    main_cli()
