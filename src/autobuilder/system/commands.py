"""
Command execution utilities.

This module provides functions for executing build and custom commands with
captured output, and for turning whitespace-separated command strings into
argument lists.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


def run_command(args: Sequence[str], cwd: Optional[Path] = None) -> Tuple[int, str]:
    """Execute a command synchronously and capture its combined output.

    Standard output and standard error are merged into a single stream so that
    diagnostics keep their original interleaving.

    Args:
        args: Program followed by its arguments.
        cwd: Working directory for the command, or None for the current one.

    Returns:
        Tuple of (return_code, combined_output).
        return_code is -1 when the command could not be started.
    """
    logger.debug(f"Executing command: {list(args)} in '{cwd}'")
    if not args:
        return -1, "Error: empty command"
    try:
        process = subprocess.run(
            list(args),
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        return process.returncode, process.stdout
    except FileNotFoundError as e:
        logger.debug(f"Command not found: {args[0]}: {e}")
        return -1, f"Error: Command not found '{args[0]}'"
    except OSError as e:
        logger.debug(f"Failed to start '{args[0]}': {type(e).__name__}: {e}")
        return -1, f"Error: {e}"


def prepare_commands(command: str) -> List[str]:
    """Split a command string on whitespace, dropping duplicates.

    The first occurrence of every piece is kept and order is preserved.

    Examples:
        >>> prepare_commands("  -race  -v -race ")
        ['-race', '-v']
        >>> prepare_commands("")
        []
    """
    seen = set()
    final = []
    for part in command.split():
        if part not in seen:
            seen.add(part)
            final.append(part)
    return final


def format_command(args: Sequence[str]) -> str:
    """Render an argument list for log messages."""
    return " ".join(str(a) for a in args)
