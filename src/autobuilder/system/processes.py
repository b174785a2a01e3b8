"""
Process tree handling.

The application launched by the runner may start children of its own; when
it has to be forcibly stopped the whole tree is killed so that no orphan
keeps a port or file open across restarts.
"""

import logging
from typing import List

import psutil

logger = logging.getLogger(__name__)


def _get_process_children(parent: psutil.Process) -> List[psutil.Process]:
    """Safely get all descendants of a process, handling race conditions."""
    try:
        return parent.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return []


def kill_process_tree(pid: int) -> int:
    """
    Send SIGKILL to a process and all of its descendants.

    Descendants are collected before the parent is killed, since killing the
    parent first would re-parent them and hide them from the lookup.

    Args:
        pid: Process ID of the tree root

    Returns:
        Number of processes a kill signal was delivered to
    """
    if pid <= 0:
        logger.warning(f"Invalid PID {pid}, skipping kill")
        return 0

    try:
        parent = psutil.Process(pid)
    except psutil.NoSuchProcess:
        logger.debug(f"Process {pid} already terminated")
        return 0

    killed = 0
    for process in _get_process_children(parent) + [parent]:
        try:
            process.kill()
            killed += 1
            logger.debug(f"Sent SIGKILL to PID {process.pid}")
        except psutil.NoSuchProcess:
            continue
        except psutil.AccessDenied:
            logger.warning(f"Access denied sending SIGKILL to PID {process.pid}")
    return killed
