"""
System interaction utilities: command execution and process tree handling.
"""

from .commands import format_command, prepare_commands, run_command
from .processes import kill_process_tree

__all__ = [
    "format_command",
    "prepare_commands",
    "run_command",
    "kill_process_tree",
]
