"""
Command-line interface for the autobuilder package.
"""

from .main import build_parser, main_cli, parse_arguments

__all__ = [
    "build_parser",
    "main_cli",
    "parse_arguments",
]
