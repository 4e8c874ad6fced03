"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the bflong CLI.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from bflong.errors import BfLongError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Compilation, long-form, or output error
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def report_error(error: BfLongError, fatal: bool = True) -> None:
    """
    Print a bflong error to stderr.

    The error's own formatting already carries the location and hint lines.

    Args:
        error: The error to report
        fatal: If True, exit with ExitCode.BUILD_ERROR after reporting
    """
    click.echo(str(error), err=True)
    if fatal:
        sys.exit(ExitCode.BUILD_ERROR)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for CLI commands.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, BfLongError):
        report_error(error, fatal=True)

    if isinstance(error, (click.BadParameter, FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
