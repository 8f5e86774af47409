"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn, Optional

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    SCAN_ERROR = 1       # Source could not be scanned
    INVALID_ARGS = 2     # Invalid arguments or unreadable files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    source: Optional[str] = None,
    verbose: bool = False,
) -> NoReturn:
    """
    Unified exception handler for the CLI tools.

    Scanner errors are rendered against the source they came from when it
    is available. Other errors are reported on one line; a traceback is
    printed for internal errors in verbose mode.

    Args:
        error: The exception that was raised
        source: The source text being scanned, if it was read
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from tinylang.errors import ScanError, TinyLangError
    from tinylang.scanner.diagnostics import render

    if isinstance(error, ScanError) and source is not None:
        click.echo(render(error, source), err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    elif isinstance(error, TinyLangError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    elif isinstance(error, (click.BadParameter, FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: input is not valid UTF-8: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
