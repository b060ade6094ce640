"""Output utilities for CLI commands with clear intent.

user_output() is for human-readable messages and routes to stderr.
machine_output() is for data meant to be piped or parsed and routes to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output an informational message for the user (stderr)."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output data for scripts and pipes (stdout)."""
    click.echo(message, nl=nl)
