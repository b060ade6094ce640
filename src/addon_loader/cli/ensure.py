"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency and exit with code 1.
"""

from collections.abc import Callable
from typing import TypeVar

import click

from addon_loader.cli.output import user_output
from addon_loader.core.errors import AddonLoaderError

T = TypeVar("T")


def _fail(error_message: str) -> None:
    user_output(click.style("Error: ", fg="red") + error_message)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing from `T | None` to `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            _fail(error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def succeeds(
        operation: Callable[[], T],
        error_message: str,
        exception_type: type[Exception] | tuple[type[Exception], ...] = RuntimeError,
    ) -> T:
        """Run operation, converting a failure into a styled error and exit.

        Args:
            operation: Zero-argument callable to run
            error_message: Context shown before the exception text
            exception_type: Exception class (or tuple of classes) to catch;
                others propagate

        Returns:
            The operation's result

        Raises:
            SystemExit: If operation raises exception_type (chained with from e)

        Example:
            >>> registry = Ensure.succeeds(
            ...     lambda: AddonRegistry.load(path, fs),
            ...     "Could not load addon registry",
            ...     exception_type=StorageError,
            ... )
        """
        try:
            return operation()
        except exception_type as e:
            _fail(f"{error_message}: {e}")
            raise SystemExit(1) from e

    @staticmethod
    def addon_call(operation: Callable[[], T], error_message: str) -> T:
        """Run a core addon-loader operation, exiting on AddonLoaderError.

        AddonLoaderError messages are already user-facing, so the error
        message is only used as a prefix.
        """
        return Ensure.succeeds(operation, error_message, exception_type=AddonLoaderError)

    @staticmethod
    def file_operation(operation: Callable[[], T], error_message: str) -> T:
        """Run a filesystem operation, exiting on OSError."""
        return Ensure.succeeds(operation, error_message, exception_type=OSError)
