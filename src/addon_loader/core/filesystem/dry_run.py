"""No-op wrapper for filesystem operations."""

from pathlib import Path

import click

from addon_loader.cli.output import user_output
from addon_loader.core.filesystem.abc import Filesystem


class DryRunFilesystem(Filesystem):
    """No-op wrapper for filesystem operations.

    Read operations are delegated to the wrapped implementation.
    Write operations print what would happen and return without executing.
    """

    def __init__(self, wrapped: Filesystem) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real filesystem implementation to wrap
        """
        self._wrapped = wrapped

    def path_exists(self, path: Path) -> bool:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.path_exists(path)

    def is_file(self, path: Path) -> bool:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.is_file(path)

    def read_text(self, path: Path) -> str:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.read_text(path)

    def write_text(self, path: Path, content: str) -> None:
        """Print dry-run message instead of writing."""
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would write {path}")

    def write_text_atomic(self, path: Path, content: str) -> None:
        """Print dry-run message instead of writing."""
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would write {path}")

    def ensure_dir(self, path: Path) -> bool:
        """Print dry-run message instead of creating the directory."""
        if self._wrapped.path_exists(path):
            return False
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would create {path}")
        return True
