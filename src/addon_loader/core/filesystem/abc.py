"""Filesystem operations interface.

This module provides a small abstraction over the filesystem calls made by the
registry and the installation synchronizer, so both can be exercised against
an in-memory fake.

Architecture:
- Filesystem: Abstract base class defining the interface
- RealFilesystem: Production implementation using pathlib and os.replace
- DryRunFilesystem: Wrapper that reports writes instead of performing them
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract interface for filesystem operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def path_exists(self, path: Path) -> bool:
        """Check if anything (file, directory, or other entry) exists at path."""
        ...

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Check if path exists and is a regular file."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Overwrite a UTF-8 text file in place.

        The parent directory must already exist.

        Raises:
            OSError: If the file cannot be written
        """
        ...

    @abstractmethod
    def write_text_atomic(self, path: Path, content: str) -> None:
        """Replace a UTF-8 text file so readers never observe a partial write.

        Content is written to a temporary file in the same directory and then
        renamed over the target. The parent directory is created if needed.

        Raises:
            OSError: If the file cannot be written or renamed
        """
        ...

    @abstractmethod
    def ensure_dir(self, path: Path) -> bool:
        """Create a directory and any missing parents.

        Returns:
            True if the directory was created, False if it already existed
        """
        ...
