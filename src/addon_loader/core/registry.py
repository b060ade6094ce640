"""Persistent, ordered, deduplicated registry of addon paths.

The registry file is plain text with one absolute path per line. Blank lines
and lines starting with ``#`` are ignored when loading and are not written back.
Every mutation rewrites the whole file through Filesystem.write_text_atomic,
so a crash mid-write never leaves a truncated registry behind.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from addon_loader.core.errors import NotFoundError, StorageError
from addon_loader.core.filesystem.abc import Filesystem
from addon_loader.core.paths import normalize_addon_path

logger = logging.getLogger(__name__)


class AddStatus(Enum):
    ADDED = "added"
    ALREADY_PRESENT = "already_present"


class RemoveStatus(Enum):
    REMOVED = "removed"
    NOT_PRESENT = "not_present"


@dataclass(frozen=True)
class AddResult:
    """Outcome of AddonRegistry.add().

    ALREADY_PRESENT is advisory: nothing was written and callers should warn
    rather than fail.
    """

    path: str
    status: AddStatus


@dataclass(frozen=True)
class RemoveResult:
    """Outcome of AddonRegistry.remove()."""

    path: str
    status: RemoveStatus


@dataclass(frozen=True)
class AddonStatus:
    """A registry entry paired with whether it currently exists on disk."""

    path: str
    exists: bool


def parse_registry(text: str) -> list[str]:
    """Parse registry file contents into an ordered list of unique entries.

    Comment and blank lines are dropped. A hand-edited file containing the
    same path twice keeps only the first occurrence. Only newline
    characters separate entries (a trailing carriage return is dropped), so
    form feeds and other characters str.splitlines() would break on stay part
    of the path.
    """
    entries: list[str] = []
    seen: set[str] = set()
    for raw_line in text.split("\n"):
        line = raw_line.removesuffix("\r")
        if not line.strip() or line.startswith("#"):
            continue
        if line in seen:
            continue
        seen.add(line)
        entries.append(line)
    return entries


def serialize_registry(entries: Iterable[str]) -> str:
    """Serialize entries to registry file contents (newline-terminated lines)."""
    return "".join(f"{entry}\n" for entry in entries)


class AddonRegistry:
    """Ordered set of addon paths backed by a text file.

    Construct with AddonRegistry.load(); the instance holds an in-memory copy
    of the entries and persists the full list after each mutation.
    """

    def __init__(self, path: Path, filesystem: Filesystem, entries: list[str]) -> None:
        self._path = path
        self._filesystem = filesystem
        self._entries = list(entries)

    @classmethod
    def load(cls, path: Path, filesystem: Filesystem) -> "AddonRegistry":
        """Load the registry stored at path, creating an empty file if absent.

        Args:
            path: Location of the registry file
            filesystem: Filesystem used for every read and write

        Returns:
            Loaded registry

        Raises:
            StorageError: If the file exists but cannot be read or decoded,
                or if the empty file cannot be created
        """
        if not filesystem.path_exists(path):
            logger.debug("Registry %s not found, creating empty registry", path)
            try:
                filesystem.write_text_atomic(path, "")
            except OSError as e:
                raise StorageError(f"Could not create addon registry at {path}: {e}") from e
            return cls(path, filesystem, [])

        try:
            text = filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read addon registry at {path}: {e}") from e

        entries = parse_registry(text)
        logger.debug("Loaded %d registry entries from %s", len(entries), path)
        return cls(path, filesystem, entries)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def contains(self, path: str) -> bool:
        return path in self._entries

    def add(self, raw_path: str, cwd: Path) -> AddResult:
        """Register an addon path.

        Args:
            raw_path: Path as supplied by the user; relative paths resolve against cwd
            cwd: Current working directory

        Returns:
            AddResult with the normalized path. ALREADY_PRESENT leaves the
            registry and its file untouched.

        Raises:
            NotFoundError: If nothing exists at the normalized path
            StorageError: If the path contains a line break, which the
                one-path-per-line file cannot store, or if the registry
                cannot be persisted
        """
        if not raw_path.strip():
            raise NotFoundError("Addon path is empty")
        if "\n" in raw_path or "\r" in raw_path:
            raise StorageError(f"Addon path contains a line break: {raw_path!r}")

        path = normalize_addon_path(raw_path, cwd)
        if not self._filesystem.path_exists(Path(path)):
            raise NotFoundError(f"Addon path does not exist: {path}")

        if path in self._entries:
            return AddResult(path=path, status=AddStatus.ALREADY_PRESENT)

        self._entries.append(path)
        self._persist()
        return AddResult(path=path, status=AddStatus.ADDED)

    def remove(self, raw_path: str, cwd: Path) -> RemoveResult:
        """Unregister an addon path.

        The path does not need to exist on disk, so entries whose addon has
        been deleted can still be removed.

        Raises:
            StorageError: If the registry cannot be persisted
        """
        path = normalize_addon_path(raw_path, cwd)
        if path not in self._entries:
            return RemoveResult(path=path, status=RemoveStatus.NOT_PRESENT)

        self._entries.remove(path)
        self._persist()
        return RemoveResult(path=path, status=RemoveStatus.REMOVED)

    def remove_many(self, paths: Iterable[str]) -> int:
        """Remove every given entry that is present, persisting once.

        Paths are matched exactly (no normalization); they are expected to
        come from this registry, e.g. via the interactive selector.

        Returns:
            Number of entries removed

        Raises:
            StorageError: If the registry cannot be persisted
        """
        targets = set(paths)
        remaining = [entry for entry in self._entries if entry not in targets]
        removed = len(self._entries) - len(remaining)
        if removed == 0:
            return 0

        self._entries = remaining
        self._persist()
        return removed

    def list(self) -> list[AddonStatus]:
        """Return entries in registry order with their current on-disk existence."""
        return [
            AddonStatus(path=entry, exists=self._filesystem.path_exists(Path(entry)))
            for entry in self._entries
        ]

    def _persist(self) -> None:
        try:
            self._filesystem.write_text_atomic(self._path, serialize_registry(self._entries))
        except OSError as e:
            raise StorageError(f"Could not write addon registry at {self._path}: {e}") from e
        logger.debug("Persisted %d registry entries to %s", len(self._entries), self._path)
