"""Installation of the AutoConfig files into the Firefox resources directory.

Two files are installed:

- ``<resources>/defaults/pref/config-prefs.js`` enables AutoConfig
- ``<resources>/autoconfig.js`` is the rendered artifact listing the addons

Firefox upgrades replace the resources directory and silently drop both
files. The synchronizer only checks for their presence; any install rewrites
both, so a half-finished install is repaired by the next one.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from addon_loader.core.autoconfig import ARTIFACT_FILENAME, COMPANION_FILENAME
from addon_loader.core.filesystem.abc import Filesystem
from addon_loader.core.host.abc import HostInstallation

logger = logging.getLogger(__name__)


class InstallationState(Enum):
    NOT_INSTALLED = "not_installed"
    INSTALLED = "installed"


@dataclass(frozen=True)
class InstallationTarget:
    """Where the two AutoConfig files go."""

    companion_path: Path
    artifact_path: Path

    @staticmethod
    def for_installation(installation: HostInstallation) -> "InstallationTarget":
        resources = installation.resources_dir
        return InstallationTarget(
            companion_path=resources / "defaults" / "pref" / COMPANION_FILENAME,
            artifact_path=resources / ARTIFACT_FILENAME,
        )


@dataclass(frozen=True)
class InstallReport:
    """Result of an install: the target written and directories created for it."""

    target: InstallationTarget
    created_dirs: tuple[Path, ...]


class InstallationSynchronizer:
    """Keeps the AutoConfig files present in an installation target."""

    def __init__(self, filesystem: Filesystem, target: InstallationTarget) -> None:
        self._filesystem = filesystem
        self._target = target

    @property
    def target(self) -> InstallationTarget:
        return self._target

    def is_synchronized(self) -> bool:
        """Return True if both files are present (contents are not compared)."""
        return self._filesystem.is_file(self._target.companion_path) and self._filesystem.is_file(
            self._target.artifact_path
        )

    def state(self) -> InstallationState:
        if self.is_synchronized():
            return InstallationState.INSTALLED
        return InstallationState.NOT_INSTALLED

    def install(self, artifact_text: str, companion_text: str) -> InstallReport:
        """Write both files, creating directories as needed.

        The companion file is written before the artifact. The pair is not
        written atomically.

        Raises:
            OSError: If a directory or file cannot be written
        """
        directories = sorted(
            {self._target.artifact_path.parent, self._target.companion_path.parent},
            key=lambda p: len(p.parts),
        )
        created = tuple(d for d in directories if self._filesystem.ensure_dir(d))

        self._filesystem.write_text(self._target.companion_path, companion_text)
        logger.debug("Installed %s", self._target.companion_path)
        self._filesystem.write_text(self._target.artifact_path, artifact_text)
        logger.debug("Installed %s", self._target.artifact_path)

        return InstallReport(target=self._target, created_dirs=created)

    def ensure_installed(
        self, render: Callable[[], str], companion_text: str
    ) -> InstallReport | None:
        """Install only if the target is not synchronized.

        Args:
            render: Produces fresh artifact text; only called when installing
            companion_text: config-prefs.js contents

        Returns:
            InstallReport if an install happened, None if already synchronized
        """
        if self.is_synchronized():
            return None
        logger.debug("Installation target %s not synchronized", self._target.artifact_path)
        return self.install(render(), companion_text)
