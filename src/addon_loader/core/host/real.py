"""Production Firefox discovery and launch."""

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from addon_loader.core.host.abc import Host, HostInstallation, installation_for_binary

logger = logging.getLogger(__name__)

MACOS_CANDIDATES = (
    Path("/Applications/Firefox Developer Edition.app/Contents/MacOS/firefox"),
    Path("/Applications/Firefox Nightly.app/Contents/MacOS/firefox"),
    Path("/Applications/Firefox.app/Contents/MacOS/firefox"),
)
PATH_CANDIDATES = ("firefox-developer-edition", "firefox-nightly", "firefox")


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


class RealHost(Host):
    """Probes the FIREFOX_BIN override, macOS bundles, then PATH, in that order."""

    def __init__(
        self,
        *,
        configured_binary: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize with optional overrides.

        Args:
            configured_binary: firefox_bin from config.toml, used when
                FIREFOX_BIN is unset
            environ: Environment to read FIREFOX_BIN from (defaults to os.environ)
        """
        self._configured_binary = configured_binary
        self._environ = environ if environ is not None else os.environ

    def _candidates(self) -> list[Path]:
        candidates: list[Path] = []
        override = self._environ.get("FIREFOX_BIN") or self._configured_binary
        if override:
            candidates.append(Path(override).expanduser())
        candidates.extend(MACOS_CANDIDATES)
        for name in PATH_CANDIDATES:
            found = shutil.which(name)
            if found:
                candidates.append(Path(found))
        return candidates

    def find_installation(self) -> HostInstallation | None:
        for candidate in self._candidates():
            if _is_executable(candidate):
                logger.debug("Using Firefox binary %s", candidate)
                return installation_for_binary(candidate)
            logger.debug("No executable Firefox at %s", candidate)
        return None

    def launch(self, installation: HostInstallation, args: Sequence[str]) -> None:
        cmd = [str(installation.binary), *args]
        try:
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise RuntimeError(f"Failed to start Firefox\nCommand: {' '.join(cmd)}\n{e}") from e
        logger.debug("Launched %s", cmd)
