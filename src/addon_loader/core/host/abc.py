"""Firefox installation discovery and launch interface.

Architecture:
- Host: Abstract base class defining the interface
- RealHost: Production implementation probing well-known install locations
- DryRunHost: Wrapper that reports launches instead of performing them
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from addon_loader.core.errors import NotFoundError

MACOS_BINARY_SUFFIX = ("Contents", "MacOS", "firefox")


class FirefoxVariant(Enum):
    NIGHTLY = "nightly"
    DEVELOPER = "developer"
    RELEASE = "release"


@dataclass(frozen=True)
class HostInstallation:
    """A discovered Firefox installation.

    Attributes:
        binary: Executable used to launch Firefox
        app_root: Application root (the .app bundle on macOS)
        resources_dir: Directory Firefox reads autoconfig.js from
        variant: Release channel inferred from the binary path
    """

    binary: Path
    app_root: Path
    resources_dir: Path
    variant: FirefoxVariant


def detect_variant(binary: Path) -> FirefoxVariant:
    """Infer the release channel from the binary path."""
    text = str(binary)
    if "Nightly" in text:
        return FirefoxVariant.NIGHTLY
    if "Developer Edition" in text:
        return FirefoxVariant.DEVELOPER
    return FirefoxVariant.RELEASE


def installation_for_binary(binary: Path) -> HostInstallation:
    """Derive the installation layout from a Firefox binary path.

    macOS bundles keep resources under ``X.app/Contents/Resources``. Elsewhere
    the binary on PATH is usually a symlink into the install directory, which
    doubles as the resources directory.

    Example:
        >>> inst = installation_for_binary(
        ...     Path("/Applications/Firefox.app/Contents/MacOS/firefox")
        ... )
        >>> inst.resources_dir
        PosixPath('/Applications/Firefox.app/Contents/Resources')
    """
    if binary.parts[-3:] == MACOS_BINARY_SUFFIX:
        app_root = binary.parents[2]
        resources_dir = app_root / "Contents" / "Resources"
    else:
        app_root = binary.resolve().parent
        resources_dir = app_root
    return HostInstallation(
        binary=binary,
        app_root=app_root,
        resources_dir=resources_dir,
        variant=detect_variant(binary),
    )


class Host(ABC):
    """Abstract interface for locating and launching Firefox."""

    @abstractmethod
    def find_installation(self) -> HostInstallation | None:
        """Locate the Firefox installation.

        Returns:
            HostInstallation, or None if no Firefox executable was found
        """
        ...

    @abstractmethod
    def launch(self, installation: HostInstallation, args: Sequence[str]) -> None:
        """Start Firefox in the background, forwarding extra arguments.

        Raises:
            RuntimeError: If the process could not be started
        """
        ...


def require_installation(host: Host) -> HostInstallation:
    """Locate Firefox or fail.

    Raises:
        NotFoundError: If no Firefox executable was found
    """
    installation = host.find_installation()
    if installation is None:
        raise NotFoundError("Firefox not found (set FIREFOX_BIN to the Firefox executable)")
    return installation
