"""No-op wrapper for Firefox launch."""

from collections.abc import Sequence

import click

from addon_loader.cli.output import user_output
from addon_loader.core.host.abc import Host, HostInstallation


class DryRunHost(Host):
    """No-op wrapper for host operations.

    Discovery is delegated to the wrapped implementation.
    Launching prints the command instead of starting Firefox.
    """

    def __init__(self, wrapped: Host) -> None:
        self._wrapped = wrapped

    def find_installation(self) -> HostInstallation | None:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.find_installation()

    def launch(self, installation: HostInstallation, args: Sequence[str]) -> None:
        """Print dry-run message instead of starting Firefox."""
        cmd = " ".join([str(installation.binary), *args])
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would run: {cmd}")
