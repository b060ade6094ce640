from addon_loader.core.host.abc import (
    FirefoxVariant,
    Host,
    HostInstallation,
    detect_variant,
    installation_for_binary,
    require_installation,
)
from addon_loader.core.host.dry_run import DryRunHost
from addon_loader.core.host.real import RealHost

__all__ = [
    "DryRunHost",
    "FirefoxVariant",
    "Host",
    "HostInstallation",
    "RealHost",
    "detect_variant",
    "installation_for_binary",
    "require_installation",
]
