from addon_loader.core.filesystem.abc import Filesystem
from addon_loader.core.filesystem.dry_run import DryRunFilesystem
from addon_loader.core.filesystem.real import RealFilesystem

__all__ = ["DryRunFilesystem", "Filesystem", "RealFilesystem"]
