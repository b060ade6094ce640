"""Production filesystem implementation."""

import logging
import os
import tempfile
from pathlib import Path

from addon_loader.core.filesystem.abc import Filesystem

logger = logging.getLogger(__name__)


def _fsync_dir(path: Path) -> None:
    # Directory fsync is unsupported on some platforms; the rename has still happened.
    try:
        fd = os.open(str(path), os.O_RDONLY)
    except OSError:
        return
    try:
        os.fsync(fd)
    except OSError:
        logger.debug("fsync not supported for directory %s", path)
    finally:
        os.close(fd)


class RealFilesystem(Filesystem):
    """Production implementation backed by the local filesystem."""

    def path_exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d bytes to %s", len(content), path)

    def write_text_atomic(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="\n",
                dir=str(path.parent),
                prefix=path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                temp_path = Path(tmp.name)
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(temp_path, path)
            temp_path = None
            _fsync_dir(path.parent)
            logger.debug("Atomically replaced %s", path)
        finally:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)

    def ensure_dir(self, path: Path) -> bool:
        if path.is_dir():
            return False
        path.mkdir(parents=True, exist_ok=True)
        return True
