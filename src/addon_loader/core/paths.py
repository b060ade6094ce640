"""Canonicalization of user-supplied addon paths."""

import os
from pathlib import Path


def normalize_addon_path(raw: str, cwd: Path) -> str:
    """Convert a user-supplied path into the absolute string stored in the registry.

    Absolute paths are kept verbatim. A leading ``~`` is expanded. Relative
    paths are joined to ``cwd`` and their ``.``/``..`` segments collapsed.
    Symlinks are never resolved and case is never changed, so two spellings
    of the same directory remain distinct entries.

    Args:
        raw: Path exactly as typed by the user
        cwd: Directory relative paths are resolved against

    Returns:
        Absolute path string

    Example:
        >>> normalize_addon_path("dev/my-addon", Path("/home/me"))
        '/home/me/dev/my-addon'
        >>> normalize_addon_path("/opt/addon.xpi", Path("/home/me"))
        '/opt/addon.xpi'
    """
    expanded = os.path.expanduser(raw)
    if os.path.isabs(expanded):
        return expanded
    return os.path.normpath(os.path.join(str(cwd), expanded))
