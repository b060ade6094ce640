"""Exception hierarchy for addon-loader operations.

Core modules raise these; the CLI layer converts them into a styled
"Error:" message and a non-zero exit code. Advisory outcomes such as an
addon that is already registered are not exceptions, see
addon_loader.core.registry.
"""


class AddonLoaderError(Exception):
    """Base class for all fatal addon-loader errors."""


class NotFoundError(AddonLoaderError):
    """A referenced addon path, template, or the Firefox installation does not exist."""


class StorageError(AddonLoaderError):
    """The addon registry file could not be read or written."""


class TemplateError(AddonLoaderError):
    """The AutoConfig template is malformed (placeholder marker missing or repeated)."""
