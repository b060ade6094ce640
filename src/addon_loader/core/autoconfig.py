"""AutoConfig source files: the autoconfig.js template and config-prefs.js."""

from dataclasses import dataclass
from pathlib import Path

from addon_loader.core.errors import NotFoundError, TemplateError

DATA_DIR = Path(__file__).parent.parent / "data" / "autoconfig"
BUNDLED_TEMPLATE = DATA_DIR / "autoconfig.js.template"
BUNDLED_COMPANION = DATA_DIR / "config-prefs.js"

ARTIFACT_FILENAME = "autoconfig.js"
COMPANION_FILENAME = "config-prefs.js"


@dataclass(frozen=True)
class AutoConfigSources:
    """Inputs for an installation.

    Attributes:
        template: autoconfig.js template text containing the placeholder line
        companion: config-prefs.js contents, installed verbatim
    """

    template: str
    companion: str


def load_sources(template_path: Path | None = None) -> AutoConfigSources:
    """Read the template and companion file.

    Args:
        template_path: Custom template from config.toml; the bundled
            template is used when None

    Raises:
        NotFoundError: If the template or companion file does not exist
        TemplateError: If either file cannot be read or is not valid UTF-8
    """
    template_file = template_path if template_path is not None else BUNDLED_TEMPLATE
    if not template_file.is_file():
        raise NotFoundError(f"AutoConfig template not found: {template_file}")
    if not BUNDLED_COMPANION.is_file():
        raise NotFoundError(f"AutoConfig preferences file not found: {BUNDLED_COMPANION}")

    return AutoConfigSources(
        template=_read_source(template_file),
        companion=_read_source(BUNDLED_COMPANION),
    )


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Could not read {path}: {e}") from e
