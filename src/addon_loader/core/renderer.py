"""Rendering of autoconfig.js from its template and the registry entries.

The template is copied verbatim except for the single line carrying the
placeholder marker, which is replaced by one JavaScript string literal per
addon that exists on disk:

    const addonPaths = [
    // ADDON_PATHS_PLACEHOLDER
    ];

becomes

    const addonPaths = [
            "/home/me/dev/first-addon",
            "/home/me/downloads/second.xpi"
    ];
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from addon_loader.core.errors import TemplateError

PLACEHOLDER_MARKER = "// ADDON_PATHS_PLACEHOLDER"
ENTRY_INDENT = " " * 8
ENTRY_SEPARATOR = ","


@dataclass(frozen=True)
class RenderResult:
    """Rendered artifact plus which entries made it in.

    Attributes:
        text: Full autoconfig.js contents
        included: Entries written into the artifact, in registry order
        skipped: Entries left out because nothing exists at their path
    """

    text: str
    included: tuple[str, ...]
    skipped: tuple[str, ...]


def escape_js_string(value: str) -> str:
    """Escape a value for use inside a double-quoted JavaScript string literal.

    Backslashes are escaped before double quotes; the reverse order would
    double the backslashes introduced for the quotes.
    """
    return value.replace("\\", "\\\\").replace('"', '\\"')


def format_entry_line(path: str, *, last: bool) -> str:
    separator = "" if last else ENTRY_SEPARATOR
    return f'{ENTRY_INDENT}"{escape_js_string(path)}"{separator}\n'


def _find_placeholder(lines: list[str]) -> int:
    positions = [i for i, line in enumerate(lines) if PLACEHOLDER_MARKER in line]
    if not positions:
        raise TemplateError(f"Template is missing the placeholder line '{PLACEHOLDER_MARKER}'")
    if len(positions) > 1:
        raise TemplateError(
            f"Template contains {len(positions)} placeholder lines "
            f"'{PLACEHOLDER_MARKER}', expected exactly one"
        )
    return positions[0]


def render_artifact(
    template: str,
    entries: Sequence[str],
    path_exists: Callable[[str], bool],
) -> RenderResult:
    """Render autoconfig.js contents.

    Pure function of its inputs: the same template, entries, and existence
    answers always produce identical output.

    Args:
        template: Template text containing exactly one placeholder line
        entries: Registry entries in registry order
        path_exists: Existence check used to skip entries missing on disk

    Returns:
        RenderResult with the artifact text and included/skipped entries

    Raises:
        TemplateError: If the placeholder line is absent or repeated
    """
    lines = template.splitlines(keepends=True)
    index = _find_placeholder(lines)

    included = tuple(entry for entry in entries if path_exists(entry))
    skipped = tuple(entry for entry in entries if entry not in included)

    generated = [
        format_entry_line(path, last=position == len(included) - 1)
        for position, path in enumerate(included)
    ]
    text = "".join(lines[:index] + generated + lines[index + 1 :])
    return RenderResult(text=text, included=included, skipped=skipped)


def validate_template(template: str) -> None:
    """Check the template has exactly one placeholder line.

    Raises:
        TemplateError: If the placeholder line is absent or repeated
    """
    _find_placeholder(template.splitlines())
