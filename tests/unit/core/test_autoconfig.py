"""Tests for loading the AutoConfig template and preferences file."""

from pathlib import Path

import pytest

from addon_loader.core.autoconfig import load_sources
from addon_loader.core.errors import NotFoundError, TemplateError
from addon_loader.core.renderer import PLACEHOLDER_MARKER


def test_bundled_sources() -> None:
    sources = load_sources()

    assert PLACEHOLDER_MARKER in sources.template
    assert 'pref("general.config.filename", "autoconfig.js");' in sources.companion


def test_custom_template_replaces_bundled_one(tmp_path: Path) -> None:
    template = tmp_path / "custom.js.template"
    template.write_text(f"{PLACEHOLDER_MARKER}\n", encoding="utf-8")

    assert load_sources(template).template == f"{PLACEHOLDER_MARKER}\n"


def test_missing_template_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError, match="AutoConfig template not found"):
        load_sources(tmp_path / "nope.js.template")


def test_non_utf8_template_raises_template_error(tmp_path: Path) -> None:
    template = tmp_path / "custom.js.template"
    template.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(TemplateError, match="Could not read") as exc_info:
        load_sources(template)

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
