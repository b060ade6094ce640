"""Tests for the add command."""

from pathlib import Path

from click.testing import CliRunner

from addon_loader.cli.cli import cli
from tests.fakes.filesystem import FakeFilesystem
from tests.fakes.host import FakeHost
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.builders import (
    ARTIFACT_PATH,
    COMPANION_PATH,
    HOME,
    REGISTRY_PATH,
    RESOURCES_DIR,
    build_context,
    registry_text,
)


def test_add_first_addon_registers_and_installs() -> None:
    """Adding a relative path stores it absolutely and renders it into autoconfig.js."""
    fs = FakeFilesystem(directories={RESOURCES_DIR, HOME / "dev" / "my-addon"})
    feedback = FakeUserFeedback()
    ctx = build_context(fs, feedback=feedback)

    result = CliRunner().invoke(cli, ["add", "dev/my-addon"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert fs.files[REGISTRY_PATH] == "/home/me/dev/my-addon\n"
    assert '        "/home/me/dev/my-addon"\n' in fs.files[ARTIFACT_PATH]
    assert "ADDON_PATHS_PLACEHOLDER" not in fs.files[ARTIFACT_PATH]
    assert "general.config.filename" in fs.files[COMPANION_PATH]
    assert "Added addon: /home/me/dev/my-addon" in feedback.of_level("info")
    assert "Addon added successfully!" in feedback.of_level("success")
    assert "Restart Firefox to load the addon" in feedback.of_level("warning")


def test_add_appends_after_existing_entries() -> None:
    fs = FakeFilesystem(
        files={REGISTRY_PATH: registry_text("/addons/one")},
        directories={RESOURCES_DIR, Path("/addons/one"), Path("/addons/two")},
    )
    ctx = build_context(fs)

    result = CliRunner().invoke(cli, ["add", "/addons/two"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert fs.files[REGISTRY_PATH] == "/addons/one\n/addons/two\n"
    artifact = fs.files[ARTIFACT_PATH]
    assert '        "/addons/one",\n        "/addons/two"\n' in artifact


def test_add_duplicate_warns_and_changes_nothing() -> None:
    fs = FakeFilesystem(
        files={REGISTRY_PATH: registry_text("/addons/one")},
        directories={RESOURCES_DIR, Path("/addons/one")},
    )
    feedback = FakeUserFeedback()
    ctx = build_context(fs, feedback=feedback)

    result = CliRunner().invoke(cli, ["add", "/addons/one"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert feedback.of_level("warning") == ["Addon already in list: /addons/one"]
    assert fs.files[REGISTRY_PATH] == "/addons/one\n"
    assert fs.atomic_writes == []
    assert fs.writes == []


def test_add_nonexistent_path_fails_without_touching_registry() -> None:
    fs = FakeFilesystem(
        files={REGISTRY_PATH: registry_text("/addons/one")},
        directories={RESOURCES_DIR, Path("/addons/one")},
    )
    ctx = build_context(fs)

    result = CliRunner().invoke(cli, ["add", "/nope"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Cannot add addon: Addon path does not exist: /nope" in result.output
    assert fs.files[REGISTRY_PATH] == "/addons/one\n"
    assert ARTIFACT_PATH not in fs.files


def test_add_without_firefox_fails_before_registry_changes() -> None:
    fs = FakeFilesystem(files={REGISTRY_PATH: ""}, directories={Path("/addons/one")})
    ctx = build_context(fs, host=FakeHost())

    result = CliRunner().invoke(cli, ["add", "/addons/one"], obj=ctx)

    assert result.exit_code == 1
    assert "Firefox not found" in result.output
    assert fs.files[REGISTRY_PATH] == ""


def test_add_with_broken_custom_template_fails_before_registry_changes(tmp_path: Path) -> None:
    template = tmp_path / "custom.js.template"
    template.write_text("// no marker here\n", encoding="utf-8")
    fs = FakeFilesystem(
        files={REGISTRY_PATH: ""}, directories={RESOURCES_DIR, Path("/addons/one")}
    )
    ctx = build_context(fs, template_path=template)

    result = CliRunner().invoke(cli, ["add", "/addons/one"], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid AutoConfig template" in result.output
    assert fs.files[REGISTRY_PATH] == ""


def test_add_with_non_utf8_custom_template_fails_cleanly(tmp_path: Path) -> None:
    template = tmp_path / "custom.js.template"
    template.write_bytes(b"\xff\xfe// ADDON_PATHS_PLACEHOLDER\n")
    fs = FakeFilesystem(
        files={REGISTRY_PATH: ""}, directories={RESOURCES_DIR, Path("/addons/one")}
    )
    ctx = build_context(fs, template_path=template)

    result = CliRunner().invoke(cli, ["add", "/addons/one"], obj=ctx)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: Invalid AutoConfig template: Could not read" in result.output
    assert fs.files[REGISTRY_PATH] == ""
    assert ARTIFACT_PATH not in fs.files


def test_add_uses_custom_template(tmp_path: Path) -> None:
    template = tmp_path / "custom.js.template"
    template.write_text("// custom\nlet paths = [\n// ADDON_PATHS_PLACEHOLDER\n];\n")
    fs = FakeFilesystem(directories={RESOURCES_DIR, Path("/addons/one")})
    ctx = build_context(fs, template_path=template)

    result = CliRunner().invoke(cli, ["add", "/addons/one"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert fs.files[ARTIFACT_PATH] == '// custom\nlet paths = [\n        "/addons/one"\n];\n'


def test_add_dry_run_writes_nothing() -> None:
    fs = FakeFilesystem(
        files={REGISTRY_PATH: ""}, directories={RESOURCES_DIR, Path("/addons/one")}
    )
    ctx = build_context(fs, dry_run=True)

    result = CliRunner().invoke(cli, ["add", "/addons/one"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert f"[DRY RUN] Would write {REGISTRY_PATH}" in result.output
    assert f"[DRY RUN] Would write {ARTIFACT_PATH}" in result.output
    assert fs.files == {REGISTRY_PATH: ""}
