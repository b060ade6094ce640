"""Tests for the list command."""

from pathlib import Path

from click.testing import CliRunner

from addon_loader.cli.cli import cli
from tests.fakes.filesystem import FakeFilesystem
from tests.fakes.host import FakeHost
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.builders import (
    ARTIFACT_PATH,
    COMPANION_PATH,
    REGISTRY_PATH,
    build_context,
    registry_text,
)


def test_list_shows_entries_in_order_with_existence_markers() -> None:
    fs = FakeFilesystem(
        files={REGISTRY_PATH: registry_text("/addons/z", "/addons/gone", "/addons/a")},
        directories={Path("/addons/z"), Path("/addons/a")},
    )
    ctx = build_context(fs)

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines.index("  ✓ /addons/z") < lines.index("  ✗ /addons/gone (missing)")
    assert lines.index("  ✗ /addons/gone (missing)") < lines.index("  ✓ /addons/a")
    assert "Total: 3 addon(s)" in result.output
    assert "AutoConfig is NOT installed - run: addon-loader setup" in result.output


def test_list_reports_installed_state() -> None:
    fs = FakeFilesystem(
        files={
            REGISTRY_PATH: "",
            ARTIFACT_PATH: "js",
            COMPANION_PATH: "prefs",
        }
    )
    ctx = build_context(fs)

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "✓ AutoConfig is installed in Firefox" in result.output


def test_list_empty_registry_suggests_add() -> None:
    feedback = FakeUserFeedback()
    ctx = build_context(FakeFilesystem(), feedback=feedback)

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert feedback.of_level("warning") == ["No addons configured"]
    assert "Add addons with: addon-loader add <path>" in feedback.of_level("info")
    assert "Total:" not in result.output


def test_list_does_not_modify_registry() -> None:
    fs = FakeFilesystem(files={REGISTRY_PATH: registry_text("/addons/gone")})
    ctx = build_context(fs)

    CliRunner().invoke(cli, ["list"], obj=ctx)

    assert fs.files[REGISTRY_PATH] == "/addons/gone\n"
    assert fs.atomic_writes == []


def test_list_works_without_firefox() -> None:
    fs = FakeFilesystem(files={REGISTRY_PATH: registry_text("/addons/gone")})
    ctx = build_context(fs, host=FakeHost())

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "/addons/gone" in result.output
    assert "Firefox not found" in result.output


def test_list_unreadable_registry_fails() -> None:
    fs = FakeFilesystem(files={REGISTRY_PATH: "/a\n"}, unreadable={REGISTRY_PATH})
    ctx = build_context(fs)

    result = CliRunner().invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to load addon registry" in result.output
