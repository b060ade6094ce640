"""Tests for CLI help formatter with grouped sections."""

from click.testing import CliRunner

from addon_loader.cli.cli import cli
from tests.fakes.filesystem import FakeFilesystem
from tests.test_utils.builders import build_context


def _help_output() -> str:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"], obj=build_context(FakeFilesystem()))
    assert result.exit_code == 0
    return result.output


def test_help_groups_commands_into_sections() -> None:
    output = _help_output()

    assert output.index("Addons:") < output.index("Firefox:") < output.index("Other:")


def test_commands_appear_in_registration_order() -> None:
    output = _help_output()
    addons_section = output[output.index("Addons:") : output.index("Firefox:")]
    names = [line.split()[0] for line in addons_section.splitlines()[1:] if line.strip()]

    assert names == ["add", "remove", "list"]


def test_help_command_listed_under_other() -> None:
    output = _help_output()

    assert "help" in output[output.index("Other:") :]


def test_short_help_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"], obj=build_context(FakeFilesystem()))

    assert result.exit_code == 0
    assert "Usage:" in result.output
