"""Formatting of registry entries and installation state for list/status."""

from collections.abc import Sequence

import click

from addon_loader.cli.output import user_output
from addon_loader.core.registry import AddonStatus


def format_addon_status(status: AddonStatus) -> str:
    if status.exists:
        return f"  {click.style('✓', fg='green')} {status.path}"
    return f"  {click.style('✗', fg='red')} {status.path} (missing)"


def print_addons(statuses: Sequence[AddonStatus]) -> None:
    for status in statuses:
        user_output(format_addon_status(status))


def format_install_state(installed: bool) -> str:
    if installed:
        return click.style("✓", fg="green") + " AutoConfig is installed in Firefox"
    return click.style("✗", fg="yellow") + " AutoConfig is NOT installed - run: addon-loader setup"
