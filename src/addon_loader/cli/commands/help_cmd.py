"""Help command implementation."""

import click

from addon_loader.cli.ensure import Ensure
from addon_loader.cli.output import machine_output


@click.command("help")
@click.argument("command_name", required=False)
@click.pass_context
def help_cmd(click_ctx: click.Context, command_name: str | None) -> None:
    """Show help for addon-loader or one of its commands."""
    parent = Ensure.not_none(click_ctx.parent, "help must be run as an addon-loader subcommand")
    if command_name is None:
        machine_output(parent.get_help())
        return

    group = parent.command
    found = group.get_command(parent, command_name) if isinstance(group, click.Group) else None
    command = Ensure.not_none(found, f"Unknown command: {command_name}")
    with click.Context(command, info_name=command_name, parent=parent) as sub_ctx:
        machine_output(command.get_help(sub_ctx))
